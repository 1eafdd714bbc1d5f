"""
Test suite for the production tracker.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_invoice_reconciler_service.py -v
"""
