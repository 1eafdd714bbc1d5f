"""
Business logic services.

Each service handles one domain area.
"""

from services.production_service import ProductionService, get_production_service
from services.invoice_service import InvoiceService, get_invoice_service
from services.production_stats_service import aggregate
from services.invoice_reconciler_service import find_invoice_status

__all__ = [
    "ProductionService",
    "get_production_service",
    "InvoiceService",
    "get_invoice_service",
    "aggregate",
    "find_invoice_status",
]
