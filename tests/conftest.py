"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

import pytest
from datetime import date

from tests.factories import (
    InvoiceSheetFactory,
    ProductionSheetFactory,
    gviz_date,
)


# ===================
# FIXED DAYS
# ===================

@pytest.fixture
def today() -> date:
    """Reference day used by date-sensitive tests."""
    return date(2026, 2, 10)


# ===================
# SAMPLE SHEETS
# ===================

@pytest.fixture
def production_table():
    """
    Production sheet with three daily columns and four data rows.

    Row 6 has no work order and must be skipped.
    """
    return ProductionSheetFactory.create(
        daily_headers=[
            (gviz_date(2026, 1, 26), "Line 8", "Shift 1"),
            (gviz_date(2026, 1, 27), "Line 8", "Shift 2"),
            ("[Line 3] 28-01-2026", None, "Shift 1"),
        ],
        rows=[
            ProductionSheetFactory.row(
                work_order="WO-0001",
                production_date={"v": gviz_date(2026, 1, 26), "f": "[Line 8] 26-01-2026"},
                order_qty=1000,
                produced_qty=400,
                remaining_qty=600,
                daily=[200, 200, None],
            ),
            ProductionSheetFactory.row(
                work_order={"v": 12, "f": "00012"},
                production_date="On Producing",
                order_qty={"v": "2,500", "f": "2,500"},
                produced_qty={"v": None, "f": "1,000"},
                remaining_qty="1,500",
                daily=[None, None, 1000],
            ),
            ProductionSheetFactory.row(work_order="", production_date=None),
            ProductionSheetFactory.row(
                work_order="WO-0003",
                production_date="【Line 2】3/15",
                order_qty="n/a",
                produced_qty=None,
                remaining_qty=0,
            ),
        ],
    )


@pytest.fixture
def invoice_table():
    """
    Invoice sheet with four invoice columns.

    Columns 14 and 15 share a date; column 17 is undated.
    """
    return InvoiceSheetFactory.create(
        columns=[
            ("BEIS", gviz_date(2026, 2, 1), "INV-100"),
            ("BEIS", gviz_date(2026, 2, 1), "INV-101"),
            ("ULI", gviz_date(2026, 3, 1), "INV-200"),
            ("BEIS", None, "INV-300"),
        ],
        rows=[
            InvoiceSheetFactory.row(po="PO-A", qty_in=100, rework=2, invoices=[60, 50, None, 10]),
            InvoiceSheetFactory.row(po="PO-B", qty_in=200, invoices=[None, 80, 100]),
            InvoiceSheetFactory.row(po="PO-C", qty_in=50, invoices=[0, None, 40]),
        ],
    )


# ===================
# FAKE FETCHER
# ===================

@pytest.fixture
def fake_fetcher():
    """
    Build a fetcher that serves tables from a dict instead of the network.

    Usage:
        def test_something(fake_fetcher, production_table):
            fetcher = fake_fetcher({SheetSource.PRODUCTION: production_table})
            service = ProductionService(fetcher=fetcher)
    """
    def _build(tables: dict):
        def fetch(source):
            table = tables[source]
            if isinstance(table, Exception):
                raise table
            return table
        return fetch

    return _build


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client():
    """
    Create FastAPI test client.

    Usage:
        def test_endpoint(test_client):
            response = test_client.get("/health")
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)
