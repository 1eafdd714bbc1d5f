"""
Invoice service: Fetches the invoice sheet and reconciles one invoice.
"""

from datetime import date
from decimal import Decimal
from typing import Callable, Optional
import structlog

from integrations.sheets_feed import SheetSource, fetch_table
from models.invoice import InvoiceCheckResponse
from models.sheet import RawTable
from services.invoice_reconciler_service import (
    find_target_column,
    read_invoice_columns,
    reconcile_column,
)

logger = structlog.get_logger(__name__)


class InvoiceService:
    """Invoice readiness checks against the live invoice sheet."""

    def __init__(self, fetcher: Callable[[SheetSource], RawTable] = fetch_table):
        self.fetcher = fetcher

    def find_invoice_status(
        self,
        brand: str,
        invoice_number: str,
        today: Optional[date] = None,
    ) -> InvoiceCheckResponse:
        """
        Fetch the invoice sheet and reconcile one brand + invoice number.

        An unknown invoice is a valid empty result (found=False).

        Raises:
            SheetFetchError: If the sheet cannot be fetched
        """
        table = self.fetcher(SheetSource.INVOICE)

        columns = read_invoice_columns(table)
        target = find_target_column(table, brand, invoice_number, columns=columns)
        lines = reconcile_column(table, target, columns, today=today) if target else []
        total_qty = sum((line.qty for line in lines), Decimal("0"))

        logger.info(
            "invoice_check_completed",
            brand=brand,
            invoice_number=invoice_number,
            found=target is not None,
            lines=len(lines),
            total_qty=str(total_qty),
        )

        return InvoiceCheckResponse(
            brand=brand,
            invoice_number=invoice_number,
            found=target is not None,
            target_date=target.target_date if target else None,
            lines=lines,
            total_qty=total_qty,
            line_count=len(lines),
        )


# Singleton
_invoice_service: Optional[InvoiceService] = None


def get_invoice_service() -> InvoiceService:
    """Get singleton instance of InvoiceService."""
    global _invoice_service
    if _invoice_service is None:
        _invoice_service = InvoiceService()
    return _invoice_service
