"""
Invoice check API routes.
"""

from fastapi import APIRouter, Query
from typing import Optional
from datetime import date
import structlog

from exceptions import InvalidInvoiceQueryError
from models.invoice import InvoiceCheckResponse
from routes.errors import handle_error
from services.invoice_service import get_invoice_service

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/status", response_model=InvoiceCheckResponse)
def get_invoice_status(
    brand: str = Query("", description="Brand label (case-insensitive)"),
    invoice_number: str = Query("", description="Invoice number (case-insensitive)"),
    today: Optional[date] = Query(None, description="Override the sheet's today cell"),
):
    """
    Check whether inbound stock covers an invoice.

    Each line is READY when stock left after older invoices covers it.
    An unknown invoice returns found=false with no lines.
    """
    try:
        if not brand.strip() or not invoice_number.strip():
            raise InvalidInvoiceQueryError(brand, invoice_number)

        service = get_invoice_service()
        return service.find_invoice_status(brand, invoice_number, today=today)

    except Exception as e:
        return handle_error(e)
