"""
Custom exception classes for the application.

Parsing problems inside a sheet (bad cells, rows without a work order,
unknown invoices) are not errors: they degrade to defaults or empty results.
Only a failed or unreadable sheet fetch is raised to the caller.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "SHEET_FETCH_FAILED")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


class ExternalServiceError(AppError):
    """External service failure (503)."""

    def __init__(
        self,
        service: str,
        message: str,
        details: Optional[dict] = None,
        code: Optional[str] = None
    ):
        super().__init__(
            code=code or f"{service.upper()}_ERROR",
            message=message,
            status_code=503,
            details={"service": service, **(details or {})}
        )


# ===================
# SHEET FEED ERRORS
# ===================

class SheetFetchError(ExternalServiceError):
    """Sheet could not be fetched (network failure or bad HTTP status)."""

    def __init__(
        self,
        sheet: str,
        message: str = "Connection failed. Please ensure the Spreadsheet is shared.",
        details: Optional[dict] = None,
        code: str = "SHEET_FETCH_FAILED"
    ):
        super().__init__(
            service="sheets",
            message=message,
            details={"sheet": sheet, **(details or {})},
            code=code
        )


class SheetEnvelopeError(SheetFetchError):
    """Sheet response arrived but its envelope is not a readable table."""

    def __init__(self, sheet: str, reason: str):
        super().__init__(
            sheet=sheet,
            message=f"Sheet response is not a valid table: {reason}",
            details={"reason": reason},
            code="SHEET_ENVELOPE_INVALID"
        )


# ===================
# INVOICE QUERY ERRORS
# ===================

class InvalidInvoiceQueryError(ValidationError):
    """Brand or invoice number missing from an invoice lookup."""

    def __init__(self, brand: Optional[str], invoice_number: Optional[str]):
        super().__init__(
            code="INVOICE_QUERY_INVALID",
            message="Both brand and invoice number are required",
            details={"brand": brand, "invoice_number": invoice_number}
        )
