"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,
    ExternalServiceError,

    # Sheet feed
    SheetFetchError,
    SheetEnvelopeError,

    # Invoice lookup
    InvalidInvoiceQueryError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",
    "ExternalServiceError",

    # Sheet feed
    "SheetFetchError",
    "SheetEnvelopeError",

    # Invoice lookup
    "InvalidInvoiceQueryError",
]
