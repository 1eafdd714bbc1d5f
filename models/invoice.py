"""
Invoice reconciliation schemas.
"""

from dataclasses import dataclass
from pydantic import Field
from typing import Optional
from enum import Enum
from datetime import date
from decimal import Decimal

from models.base import BaseSchema, FrozenSchema


class QtyStatus(str, Enum):
    """Whether inbound stock covers an invoice line after older invoices."""
    READY = "READY"
    NOT_READY = "NOT READY"


@dataclass(frozen=True)
class InvoiceColumn:
    """One invoice column of the invoice sheet (reconciliation only)."""
    index: int
    brand: str
    invoice_number: str
    target_date: Optional[date] = None

    @property
    def is_dated(self) -> bool:
        return self.target_date is not None


@dataclass(frozen=True)
class AllocationCandidate:
    """A positive invoice quantity on one row, competing for inbound stock."""
    column: int
    qty: Decimal
    target_date: Optional[date] = None

    def sort_key(self) -> tuple:
        # Dated before undated, then by date, then by column
        if self.target_date is None:
            return (1, date.max, self.column)
        return (0, self.target_date, self.column)

    def is_ahead_of(self, other: "AllocationCandidate") -> bool:
        """True when both are dated and this one is served first."""
        if self.target_date is None or other.target_date is None:
            return False
        return (self.target_date, self.column) < (other.target_date, other.column)


class InvoiceLineResult(FrozenSchema):
    """One row of the invoice check result."""

    po: str = Field(default="-")
    type: str = Field(default="-")
    color: str = Field(default="-")
    size: str = Field(default="-")
    qty: Decimal = Field(..., gt=0, description="Quantity against the target invoice")
    rework: Decimal = Field(default=Decimal("0"))
    qty_status: QtyStatus
    inv_status: str = Field(..., description="Export timing relative to today")


class InvoiceCheckResponse(BaseSchema):
    """Invoice check result with totals."""

    brand: str
    invoice_number: str
    found: bool = Field(..., description="True when a matching invoice column exists")
    target_date: Optional[date] = None
    lines: list[InvoiceLineResult] = Field(default_factory=list)
    total_qty: Decimal = Decimal("0")
    line_count: int = 0
