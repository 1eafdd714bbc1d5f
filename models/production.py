"""
Production schemas: work-order records, daily log entries and stats.
"""

from pydantic import Field
from typing import Optional
from enum import Enum
from decimal import Decimal

from models.base import BaseSchema, FrozenSchema


ON_PRODUCING_MARKER = "on producing"
NO_LINE = "N/A"


class ProductionStatus(str, Enum):
    """Row status shown next to a work order."""
    FINISHED = "finished"      # Nothing remaining
    PRODUCING = "producing"    # Marked on producing, or planned date already passed
    PLANNED = "planned"        # Planned date still ahead


class ProductionCell(FrozenSchema):
    """Date and line label recovered from a production-date cell."""

    date: str = Field(
        default="",
        description="YYYY-MM-DD when recognized, otherwise the raw text"
    )
    line: str = Field(
        default=NO_LINE,
        description="Production line label (e.g., 'Line 8')"
    )


class DailyHeader(FrozenSchema):
    """Descriptor of one dynamic per-day column, read from the header rows."""

    date: str = Field(default="", description="Normalized date or raw header text")
    line: str = Field(default="", description="Line label for the column")
    shift: str = Field(default="", description="Shift label for the column")


class DailyLog(FrozenSchema):
    """Quantity produced for one work order in one dynamic column."""

    date: str
    line: str
    shift: str
    qty: Decimal = Field(default=Decimal("0"))


class ProductionRecord(FrozenSchema):
    """
    One work-order line from the production sheet.

    remaining_qty is taken from the sheet as reported; it is never
    recomputed from order_qty - produced_qty.
    """

    work_order_number: str = Field(..., min_length=1, description="Work order (row identity)")
    uli_po: str = Field(default="-")
    beis_po: str = Field(default="-")
    model_type: str = Field(default="-")
    size: str = Field(default="-")
    color: str = Field(default="-")

    order_qty: Decimal = Field(default=Decimal("0"))
    produced_qty: Decimal = Field(default=Decimal("0"))
    remaining_qty: Decimal = Field(default=Decimal("0"))

    production_date: str = Field(
        default="",
        description="YYYY-MM-DD, 'On Producing', or raw passthrough text"
    )
    extracted_line: str = Field(default=NO_LINE)
    daily_log: list[DailyLog] = Field(default_factory=list)


class ProductionStats(BaseSchema):
    """Totals over a set of production records."""

    total_order: Decimal = Decimal("0")
    total_produced: Decimal = Decimal("0")
    total_remaining: Decimal = Decimal("0")
    completion_rate: Decimal = Field(
        default=Decimal("0"),
        description="100 * total_produced / total_order (0 when no orders)"
    )


class ProductionRow(BaseSchema):
    """A production record with the derived fields the table view shows."""

    record: ProductionRecord
    status: Optional[ProductionStatus] = None
    status_label: Optional[str] = None
    active_line: str = "Idle"
    progress_pct: Decimal = Decimal("0")


class ProductionOverview(BaseSchema):
    """Production list plus stats over the whole sheet."""

    data: list[ProductionRow]
    total: int
    stats: ProductionStats
