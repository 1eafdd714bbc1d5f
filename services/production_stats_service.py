"""
Production stats and per-row derived fields.

Pure functions over ProductionRecord lists; nothing here fetches data.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional
import structlog

from models.production import (
    NO_LINE,
    ProductionRecord,
    ProductionRow,
    ProductionStats,
    ProductionStatus,
)
from parsers.cell_parser import is_on_producing, normalize_date

logger = structlog.get_logger(__name__)

IDLE_LINE = "Idle"
HUNDRED = Decimal("100")


def aggregate(records: Iterable[ProductionRecord]) -> ProductionStats:
    """
    Fold production records into totals.

    completion_rate = 100 * total_produced / total_order, or 0 when there
    are no orders. An empty input yields all zeros.
    """
    total_order = Decimal("0")
    total_produced = Decimal("0")
    total_remaining = Decimal("0")

    for record in records:
        total_order += record.order_qty
        total_produced += record.produced_qty
        total_remaining += record.remaining_qty

    completion_rate = (
        total_produced / total_order * HUNDRED if total_order > 0 else Decimal("0")
    )

    return ProductionStats(
        total_order=total_order,
        total_produced=total_produced,
        total_remaining=total_remaining,
        completion_rate=completion_rate,
    )


def progress_pct(record: ProductionRecord) -> Decimal:
    """Produced share of one work order, in percent (0 when nothing ordered)."""
    if record.order_qty <= 0:
        return Decimal("0")
    return record.produced_qty / record.order_qty * HUNDRED


def active_line(record: ProductionRecord) -> str:
    """Row's own line label, else the first daily line with output, else Idle."""
    if record.extracted_line and record.extracted_line != NO_LINE:
        return record.extracted_line
    for entry in record.daily_log:
        if entry.qty > 0:
            return entry.line
    return IDLE_LINE


def production_status(
    record: ProductionRecord,
    today: Optional[date] = None,
) -> tuple[Optional[ProductionStatus], Optional[str]]:
    """
    Status of a work order and its display label.

    Finished wins over everything; a row without a production date has no
    status. Returns (status, label).
    """
    if record.remaining_qty <= 0:
        return ProductionStatus.FINISHED, "Finished"

    if not record.production_date:
        return None, None

    if is_on_producing(record.production_date):
        return ProductionStatus.PRODUCING, "Producing"

    today = today or date.today()
    planned = normalize_date(record.production_date)
    if planned is not None and planned < today:
        return ProductionStatus.PRODUCING, "Producing"

    shown = planned.strftime("%d-%m-%Y") if planned else record.production_date
    return ProductionStatus.PLANNED, f"Plan on {shown}"


def filter_records(
    records: Iterable[ProductionRecord],
    search: Optional[str] = None,
) -> list[ProductionRecord]:
    """Keep records whose work order, model type or BEIS PO contains the term."""
    records = list(records)
    term = (search or "").strip().lower()
    if not term:
        return records
    return [
        r for r in records
        if term in r.work_order_number.lower()
        or term in r.model_type.lower()
        or term in r.beis_po.lower()
    ]


def build_rows(
    records: Iterable[ProductionRecord],
    today: Optional[date] = None,
) -> list[ProductionRow]:
    """Attach status, active line and progress to each record."""
    today = today or date.today()
    rows = []
    for record in records:
        status, label = production_status(record, today)
        rows.append(ProductionRow(
            record=record,
            status=status,
            status_label=label,
            active_line=active_line(record),
            progress_pct=progress_pct(record),
        ))
    return rows
