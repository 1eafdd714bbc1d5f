"""
Invoice Reconciler: Decides whether inbound stock covers one invoice.

Invoice sheet layout (zero-based):
    Row 0       brand label per invoice column; cell (0, 0) holds today's date
    Row 1       target (export) date per invoice column
    Row 4       invoice number per invoice column
    Rows 5+     one inbound line per row
    Col 1-4     PO, type, color, size
    Col 5       inbound quantity (qty_in), shared by every invoice on the row
    Col 6       rework quantity
    Col 14+     invoice columns: quantity of the row requested by each invoice

Algorithm for one row (qty_status):
1. COLLECT every invoice column with a positive quantity on the row
2. SORT dated columns first, by date, then by column index; undated last
3. WALK the sorted list with a running counter starting at qty_in,
   subtracting each dated column served before the target
4. At the target: READY if the counter still covers its quantity

Export status (inv_status) only compares the target date to today.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional
import structlog

from models.invoice import (
    AllocationCandidate,
    InvoiceColumn,
    InvoiceLineResult,
    QtyStatus,
)
from models.sheet import RawTable
from parsers.cell_parser import normalize_date, parse_quantity
from utils.text_utils import normalize_label

logger = structlog.get_logger(__name__)

# Layout constants
ROW_BRAND = 0
ROW_TARGET_DATE = 1
ROW_INVOICE_NUMBER = 4
FIRST_DATA_ROW = 5
FIRST_INVOICE_COL = 14

TODAY_CELL = (0, 0)

COL_PO = 1
COL_TYPE = 2
COL_COLOR = 3
COL_SIZE = 4
COL_QTY_IN = 5
COL_REWORK = 6


def find_invoice_status(
    table: RawTable,
    brand: str,
    invoice_number: str,
    today: Optional[date] = None,
) -> list[InvoiceLineResult]:
    """
    Reconcile one invoice against the inbound stock of every row.

    Args:
        table: Raw invoice sheet
        brand: Brand label as typed by the user
        invoice_number: Invoice number as typed by the user
        today: Reference day for export status (defaults to the sheet's
            today cell, then the system date)

    Returns:
        One InvoiceLineResult per row with a positive quantity on the
        matched invoice column. Empty when no column matches.
    """
    columns = read_invoice_columns(table)
    target = find_target_column(table, brand, invoice_number, columns=columns)
    if target is None:
        return []
    return reconcile_column(table, target, columns, today=today)


def reconcile_column(
    table: RawTable,
    target: InvoiceColumn,
    columns: list[InvoiceColumn],
    today: Optional[date] = None,
) -> list[InvoiceLineResult]:
    """
    Build the result lines for an already matched invoice column.

    Args:
        table: Raw invoice sheet
        target: Matched invoice column
        columns: Invoice columns as read by read_invoice_columns
        today: Reference day for export status
    """
    reference_day = resolve_today(table, today)
    inv_status = export_status(target.target_date, reference_day)
    column_dates = {column.index: column.target_date for column in columns}

    results = []
    for r in range(FIRST_DATA_ROW, len(table)):
        qty = _cell_quantity(table, r, target.index)
        if qty <= 0:
            continue

        candidates = collect_candidates(table, r, column_dates)
        qty_in = _cell_quantity(table, r, COL_QTY_IN)

        results.append(InvoiceLineResult(
            po=table.text(r, COL_PO),
            type=table.text(r, COL_TYPE),
            color=table.text(r, COL_COLOR),
            size=table.text(r, COL_SIZE),
            qty=qty,
            rework=_cell_quantity(table, r, COL_REWORK),
            qty_status=resolve_qty_status(candidates, target.index, qty_in),
            inv_status=inv_status,
        ))

    logger.info(
        "invoice_status_resolved",
        brand=target.brand,
        invoice_number=target.invoice_number,
        column=target.index,
        target_date=target.target_date.isoformat() if target.target_date else None,
        lines=len(results),
        ready=sum(1 for line in results if line.qty_status == QtyStatus.READY),
    )
    return results


def read_invoice_columns(table: RawTable) -> list[InvoiceColumn]:
    """List every invoice column (index >= 14) with its labels and target date."""
    width = max(
        table.row_width(ROW_BRAND),
        table.row_width(ROW_TARGET_DATE),
        table.row_width(ROW_INVOICE_NUMBER),
    )
    return [
        InvoiceColumn(
            index=c,
            brand=table.text(ROW_BRAND, c, default=""),
            invoice_number=table.text(ROW_INVOICE_NUMBER, c, default=""),
            target_date=_header_date(table, c),
        )
        for c in range(FIRST_INVOICE_COL, width)
    ]


def find_target_column(
    table: RawTable,
    brand: str,
    invoice_number: str,
    columns: Optional[list[InvoiceColumn]] = None,
) -> Optional[InvoiceColumn]:
    """
    Find the first invoice column whose brand and invoice number both match.

    Comparison is trimmed and case-insensitive. A blank query never matches.
    Pass columns to reuse an earlier read_invoice_columns result.
    """
    wanted_brand = normalize_label(brand)
    wanted_invoice = normalize_label(invoice_number)
    if not wanted_brand or not wanted_invoice:
        logger.info("invoice_query_blank", brand=brand, invoice_number=invoice_number)
        return None

    if columns is None:
        columns = read_invoice_columns(table)

    for column in columns:
        if (
            normalize_label(column.brand) == wanted_brand
            and normalize_label(column.invoice_number) == wanted_invoice
        ):
            return column

    logger.info("invoice_column_not_found", brand=brand, invoice_number=invoice_number)
    return None


def collect_candidates(
    table: RawTable,
    r: int,
    column_dates: dict[int, Optional[date]],
) -> list[AllocationCandidate]:
    """Every invoice column with a positive quantity on row r."""
    candidates = []
    for c in range(FIRST_INVOICE_COL, table.row_width(r)):
        qty = _cell_quantity(table, r, c)
        if qty > 0:
            candidates.append(AllocationCandidate(
                column=c,
                qty=qty,
                target_date=column_dates.get(c),
            ))
    return candidates


def resolve_qty_status(
    candidates: Iterable[AllocationCandidate],
    target_column: int,
    qty_in: Decimal,
) -> QtyStatus:
    """
    Walk the candidates in service order and test the target against what is left.

    Only dated candidates served before a dated target consume stock;
    undated candidates never do. A target missing from the candidates
    is NOT READY.
    """
    ordered = sorted(candidates, key=lambda c: c.sort_key())
    target = next((c for c in ordered if c.column == target_column), None)
    if target is None:
        return QtyStatus.NOT_READY

    available = qty_in
    for candidate in ordered:
        if candidate.column == target_column:
            return QtyStatus.READY if available >= candidate.qty else QtyStatus.NOT_READY
        if candidate.is_ahead_of(target):
            available -= candidate.qty

    return QtyStatus.NOT_READY


def export_status(target_date: Optional[date], today: date) -> str:
    """Describe export timing of the target invoice relative to today."""
    if target_date is None:
        return "TBA"
    if target_date > today:
        return f"Will be Export on {target_date.strftime('%d-%m-%Y')}"
    if target_date == today:
        return "Will Export Today"
    return "Exported"


def resolve_today(table: RawTable, today: Optional[date] = None) -> date:
    """Reference day: explicit argument, else the sheet's today cell, else the system date."""
    if today is not None:
        return today
    r, c = TODAY_CELL
    sheet_today = normalize_date(table.value(r, c)) or normalize_date(table.formatted(r, c))
    return sheet_today or date.today()


# ===================
# HELPERS
# ===================

def _header_date(table: RawTable, c: int) -> Optional[date]:
    return (
        normalize_date(table.value(ROW_TARGET_DATE, c))
        or normalize_date(table.formatted(ROW_TARGET_DATE, c))
    )


def _cell_quantity(table: RawTable, r: int, c: int) -> Decimal:
    return parse_quantity(table.value(r, c), table.formatted(r, c))
