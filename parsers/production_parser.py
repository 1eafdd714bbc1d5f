"""
Production sheet parser.

Sheet layout (zero-based):
    Rows 0-2    header rows for the dynamic per-day block:
                row 0 = date info, row 1 = line label, row 2 = shift label
    Row 3       column titles (ignored)
    Rows 4+     one work order per row

    Col 0       production date / line (see parsers.cell_parser)
    Col 1, 2    ULI PO, BEIS PO
    Col 3       work order number (rows without it are skipped)
    Col 5, 6, 8 model type, size, color
    Col 9-11    order, produced, remaining quantities
    Col 12+     daily production; the block grows as days are appended,
                so its width is read from header row 0 on every parse
"""

from typing import Optional
import structlog

from config import settings
from models.production import DailyHeader, DailyLog, ProductionRecord
from models.sheet import RawTable
from parsers.cell_parser import normalize_production_cell, parse_quantity

logger = structlog.get_logger(__name__)

# Constants
MIN_ROWS = 5
HEADER_DATE_ROW = 0
HEADER_LINE_ROW = 1
HEADER_SHIFT_ROW = 2
FIRST_DATA_ROW = 4
DAILY_START_COL = 12

COL_PRODUCTION_DATE = 0
COL_ULI_PO = 1
COL_BEIS_PO = 2
COL_WORK_ORDER = 3
COL_MODEL_TYPE = 5
COL_SIZE = 6
COL_COLOR = 8
COL_ORDER_QTY = 9
COL_PRODUCED_QTY = 10
COL_REMAINING_QTY = 11


def build_production_records(
    table: RawTable,
    default_year: Optional[int] = None,
) -> list[ProductionRecord]:
    """
    Build production records from the raw production sheet.

    Args:
        table: Raw production table
        default_year: Year for short MM-DD dates (defaults to settings.planning_year)

    Returns:
        One ProductionRecord per row with a work order number. A table
        with fewer than 5 rows is not ready yet and yields an empty list.
    """
    if len(table) < MIN_ROWS:
        logger.info("production_table_too_short", rows=len(table))
        return []

    year = default_year if default_year is not None else settings.planning_year
    headers = parse_daily_headers(table, default_year=year)

    records = []
    skipped = 0
    for r in range(FIRST_DATA_ROW, len(table)):
        if not table.has_data(r, COL_WORK_ORDER):
            skipped += 1
            continue
        records.append(_build_record(table, r, headers, year))

    logger.info(
        "production_records_built",
        count=len(records),
        skipped_rows=skipped,
        daily_columns=len(headers),
    )
    return records


def parse_daily_headers(
    table: RawTable,
    default_year: Optional[int] = None,
) -> list[DailyHeader]:
    """
    Read the dynamic daily-column descriptors from header rows 0-2.

    One descriptor per column from 12 to the end of row 0. The line label
    falls back to the line found in the date cell itself.
    """
    headers = []
    for c in range(DAILY_START_COL, table.row_width(HEADER_DATE_ROW)):
        info = normalize_production_cell(
            table.value(HEADER_DATE_ROW, c),
            default_year=default_year,
        )
        headers.append(DailyHeader(
            date=info.date,
            line=table.text(HEADER_LINE_ROW, c, default="") or info.line,
            shift=table.text(HEADER_SHIFT_ROW, c, default=""),
        ))
    return headers


def _build_record(
    table: RawTable,
    r: int,
    headers: list[DailyHeader],
    year: int,
) -> ProductionRecord:
    """Map one data row to a ProductionRecord."""
    date_cell = table.cell(r, COL_PRODUCTION_DATE)
    date_raw = None
    if date_cell is not None:
        date_raw = date_cell.f if date_cell.f else date_cell.v
    info = normalize_production_cell(date_raw, default_year=year)

    daily_log = []
    for offset, header in enumerate(headers):
        c = DAILY_START_COL + offset
        value = table.value(r, c)
        if value is None:
            continue
        daily_log.append(DailyLog(
            date=header.date,
            line=header.line,
            shift=header.shift,
            qty=parse_quantity(value, table.formatted(r, c)),
        ))

    return ProductionRecord(
        work_order_number=table.text(r, COL_WORK_ORDER),
        uli_po=table.text(r, COL_ULI_PO),
        beis_po=table.text(r, COL_BEIS_PO),
        model_type=table.text(r, COL_MODEL_TYPE),
        size=table.text(r, COL_SIZE),
        color=table.text(r, COL_COLOR),
        order_qty=_quantity(table, r, COL_ORDER_QTY),
        produced_qty=_quantity(table, r, COL_PRODUCED_QTY),
        remaining_qty=_quantity(table, r, COL_REMAINING_QTY),
        production_date=info.date,
        extracted_line=info.line,
        daily_log=daily_log,
    )


def _quantity(table: RawTable, r: int, c: int):
    return parse_quantity(table.value(r, c), table.formatted(r, c))
