"""
Cell and date normalization for the spreadsheet feed.

The sheets are maintained by hand, so the same column can carry several
encodings. Recognized production-date forms, first match wins:

1. Feed date token:       Date(2026,0,26)          -> 2026-01-26, line N/A
2. Bracketed full date:   [Line 8] 26-01-2026      -> 2026-01-26, Line 8
                          【Line 8】26/01/2026
3. Bracketed short date:  [Line 8] 1/26            -> <planning year>-01-26, Line 8
4. Anything else passes through unchanged with line N/A.

Nothing in this module raises on bad input.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional
import math
import re

import pandas as pd

from config import settings
from models.production import ProductionCell, ON_PRODUCING_MARKER, NO_LINE

# Month in the feed token is zero-based; trailing time parts are ignored
FEED_DATE_RE = re.compile(r"Date\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)")

LINE_FULL_DATE_RE = re.compile(
    r"[\[【]\s*Line\s*(\d+)\s*[\]】]\s*(\d{1,2})[-/](\d{1,2})[-/](\d{4})",
    re.IGNORECASE,
)
LINE_SHORT_DATE_RE = re.compile(
    r"[\[【]\s*Line\s*(\d+)\s*[\]】]\s*(\d{1,2})[-/](\d{1,2})",
    re.IGNORECASE,
)

# Day-first formats only; the feed never uses MM/DD/YYYY with a year
DATE_FORMATS = ["%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%d.%m.%Y", "%Y/%m/%d"]

# Earliest year accepted from a free-text date
MIN_YEAR = 1900

YEAR_TOKEN_RE = re.compile(r"^\d{4}$")
DATE_TOKEN_RE = re.compile(r"[A-Za-z]+|\d+")


def normalize_production_cell(raw: Any, default_year: Optional[int] = None) -> ProductionCell:
    """
    Recover the production date and line label from a cell value.

    Args:
        raw: Raw cell value or display string
        default_year: Year for short MM-DD dates (defaults to settings.planning_year)

    Returns:
        ProductionCell; unrecognized input is returned as-is with line N/A
    """
    if _is_missing(raw):
        return ProductionCell(date="", line=NO_LINE)

    text = str(raw).strip()

    match = FEED_DATE_RE.search(text)
    if match:
        year, month, day = match.groups()
        return ProductionCell(
            date=f"{year}-{int(month) + 1:02d}-{int(day):02d}",
            line=NO_LINE,
        )

    match = LINE_FULL_DATE_RE.search(text)
    if match:
        line_num, day, month, year = match.groups()
        return ProductionCell(
            date=f"{year}-{int(month):02d}-{int(day):02d}",
            line=f"Line {line_num}",
        )

    match = LINE_SHORT_DATE_RE.search(text)
    if match:
        line_num, month, day = match.groups()
        year = default_year if default_year is not None else settings.planning_year
        return ProductionCell(
            date=f"{year}-{int(month):02d}-{int(day):02d}",
            line=f"Line {line_num}",
        )

    return ProductionCell(date=text, line=NO_LINE)


def normalize_date(raw: Any) -> Optional[date]:
    """
    Parse a cell value to a calendar date.

    Accepts date/datetime objects, the feed date token, or a date string.
    Returns None for anything else; callers treat None as "undated".
    """
    if _is_missing(raw):
        return None

    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, (bool, int, float, Decimal)):
        return None

    value_str = str(raw).strip()

    match = FEED_DATE_RE.search(value_str)
    if match:
        year, month, day = (int(g) for g in match.groups())
        try:
            return date(year, month + 1, day)
        except ValueError:
            return None

    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(value_str, fmt).date()
        except ValueError:
            continue
        return parsed if parsed.year >= MIN_YEAR else None

    # Fallback for anything else pandas understands ("26 Jan 2026", ...).
    # Requires a day, a month and a four-digit year.
    if not _has_full_date_parts(value_str):
        return None
    try:
        result = pd.to_datetime(value_str, dayfirst=True)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(result) or result.year < MIN_YEAR:
        return None
    return result.date()


def parse_quantity(value: Any, formatted: Optional[str] = None) -> Decimal:
    """
    Parse a quantity cell to Decimal.

    A numeric raw value wins. Otherwise the display string (then the raw
    string) is read with thousands separators removed, e.g. "1,250" -> 1250.
    Unparseable input yields 0.
    """
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        if isinstance(value, Decimal):
            if value.is_finite():
                return value
        elif math.isfinite(value):
            return Decimal(str(value))

    for candidate in (formatted, value):
        if not isinstance(candidate, str):
            continue
        cleaned = candidate.strip().replace(",", "").replace(" ", "")
        if not cleaned:
            continue
        try:
            number = Decimal(cleaned)
        except InvalidOperation:
            continue
        if number.is_finite():
            return number

    return Decimal("0")


def is_on_producing(text: Optional[str]) -> bool:
    """True when a production-date text carries the 'On Producing' marker."""
    return bool(text) and ON_PRODUCING_MARKER in text.lower()


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, float):
        return pd.isna(value)
    return False


def _has_full_date_parts(text: str) -> bool:
    # "26 Jan 2026" passes; "1/2", "2026", "today" do not
    tokens = DATE_TOKEN_RE.findall(text)
    return len(tokens) >= 3 and any(YEAR_TOKEN_RE.match(t) for t in tokens)
