"""
Sheet parsers module.
"""

from parsers.cell_parser import (
    normalize_production_cell,
    normalize_date,
    parse_quantity,
)
from parsers.production_parser import (
    build_production_records,
    parse_daily_headers,
)

__all__ = [
    "normalize_production_cell",
    "normalize_date",
    "parse_quantity",
    "build_production_records",
    "parse_daily_headers",
]
