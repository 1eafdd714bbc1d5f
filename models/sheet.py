"""
Raw table shape returned by the spreadsheet feed.

Cells are positional: the column index is meaningful and an absent cell
means "no data". Nothing here interprets cell contents beyond extraction.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from exceptions import SheetEnvelopeError


@dataclass(frozen=True)
class RawCell:
    """One cell: native typed value (`v`) and display string (`f`)."""
    v: Any = None
    f: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return _is_blank(self.v) and _is_blank(self.f)


@dataclass
class RawTable:
    """Ordered rows of optional cells."""
    rows: list[list[Optional[RawCell]]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    @classmethod
    def from_gviz(cls, payload: dict, sheet: str = "") -> "RawTable":
        """
        Build a table from a decoded gviz JSON payload.

        Args:
            payload: Decoded JSON (``{"table": {"rows": [{"c": [...]}, ...]}}``)
            sheet: Sheet name, for error context only

        Returns:
            RawTable with one list of cells per row

        Raises:
            SheetEnvelopeError: If the payload has no table/rows
        """
        if not isinstance(payload, dict):
            raise SheetEnvelopeError(sheet, "payload is not an object")

        table = payload.get("table")
        if not isinstance(table, dict):
            raise SheetEnvelopeError(sheet, "missing table")

        raw_rows = table.get("rows")
        if not isinstance(raw_rows, list):
            raise SheetEnvelopeError(sheet, "missing rows")

        rows = []
        for raw_row in raw_rows:
            if raw_row is None:
                rows.append([])
                continue
            if not isinstance(raw_row, dict):
                raise SheetEnvelopeError(sheet, "row is not an object")
            cells = raw_row.get("c")
            if cells is None:
                cells = []
            elif not isinstance(cells, list):
                raise SheetEnvelopeError(sheet, "row cells are not a list")
            rows.append([
                RawCell(v=c.get("v"), f=c.get("f")) if isinstance(c, dict) else None
                for c in cells
            ])
        return cls(rows=rows)

    # ===================
    # ACCESSORS
    # ===================

    def row(self, r: int) -> list[Optional[RawCell]]:
        if 0 <= r < len(self.rows):
            return self.rows[r]
        return []

    def row_width(self, r: int) -> int:
        return len(self.row(r))

    def cell(self, r: int, c: int) -> Optional[RawCell]:
        cells = self.row(r)
        if 0 <= c < len(cells):
            return cells[c]
        return None

    def value(self, r: int, c: int) -> Any:
        """Raw typed value, or None."""
        cell = self.cell(r, c)
        return cell.v if cell else None

    def formatted(self, r: int, c: int) -> Optional[str]:
        """Display string, or None."""
        cell = self.cell(r, c)
        return cell.f if cell else None

    def text(self, r: int, c: int, default: str = "-") -> str:
        """Display string preferred over raw value; default when both are blank."""
        cell = self.cell(r, c)
        if cell is None:
            return default
        if not _is_blank(cell.f):
            return str(cell.f).strip()
        if not _is_blank(cell.v):
            return _stringify(cell.v)
        return default

    def has_data(self, r: int, c: int) -> bool:
        cell = self.cell(r, c)
        return cell is not None and not cell.is_empty


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _stringify(value: Any) -> str:
    """Render a raw value as text; whole floats lose their trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
