"""
Pydantic models for validation and serialization.
"""

from models.base import (
    BaseSchema,
    FrozenSchema,
)
from models.sheet import (
    RawCell,
    RawTable,
)
from models.production import (
    ON_PRODUCING_MARKER,
    NO_LINE,
    ProductionStatus,
    ProductionCell,
    DailyHeader,
    DailyLog,
    ProductionRecord,
    ProductionStats,
    ProductionRow,
    ProductionOverview,
)
from models.invoice import (
    QtyStatus,
    InvoiceColumn,
    AllocationCandidate,
    InvoiceLineResult,
    InvoiceCheckResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "FrozenSchema",

    # Raw sheet
    "RawCell",
    "RawTable",

    # Production
    "ON_PRODUCING_MARKER",
    "NO_LINE",
    "ProductionStatus",
    "ProductionCell",
    "DailyHeader",
    "DailyLog",
    "ProductionRecord",
    "ProductionStats",
    "ProductionRow",
    "ProductionOverview",

    # Invoice
    "QtyStatus",
    "InvoiceColumn",
    "AllocationCandidate",
    "InvoiceLineResult",
    "InvoiceCheckResponse",
]
