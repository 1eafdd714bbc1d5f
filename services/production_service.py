"""
Production service: Fetches the production sheet and builds records.

Each call fetches fresh: records are not cached or tracked across fetches.
"""

from datetime import date
from typing import Callable, Optional
import structlog

from integrations.sheets_feed import SheetSource, fetch_table
from models.production import ProductionOverview, ProductionRecord, ProductionStats
from models.sheet import RawTable
from parsers.production_parser import build_production_records
from services.production_stats_service import aggregate, build_rows, filter_records

logger = structlog.get_logger(__name__)


class ProductionService:
    """Production records and stats from the live sheet."""

    def __init__(self, fetcher: Callable[[SheetSource], RawTable] = fetch_table):
        self.fetcher = fetcher

    def fetch_and_build_production(self) -> list[ProductionRecord]:
        """
        Fetch the production sheet and build its records.

        Raises:
            SheetFetchError: If the sheet cannot be fetched
        """
        table = self.fetcher(SheetSource.PRODUCTION)
        return build_production_records(table)

    def get_stats(self) -> ProductionStats:
        """Totals over every work order in the sheet."""
        return aggregate(self.fetch_and_build_production())

    def get_overview(
        self,
        search: Optional[str] = None,
        today: Optional[date] = None,
    ) -> ProductionOverview:
        """
        Production rows (optionally filtered) with stats over the whole sheet.

        Args:
            search: Filter on work order, model type or BEIS PO
            today: Reference day for row status (defaults to system date)
        """
        records = self.fetch_and_build_production()
        rows = build_rows(filter_records(records, search), today=today)

        logger.info(
            "production_overview_built",
            records=len(records),
            shown=len(rows),
            search=search,
        )

        return ProductionOverview(
            data=rows,
            total=len(rows),
            stats=aggregate(records),
        )


# Singleton
_production_service: Optional[ProductionService] = None


def get_production_service() -> ProductionService:
    """Get singleton instance of ProductionService."""
    global _production_service
    if _production_service is None:
        _production_service = ProductionService()
    return _production_service
