"""
Production API routes.
"""

from fastapi import APIRouter, Query
from typing import Optional
from datetime import date
import structlog

from models.production import ProductionOverview, ProductionStats
from routes.errors import handle_error
from services.production_service import get_production_service

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=ProductionOverview)
def get_production(
    search: Optional[str] = Query(None, description="Filter by work order, model type or BEIS PO"),
    today: Optional[date] = Query(None, description="Reference day for row status"),
):
    """
    List work orders with status, active line and progress.

    Stats cover the whole sheet, regardless of the search filter.
    """
    try:
        service = get_production_service()
        return service.get_overview(search=search, today=today)

    except Exception as e:
        return handle_error(e)


@router.get("/stats", response_model=ProductionStats)
def get_production_stats():
    """Total ordered, produced and remaining quantities and completion rate."""
    try:
        service = get_production_service()
        return service.get_stats()

    except Exception as e:
        return handle_error(e)
