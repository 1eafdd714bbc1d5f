"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.production import router as production_router
from routes.invoices import router as invoices_router

__all__ = [
    "production_router",
    "invoices_router",
]
