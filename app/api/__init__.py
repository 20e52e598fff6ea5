"""
API routers module.
"""
from app.api.analytics import router as analytics_router
from app.api.companies import router as companies_router
from app.api.facilities import router as facilities_router
from app.api.records import router as records_router

__all__ = [
    "analytics_router",
    "companies_router",
    "facilities_router",
    "records_router",
]
