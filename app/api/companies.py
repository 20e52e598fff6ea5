"""
Companies API router.

Options for the company multi-select.
"""
from fastapi import APIRouter, Depends

from app.core.dependencies import get_record_store
from app.services.loaders import RecordStore
from app.services.views import unique_companies

router = APIRouter(
    prefix="/api/v1/companies",
    tags=["Companies"],
)


@router.get("/", response_model=list[str])
async def list_companies(store: RecordStore = Depends(get_record_store)):
    """List company names in order of first appearance in the records."""
    return unique_companies(store.records)
