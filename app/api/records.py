"""
Emission Records API router.

Read-only access to the filtered fact table.
"""
import logging

from fastapi import APIRouter, Depends

from app.core.dependencies import get_emission_selector, get_filter_spec
from app.pydantic_models import EmissionRecordPydModel, FilterSpec
from app.services.selectors import EmissionSelector

router = APIRouter(
    prefix="/api/v1/records",
    tags=["Emission Records"],
)

logger = logging.getLogger(__name__)


@router.get("/", response_model=list[EmissionRecordPydModel])
async def list_records(
    facility_id: str | None = None,
    spec: FilterSpec = Depends(get_filter_spec),
    selector: EmissionSelector = Depends(get_emission_selector),
):
    """
    List emission records filtered by scope and company.

    Args:
        facility_id: Restrict to one facility (optional)

    Example:
        ```
        GET /api/v1/records?scope=Scope%202
        GET /api/v1/records?company=JSW%20Energy&facility_id=F004
        ```
    """
    records = selector.get_records(spec, facility_id=facility_id)
    logger.info(
        f"Listing {len(records)} records: scope={spec.selected_scope!r}, "
        f"companies={sorted(spec.selected_companies)}, facility={facility_id}"
    )
    return records
