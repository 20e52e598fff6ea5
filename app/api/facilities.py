"""
Facilities API router.

Map markers and the single-facility detail panel.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.config import Config
from app.core.dependencies import get_app_config, get_emission_selector, get_filter_spec
from app.pydantic_models import FacilityDetail, FacilityMarker, FilterSpec
from app.services.selectors import EmissionSelector
from app.services.views import facilities_with_totals, facility_detail, facility_markers
from app.utils.constants import ALL_SCOPES

router = APIRouter(
    prefix="/api/v1/facilities",
    tags=["Facilities"],
)

logger = logging.getLogger(__name__)


@router.get("/", response_model=list[FacilityMarker])
async def list_facilities(
    spec: FilterSpec = Depends(get_filter_spec),
    selector: EmissionSelector = Depends(get_emission_selector),
    config: Config = Depends(get_app_config),
):
    """
    List facilities matching the search text or the selected companies.

    Totals are computed over every record of each facility; the scope
    selector does not change the map.

    Query Parameters:
    - search: Whitespace-separated terms matched against name and description
    - company: Selected company name, repeatable
    - scope: Accepted for symmetry with the other endpoints

    Example:
        ```
        GET /api/v1/facilities?search=steel
        GET /api/v1/facilities?search=adani%20jsw
        GET /api/v1/facilities?company=L%26T&company=Tata%20Steel
        ```
    """
    logger.info(
        f"Listing facilities: search={spec.search_text!r}, "
        f"companies={sorted(spec.selected_companies)}"
    )

    facilities = selector.get_facilities(spec)
    annotated = facilities_with_totals(facilities, selector.store.records)
    return facility_markers(annotated, config.data.get("map"))


@router.get("/{facility_id}", response_model=FacilityDetail)
async def get_facility_detail(
    facility_id: str,
    scope: str = Query(
        ALL_SCOPES, description="'all', 'Scope 1', 'Scope 2' or 'Scope 3'", examples=["Scope 1"]
    ),
    selector: EmissionSelector = Depends(get_emission_selector),
):
    """
    Get the emission breakdown of one facility.

    Example:
        ```
        GET /api/v1/facilities/F003
        GET /api/v1/facilities/F003?scope=Scope%201
        ```
    """
    facility = selector.get_facility(facility_id)

    if not facility:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Facility {facility_id} not found",
        )

    spec = FilterSpec(selected_scope=scope)
    return facility_detail(
        facility, selector.get_facility_records(facility_id), spec.selected_scope
    )
