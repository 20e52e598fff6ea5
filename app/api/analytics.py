"""
Analytics API router.

Sidebar statistics, quarterly trend and header figures. Every response is
recomputed from the filtered records on each request.
"""
import logging

from fastapi import APIRouter, Depends, Query

from app.core.config import Config
from app.core.dependencies import (
    get_app_config,
    get_emission_selector,
    get_filter_spec,
    get_record_store,
)
from app.pydantic_models import (
    AnalyticsResponse,
    DashboardOverview,
    FilterSpec,
    PeriodTrendResponse,
)
from app.services.loaders import RecordStore
from app.services.selectors import EmissionSelector
from app.services.views import analytics, dashboard_overview, period_change, period_trend
from app.utils.constants import DEFAULT_TOP_EMITTERS_LIMIT

router = APIRouter(
    prefix="/api/v1/analytics",
    tags=["Analytics"],
)

logger = logging.getLogger(__name__)


@router.get("/", response_model=AnalyticsResponse)
async def get_analytics(
    limit: int | None = Query(
        None, ge=0, description="Maximum leaderboard entries (defaults to config)"
    ),
    spec: FilterSpec = Depends(get_filter_spec),
    selector: EmissionSelector = Depends(get_emission_selector),
    config: Config = Depends(get_app_config),
):
    """
    Totals, scope and gas breakdowns and top emitters for the filtered records.

    Query Parameters:
    - scope: Scope filter ('all' by default)
    - company: Selected company name, repeatable
    - limit: Leaderboard size

    Example:
        ```
        GET /api/v1/analytics?scope=Scope%201
        GET /api/v1/analytics?company=Adani%20Green&company=L%26T&limit=3
        ```
    """
    if limit is None:
        limit = config.data.get("dashboard", {}).get(
            "top_emitters_limit", DEFAULT_TOP_EMITTERS_LIMIT
        )

    records = selector.get_records(spec)
    result = analytics(records, limit=limit)

    logger.info(
        f"Analytics computed: {result.record_count} records, "
        f"{result.total_emissions:.2f} tonnes CO2e"
    )
    return result


@router.get("/trend", response_model=PeriodTrendResponse)
async def get_period_trend(
    spec: FilterSpec = Depends(get_filter_spec),
    selector: EmissionSelector = Depends(get_emission_selector),
):
    """
    Quarterly totals in chronological order and the change between the two
    most recent quarters.

    Example:
        ```
        GET /api/v1/analytics/trend?company=Tata%20Steel
        ```
    """
    records = selector.get_records(spec)
    return PeriodTrendResponse(
        periods=period_trend(records),
        change=period_change(records),
    )


@router.get("/overview", response_model=DashboardOverview)
async def get_overview(store: RecordStore = Depends(get_record_store)):
    """Header figures over the whole dataset."""
    return dashboard_overview(store.facilities, store.records)
