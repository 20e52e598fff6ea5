"""
Pydantic models shared by the services and the API.
"""
from app.pydantic_models.emission_record import EmissionRecordPydModel
from app.pydantic_models.facility import (
    FacilityMarker,
    FacilityPydModel,
    FacilityWithTotals,
    MapPosition,
)
from app.pydantic_models.filters import FilterSpec
from app.pydantic_models.views import (
    AnalyticsResponse,
    BreakdownEntry,
    DashboardOverview,
    EmitterEntry,
    FacilityDetail,
    PeriodChange,
    PeriodTotal,
    PeriodTrendResponse,
)

__all__ = [
    "AnalyticsResponse",
    "BreakdownEntry",
    "DashboardOverview",
    "EmissionRecordPydModel",
    "EmitterEntry",
    "FacilityDetail",
    "FacilityMarker",
    "FacilityPydModel",
    "FacilityWithTotals",
    "FilterSpec",
    "MapPosition",
    "PeriodChange",
    "PeriodTotal",
    "PeriodTrendResponse",
]
