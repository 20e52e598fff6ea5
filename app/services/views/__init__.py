"""
Derived views consumed by the API and the terminal report.
"""
from app.services.views.dashboard_views import (
    analytics,
    change_between,
    dashboard_overview,
    emission_level,
    facilities_with_totals,
    facility_detail,
    facility_markers,
    ghg_breakdown,
    map_position,
    period_change,
    period_trend,
    scope_breakdown,
    top_emitters,
    unique_companies,
)

__all__ = [
    "analytics",
    "change_between",
    "dashboard_overview",
    "emission_level",
    "facilities_with_totals",
    "facility_detail",
    "facility_markers",
    "ghg_breakdown",
    "map_position",
    "period_change",
    "period_trend",
    "scope_breakdown",
    "top_emitters",
    "unique_companies",
]
