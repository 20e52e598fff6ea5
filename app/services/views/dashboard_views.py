"""
Derived View Builder.

Composes the filter engine and the aggregation functions into the exact
shapes the dashboard renders. Nothing here holds state; the presentation
layer calls these on every filter change.
"""

import logging
from typing import Iterable, Mapping, Optional, Sequence

from app.pydantic_models import (
    AnalyticsResponse,
    BreakdownEntry,
    DashboardOverview,
    EmissionRecordPydModel,
    EmitterEntry,
    FacilityDetail,
    FacilityMarker,
    FacilityPydModel,
    FacilityWithTotals,
    MapPosition,
    PeriodChange,
    PeriodTotal,
)
from app.services.aggregators import (
    counts_by_facility,
    percentage,
    total_emissions,
    totals_by_company,
    totals_by_facility,
    totals_by_ghg_type,
    totals_by_period,
    totals_by_scope,
)
from app.services.selectors import (
    filter_records_by_scope,
    normalize_scope,
    records_for_facility,
)
from app.utils.constants import (
    ALL_SCOPES,
    DEFAULT_MAP_BOUNDS,
    EMISSION_LEVEL_THRESHOLDS,
    EmissionLevelEnum,
    TrendDirectionEnum,
)

logger = logging.getLogger(__name__)


def facilities_with_totals(
    facilities: Iterable[FacilityPydModel],
    records: Sequence[EmissionRecordPydModel],
) -> list[FacilityWithTotals]:
    """
    Attach total emissions and record count to every facility.

    Facilities without records get zero totals.
    """
    totals = totals_by_facility(records)
    counts = counts_by_facility(records)
    return [
        FacilityWithTotals(
            **facility.model_dump(include=set(FacilityPydModel.model_fields)),
            total_emissions=totals.get(facility.id, 0.0),
            record_count=counts.get(facility.id, 0),
        )
        for facility in facilities
    ]


def _breakdown(totals: Mapping[str, float]) -> list[BreakdownEntry]:
    whole = sum(totals.values(), 0.0)
    return [
        BreakdownEntry(key=key, value=value, percentage=percentage(value, whole))
        for key, value in totals.items()
    ]


def scope_breakdown(records: Iterable[EmissionRecordPydModel]) -> list[BreakdownEntry]:
    """Scope 1/2/3 totals with their share of the whole, always three entries."""
    return _breakdown(totals_by_scope(records))


def ghg_breakdown(records: Iterable[EmissionRecordPydModel]) -> list[BreakdownEntry]:
    """CO₂/CH₄/N₂O totals with their share of the whole, always three entries."""
    return _breakdown(totals_by_ghg_type(records))


def period_trend(records: Iterable[EmissionRecordPydModel]) -> list[PeriodTotal]:
    """
    Per-period totals in chronological order.

    Periods are fixed-width "YYYY QN" tokens, so sorting the strings sorts
    them in time.
    """
    totals = totals_by_period(records)
    return [PeriodTotal(period=period, value=totals[period]) for period in sorted(totals)]


def change_between(previous: PeriodTotal, current: PeriodTotal) -> PeriodChange:
    """Percentage change from one period total to the next."""
    if current.value > previous.value:
        direction = TrendDirectionEnum.UP
    elif current.value < previous.value:
        direction = TrendDirectionEnum.DOWN
    else:
        direction = TrendDirectionEnum.FLAT

    return PeriodChange(
        previous_period=previous.period,
        current_period=current.period,
        previous_value=previous.value,
        current_value=current.value,
        change_percentage=percentage(current.value - previous.value, previous.value),
        direction=direction,
    )


def period_change(records: Iterable[EmissionRecordPydModel]) -> Optional[PeriodChange]:
    """
    Change between the two most recent reporting periods.

    Returns:
        PeriodChange, or None when fewer than two periods are present
    """
    trend = period_trend(records)
    if len(trend) < 2:
        return None
    return change_between(trend[-2], trend[-1])


def top_emitters(
    records: Sequence[EmissionRecordPydModel],
    limit: Optional[int] = None,
) -> list[EmitterEntry]:
    """
    Company leaderboard, highest total first.

    Ties keep the order in which the companies first appear in ``records``.
    Percentages are shares of all records' emissions, so truncating with
    ``limit`` does not change them.

    Args:
        records: Emission records to rank
        limit: Optional maximum number of entries

    Returns:
        Ranked list of EmitterEntry
    """
    totals = totals_by_company(records)
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ranked = ranked[: max(limit, 0)]

    whole = total_emissions(records)
    leader = ranked[0][1] if ranked else 0.0

    return [
        EmitterEntry(
            rank=index,
            name=name,
            total=total,
            percentage=percentage(total, whole),
            bar_percentage=percentage(total, leader),
        )
        for index, (name, total) in enumerate(ranked, start=1)
    ]


def unique_companies(records: Iterable[EmissionRecordPydModel]) -> list[str]:
    """Company names in order of first appearance."""
    return list(totals_by_company(records))


def emission_level(total: float) -> EmissionLevelEnum:
    """Marker tier for a facility total."""
    for level, threshold in EMISSION_LEVEL_THRESHOLDS:
        if total > threshold:
            return level
    return EmissionLevelEnum.LOW


def map_position(
    facility: FacilityPydModel,
    bounds: Optional[Mapping[str, float]] = None,
) -> MapPosition:
    """
    Linear position of a facility inside the display bounds.

    x grows with longitude, y grows southwards; both are percentages of the
    bounds and may fall outside 0-100 for facilities outside them.
    """
    bounds = {**DEFAULT_MAP_BOUNDS, **(bounds or {})}
    lng_span = bounds["max_lng"] - bounds["min_lng"]
    lat_span = bounds["max_lat"] - bounds["min_lat"]
    return MapPosition(
        x=percentage(facility.longitude - bounds["min_lng"], lng_span),
        y=percentage(bounds["max_lat"] - facility.latitude, lat_span),
    )


def facility_markers(
    facilities: Iterable[FacilityWithTotals],
    bounds: Optional[Mapping[str, float]] = None,
) -> list[FacilityMarker]:
    """Annotated facilities with their map position and emission tier."""
    return [
        FacilityMarker(
            **facility.model_dump(),
            position=map_position(facility, bounds),
            emission_level=emission_level(facility.total_emissions),
        )
        for facility in facilities
    ]


def facility_detail(
    facility: FacilityPydModel,
    records: Sequence[EmissionRecordPydModel],
    selected_scope: str = ALL_SCOPES,
) -> FacilityDetail:
    """
    Emission breakdown for a single facility.

    The scope breakdown covers all of the facility's records and is reduced
    to the selected scope's entry when one is chosen. Gas breakdown, trend,
    total and the record table cover only the selected scope.

    Args:
        facility: Facility to describe
        records: Emission records (any superset of the facility's records)
        selected_scope: 'all' or a scope name; unknown values mean 'all'

    Returns:
        FacilityDetail view
    """
    selected_scope = normalize_scope(selected_scope)
    all_records = records_for_facility(records, facility.id)
    scoped_records = filter_records_by_scope(all_records, selected_scope)

    scopes = scope_breakdown(all_records)
    if selected_scope != ALL_SCOPES:
        scopes = [entry for entry in scopes if entry.key == selected_scope]

    annotated = facilities_with_totals([facility], all_records)[0]

    logger.debug(
        f"Facility detail for {facility.id}: {len(scoped_records)} of "
        f"{len(all_records)} records in scope {selected_scope!r}"
    )

    return FacilityDetail(
        facility=annotated,
        selected_scope=selected_scope,
        total_emissions=total_emissions(scoped_records),
        scope_breakdown=scopes,
        ghg_breakdown=ghg_breakdown(scoped_records),
        period_trend=period_trend(scoped_records),
        period_change=period_change(scoped_records),
        records=scoped_records,
    )


def analytics(
    records: Sequence[EmissionRecordPydModel],
    limit: Optional[int] = None,
) -> AnalyticsResponse:
    """Sidebar analytics for an already filtered record list."""
    return AnalyticsResponse(
        total_emissions=total_emissions(records),
        record_count=len(records),
        scope_breakdown=scope_breakdown(records),
        ghg_breakdown=ghg_breakdown(records),
        top_emitters=top_emitters(records, limit=limit),
    )


def dashboard_overview(
    facilities: Sequence[FacilityPydModel],
    records: Sequence[EmissionRecordPydModel],
) -> DashboardOverview:
    """Header figures for the whole dataset."""
    return DashboardOverview(
        total_emissions=total_emissions(records),
        record_count=len(records),
        facility_count=len(facilities),
        company_count=len(unique_companies(records)),
    )
