"""
Service tests for the derived dashboard views following kkb_fastapi pattern.
"""

import pytest

from app.services.views import (
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
from app.pydantic_models import PeriodTotal
from app.test.factory.emission_record import EmissionRecordFactory
from app.test.factory.facility import FacilityFactory
from app.utils.constants import EmissionLevelEnum, TrendDirectionEnum


def test_facilities_with_totals(sample_records):
    """Test facilities are annotated with their record totals."""
    facilities = [FacilityFactory(id="FB"), FacilityFactory(id="F099")]

    result = facilities_with_totals(facilities, sample_records)

    assert result[0].id == "FB"
    assert result[0].total_emissions == pytest.approx(300.0)
    assert result[0].record_count == 2
    # Facility without any records
    assert result[1].id == "F099"
    assert result[1].total_emissions == 0
    assert result[1].record_count == 0


def test_scope_breakdown_with_percentages(sample_records):
    """Test scope values and their share of the total."""
    result = scope_breakdown(sample_records)

    assert [entry.key for entry in result] == ["Scope 1", "Scope 2", "Scope 3"]
    assert [entry.value for entry in result] == [150.0, 250.0, 200.0]
    assert [entry.percentage for entry in result] == pytest.approx([25.0, 41.6667, 33.3333], rel=1e-4)


def test_empty_scope_breakdown_is_all_zero():
    """Test an empty input gives three zero entries without dividing by zero."""
    result = scope_breakdown([])

    assert len(result) == 3
    assert all(entry.value == 0 and entry.percentage == 0 for entry in result)


def test_ghg_breakdown_always_three_entries():
    """Test absent gases are reported with zero value and zero share."""
    result = ghg_breakdown([EmissionRecordFactory(ghg_type="CH₄", emissions=80.0)])

    assert [(e.key, e.value, e.percentage) for e in result] == [
        ("CO₂", 0.0, 0.0),
        ("CH₄", 80.0, 100.0),
        ("N₂O", 0.0, 0.0),
    ]


def test_breakdowns_conserve_total(record_store):
    """Test scope and gas breakdowns both sum to the overall total."""
    records = record_store.records
    overall = analytics(records).total_emissions

    assert sum(e.value for e in scope_breakdown(records)) == pytest.approx(overall)
    assert sum(e.value for e in ghg_breakdown(records)) == pytest.approx(overall)
    assert sum(e.percentage for e in scope_breakdown(records)) == pytest.approx(100.0)


def test_period_trend_is_chronological(sample_records):
    """Test periods are sorted ascending."""
    result = period_trend(sample_records)

    assert [(p.period, p.value) for p in result] == [
        ("2022 Q1", 200.0),
        ("2022 Q2", 100.0),
        ("2023 Q1", 300.0),
    ]


def test_top_emitters_sorted_descending(sample_records):
    """Test companies with totals A=100, B=300, C=200 rank B, C, A."""
    result = top_emitters(sample_records)

    assert [entry.name for entry in result] == ["B", "C", "A"]
    assert [entry.rank for entry in result] == [1, 2, 3]
    assert result[0].bar_percentage == pytest.approx(100.0)
    assert result[2].bar_percentage == pytest.approx(100.0 / 3)
    assert result[0].percentage == pytest.approx(50.0)


def test_top_emitters_limit_keeps_shares(sample_records):
    """Test truncation does not change percentages."""
    result = top_emitters(sample_records, limit=1)

    assert len(result) == 1
    assert result[0].name == "B"
    assert result[0].percentage == pytest.approx(50.0)


def test_top_emitters_ties_keep_encounter_order():
    """Test equal totals are listed in first-encounter order."""
    records = [
        EmissionRecordFactory(facility_name="Zeta", emissions=10.0),
        EmissionRecordFactory(facility_name="Alpha", emissions=10.0),
    ]

    assert [entry.name for entry in top_emitters(records)] == ["Zeta", "Alpha"]
    assert top_emitters([]) == []


def test_period_change_is_deterministic(sample_records):
    """Test the trend indicator compares the two latest periods."""
    change = period_change(sample_records)

    assert change.previous_period == "2022 Q2"
    assert change.current_period == "2023 Q1"
    assert change.change_percentage == pytest.approx(200.0)
    assert change.direction == TrendDirectionEnum.UP
    assert period_change(sample_records) == change


def test_period_change_needs_two_periods():
    """Test a single period gives no trend."""
    assert period_change([EmissionRecordFactory()]) is None
    assert period_change([]) is None


def test_change_between_zero_previous():
    """Test growth from a zero period reports 0% but still points up."""
    change = change_between(
        PeriodTotal(period="2022 Q1", value=0.0), PeriodTotal(period="2022 Q2", value=50.0)
    )

    assert change.change_percentage == 0.0
    assert change.direction == TrendDirectionEnum.UP


def test_change_between_decrease_and_flat():
    """Test downward and flat directions."""
    down = change_between(
        PeriodTotal(period="2023 Q1", value=200.0), PeriodTotal(period="2023 Q2", value=150.0)
    )
    flat = change_between(
        PeriodTotal(period="2023 Q1", value=200.0), PeriodTotal(period="2023 Q2", value=200.0)
    )

    assert down.change_percentage == pytest.approx(-25.0)
    assert down.direction == TrendDirectionEnum.DOWN
    assert flat.direction == TrendDirectionEnum.FLAT


def test_unique_companies(sample_records):
    """Test company names in first-appearance order."""
    assert unique_companies(sample_records) == ["A", "B", "C"]


@pytest.mark.parametrize(
    "total, level",
    [
        (15000.01, EmissionLevelEnum.CRITICAL),
        (15000.0, EmissionLevelEnum.HIGH),
        (8000.5, EmissionLevelEnum.HIGH),
        (4000.5, EmissionLevelEnum.ELEVATED),
        (4000.0, EmissionLevelEnum.LOW),
        (0.0, EmissionLevelEnum.LOW),
    ],
)
def test_emission_level(total, level):
    """Test marker tiers use exclusive lower bounds."""
    assert emission_level(total) == level


def test_map_position_linear_scaling():
    """Test coordinates are scaled linearly into the bounds."""
    facility = FacilityFactory(latitude=21.5, longitude=82.5)

    position = map_position(facility)

    assert position.x == pytest.approx(50.0)
    assert position.y == pytest.approx(50.0)

    corner = map_position(FacilityFactory(latitude=35.0, longitude=68.0))
    assert (corner.x, corner.y) == (0.0, 0.0)


def test_facility_markers(sample_records):
    """Test markers carry totals, position and tier."""
    facilities = facilities_with_totals([FacilityFactory(id="FB")], sample_records)

    markers = facility_markers(facilities, {"min_lat": 0, "max_lat": 40, "min_lng": 60, "max_lng": 100})

    assert markers[0].total_emissions == pytest.approx(300.0)
    assert markers[0].emission_level == EmissionLevelEnum.LOW
    assert markers[0].position.x == pytest.approx((72.8777 - 60) / 40 * 100)


def test_facility_detail_all_scopes(record_store):
    """Test the facility panel over every scope."""
    facility = record_store.get_facility("F003")

    detail = facility_detail(facility, record_store.records)

    assert detail.facility.record_count == 10
    assert len(detail.records) == 10
    assert len(detail.scope_breakdown) == 3
    assert detail.total_emissions == pytest.approx(26998.58)
    assert [p.period for p in detail.period_trend] == ["2022 Q1", "2022 Q2", "2023 Q1", "2023 Q2"]


def test_facility_detail_selected_scope(record_store):
    """Test a selected scope narrows everything but the record count."""
    facility = record_store.get_facility("F003")

    detail = facility_detail(facility, record_store.records, "Scope 1")

    assert detail.selected_scope == "Scope 1"
    assert [e.key for e in detail.scope_breakdown] == ["Scope 1"]
    assert detail.scope_breakdown[0].value == pytest.approx(12059.77)
    assert detail.total_emissions == pytest.approx(12059.77)
    assert all(record.scope == "Scope 1" for record in detail.records)
    assert len(detail.records) == 5
    assert detail.facility.record_count == 10
    assert detail.period_change.direction == TrendDirectionEnum.DOWN


def test_dashboard_overview(record_store):
    """Test header figures of the bundled dataset."""
    overview = dashboard_overview(record_store.facilities, record_store.records)

    assert overview.record_count == 81
    assert overview.facility_count == 15
    assert overview.company_count == 4
    assert overview.total_emissions == pytest.approx(229459.0, abs=1.0)


def test_analytics_on_bundled_dataset(record_store):
    """Test the leaderboard of the bundled dataset."""
    result = analytics(record_store.records, limit=10)

    assert [e.name for e in result.top_emitters] == [
        "Adani Green",
        "JSW Energy",
        "Tata Steel",
        "L&T",
    ]
    assert result.top_emitters[0].total == pytest.approx(88755.76)


def test_facility_detail_unknown_scope_means_all(record_store):
    """Test an unrecognized scope gives the full facility panel."""
    facility = record_store.get_facility("F003")

    detail = facility_detail(facility, record_store.records, "Scope 4")

    assert detail.selected_scope == "all"
    assert len(detail.records) == 10
    assert [e.key for e in detail.scope_breakdown] == ["Scope 1", "Scope 2", "Scope 3"]
    assert detail.total_emissions == pytest.approx(26998.58)


def test_map_position_partial_bounds_use_defaults():
    """Test missing bound keys fall back to the default map bounds."""
    facility = FacilityFactory(latitude=21.5, longitude=82.5)

    position = map_position(facility, {"min_lat": 8.0, "max_lat": 35.0, "min_lng": 68.0})

    assert position.x == pytest.approx(50.0)
    assert position.y == pytest.approx(50.0)
