"""
Pydantic models for the derived dashboard views.

These are the shapes handed to the presentation layer: breakdowns with
percentages, leaderboards, period trends and the single-facility panel.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.pydantic_models.emission_record import EmissionRecordPydModel
from app.pydantic_models.facility import FacilityWithTotals
from app.utils.constants import TrendDirectionEnum


class BreakdownEntry(BaseModel):
    """Total for one key of a closed enumeration and its share of the whole."""

    key: str = Field(..., description="Scope or gas type", examples=["Scope 1"])
    value: float = Field(..., description="Summed emissions (tCO2e)", examples=[54321.5])
    percentage: float = Field(
        ..., description="Share of the breakdown total, 0 when the total is 0", examples=[37.2]
    )


class PeriodTotal(BaseModel):
    """Summed emissions for one reporting period."""

    period: str = Field(..., examples=["2023 Q1"])
    value: float = Field(..., examples=[43210.87])


class EmitterEntry(BaseModel):
    """One row of the top emitters leaderboard."""

    rank: int = Field(..., ge=1, examples=[1])
    name: str = Field(..., description="Company name", examples=["Adani Green"])
    total: float = Field(..., description="Summed emissions (tCO2e)")
    percentage: float = Field(..., description="Share of all listed companies' emissions")
    bar_percentage: float = Field(
        ..., description="Width relative to the leading company, 0-100"
    )


class PeriodChange(BaseModel):
    """Change between the two most recent reporting periods."""

    previous_period: str = Field(..., examples=["2023 Q1"])
    current_period: str = Field(..., examples=["2023 Q2"])
    previous_value: float
    current_value: float
    change_percentage: float = Field(
        ..., description="Signed percentage change, 0 when the previous total is 0"
    )
    direction: TrendDirectionEnum


class PeriodTrendResponse(BaseModel):
    """Quarterly trend with its derived change indicator."""

    periods: list[PeriodTotal]
    change: Optional[PeriodChange] = None


class AnalyticsResponse(BaseModel):
    """Analytics sidebar computed over the filtered records."""

    total_emissions: float = Field(..., description="Total tCO2e of the filtered records")
    record_count: int
    scope_breakdown: list[BreakdownEntry]
    ghg_breakdown: list[BreakdownEntry]
    top_emitters: list[EmitterEntry]


class DashboardOverview(BaseModel):
    """Header strip figures."""

    total_emissions: float
    record_count: int
    facility_count: int
    company_count: int


class FacilityDetail(BaseModel):
    """Emission breakdown of a single facility."""

    facility: FacilityWithTotals
    selected_scope: str
    total_emissions: float = Field(
        ..., description="Total of the facility's records within the selected scope"
    )
    scope_breakdown: list[BreakdownEntry]
    ghg_breakdown: list[BreakdownEntry]
    period_trend: list[PeriodTotal]
    period_change: Optional[PeriodChange] = None
    records: list[EmissionRecordPydModel]
