"""
Pydantic models for Emission Records following kkb_fastapi pattern.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.utils.constants import GHGTypeEnum, ScopeEnum


class EmissionRecordPydModel(BaseModel):
    """One reported quantity of one gas, for one facility, scope and period."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    facility_id: str = Field(
        ...,
        min_length=1,
        description="Identifier of the facility the record belongs to",
        examples=["F003"]
    )
    facility_name: str = Field(
        ...,
        min_length=1,
        description="Company display name (shared by all of its facilities)",
        examples=["Tata Steel"]
    )
    reporting_period: str = Field(
        ...,
        pattern=r"^\d{4} Q[1-4]$",
        description="Fixed-width year and quarter token",
        examples=["2023 Q1"]
    )
    scope: ScopeEnum = Field(
        ...,
        description="GHG Protocol scope",
        examples=["Scope 1"]
    )
    ghg_type: GHGTypeEnum = Field(
        ...,
        description="Greenhouse gas measured",
        examples=["CO₂"]
    )
    emissions: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Emissions in metric tons CO2e",
        examples=[2978.67]
    )
