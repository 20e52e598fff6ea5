"""
Pydantic models for Facilities following kkb_fastapi pattern.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.utils.constants import EmissionLevelEnum


class FacilityPydModel(BaseModel):
    """Physical location where emissions are measured."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique facility identifier", examples=["F003"])
    name: str = Field(..., min_length=1, description="Company display name", examples=["Tata Steel"])
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in degrees")
    industry: str = Field("", description="Industry classification", examples=["Steel & Metals"])
    description: str = Field(
        "", description="Facility label", examples=["Tata Steel - Jamshedpur Plant"]
    )


class FacilityWithTotals(FacilityPydModel):
    """Facility annotated with the totals of its emission records."""

    total_emissions: float = Field(..., ge=0, description="Sum of record emissions (tCO2e)")
    record_count: int = Field(..., ge=0, description="Number of emission records")


class MapPosition(BaseModel):
    """Linear position inside the configured map bounds, 0-100 on each axis."""

    x: float
    y: float


class FacilityMarker(FacilityWithTotals):
    """Facility as plotted on the map."""

    position: MapPosition
    emission_level: EmissionLevelEnum
