"""
Immutable in-memory store of facilities and emission records.

Built once at startup by the loader and shared read-only by every request.
"""

from typing import Iterable, Optional

from app.pydantic_models import EmissionRecordPydModel, FacilityPydModel


class RecordStore:
    """
    Read-only fact table for the session.

    Holds facilities and records as tuples so that no consumer can mutate
    them; every derived figure is recomputed from these on demand.
    """

    def __init__(
        self,
        facilities: Iterable[FacilityPydModel],
        records: Iterable[EmissionRecordPydModel],
    ):
        self._facilities = tuple(facilities)
        self._records = tuple(records)
        self._facilities_by_id = {f.id: f for f in self._facilities}

    @property
    def facilities(self) -> tuple[FacilityPydModel, ...]:
        return self._facilities

    @property
    def records(self) -> tuple[EmissionRecordPydModel, ...]:
        return self._records

    def get_facility(self, facility_id: str) -> Optional[FacilityPydModel]:
        """Get facility by ID, None when unknown."""
        return self._facilities_by_id.get(facility_id)

    def __repr__(self) -> str:
        return (
            f"<RecordStore facilities={len(self._facilities)} "
            f"records={len(self._records)}>"
        )
