"""
Filtering of facilities and emission records by a FilterSpec.

All functions preserve the relative order of their input, never duplicate an
element and are idempotent: filtering a filtered result with the same spec
returns it unchanged.
"""

from typing import Iterable, Optional

from app.pydantic_models import EmissionRecordPydModel, FacilityPydModel, FilterSpec
from app.services.loaders import RecordStore
from app.utils.constants import ALL_SCOPES, SCOPE_FILTER_VALUES


def matches_search(facility: FacilityPydModel, terms: list[str]) -> bool:
    """
    Check whether any search term occurs in the facility's name or description.

    Args:
        facility: Facility to test
        terms: Lowercase search terms

    Returns:
        True if at least one term is a case-insensitive substring
    """
    name = facility.name.lower()
    description = facility.description.lower()
    return any(term in name or term in description for term in terms)


def matches_facility(facility: FacilityPydModel, spec: FilterSpec) -> bool:
    """
    Apply the search and company criteria to one facility.

    When both criteria are active a facility passes if it satisfies either
    of them. An inactive criterion places no restriction.
    """
    terms = spec.search_terms
    search_active = bool(terms)
    company_active = bool(spec.selected_companies)

    if not search_active and not company_active:
        return True

    in_companies = company_active and facility.name in spec.selected_companies
    found = search_active and matches_search(facility, terms)
    return in_companies or found


def normalize_scope(selected_scope) -> str:
    """Scope selector value, unrecognized values mapped to 'all'."""
    if selected_scope not in SCOPE_FILTER_VALUES:
        return ALL_SCOPES
    return selected_scope


def matches_scope(record: EmissionRecordPydModel, selected_scope: str) -> bool:
    """Exact scope match, 'all' (or an unknown value) passes everything."""
    selected_scope = normalize_scope(selected_scope)
    return selected_scope == ALL_SCOPES or record.scope == selected_scope


def matches_record(record: EmissionRecordPydModel, spec: FilterSpec) -> bool:
    """Scope and company criteria, both must pass."""
    if not matches_scope(record, spec.selected_scope):
        return False
    return not spec.selected_companies or record.facility_name in spec.selected_companies


def filter_facilities(
    facilities: Iterable[FacilityPydModel],
    spec: FilterSpec,
) -> list[FacilityPydModel]:
    """Facilities passing the search and company criteria."""
    return [facility for facility in facilities if matches_facility(facility, spec)]


def filter_records(
    records: Iterable[EmissionRecordPydModel],
    spec: FilterSpec,
    facility_id: Optional[str] = None,
) -> list[EmissionRecordPydModel]:
    """
    Records passing the scope and company criteria.

    Args:
        records: Emission records to filter
        spec: Filter specification
        facility_id: Optional restriction to a single facility

    Returns:
        Matching records in input order
    """
    return [
        record
        for record in records
        if matches_record(record, spec)
        and (facility_id is None or record.facility_id == facility_id)
    ]


def filter_records_by_scope(
    records: Iterable[EmissionRecordPydModel],
    selected_scope: str,
) -> list[EmissionRecordPydModel]:
    """Records in the selected scope (all records for 'all')."""
    return [record for record in records if matches_scope(record, selected_scope)]


def records_for_facility(
    records: Iterable[EmissionRecordPydModel],
    facility_id: str,
) -> list[EmissionRecordPydModel]:
    """All records reported for one facility."""
    return [record for record in records if record.facility_id == facility_id]


class EmissionSelector:
    """
    Query layer over the record store.

    All READ operations for facilities and records should go through this
    selector so every view narrows the dataset the same way.
    """

    def __init__(self, store: RecordStore):
        """Initialize selector with the record store."""
        self.store = store

    def get_facilities(self, spec: FilterSpec) -> list[FacilityPydModel]:
        return filter_facilities(self.store.facilities, spec)

    def get_records(
        self, spec: FilterSpec, facility_id: Optional[str] = None
    ) -> list[EmissionRecordPydModel]:
        return filter_records(self.store.records, spec, facility_id=facility_id)

    def get_facility_records(self, facility_id: str) -> list[EmissionRecordPydModel]:
        return records_for_facility(self.store.records, facility_id)

    def get_facility(self, facility_id: str) -> Optional[FacilityPydModel]:
        return self.store.get_facility(facility_id)
