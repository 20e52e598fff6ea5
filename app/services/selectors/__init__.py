"""
Filter engine for facilities and emission records.
"""
from app.services.selectors.emission_filter import (
    EmissionSelector,
    filter_facilities,
    filter_records,
    filter_records_by_scope,
    matches_facility,
    matches_record,
    matches_scope,
    matches_search,
    normalize_scope,
    records_for_facility,
)

__all__ = [
    "EmissionSelector",
    "filter_facilities",
    "filter_records",
    "filter_records_by_scope",
    "matches_facility",
    "matches_record",
    "matches_scope",
    "matches_search",
    "normalize_scope",
    "records_for_facility",
]
