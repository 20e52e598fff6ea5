"""
Emission Aggregation functions.

Reduces emission records into named totals for a grouping key.
Handles aggregation by company, facility, scope, gas type and reporting period.

Every function is pure: totals are recomputed from the given records on each
call, nothing is cached.
"""

from typing import Callable, Iterable, TypeVar

from app.pydantic_models import EmissionRecordPydModel
from app.utils.constants import GHGTypeEnum, ScopeEnum

K = TypeVar("K")

RecordKey = Callable[[EmissionRecordPydModel], K]


def total_emissions(records: Iterable[EmissionRecordPydModel]) -> float:
    """Sum of the emissions of all records (0.0 for no records)."""
    return sum((record.emissions for record in records), 0.0)


def sum_by_key(
    records: Iterable[EmissionRecordPydModel],
    key: RecordKey,
) -> dict[K, float]:
    """
    Group records by a key and sum their emissions.

    Only keys that occur in the input appear in the result, in order of
    first encounter.

    Args:
        records: Emission records to aggregate
        key: Extracts the grouping key from a record

    Returns:
        Mapping from key to summed emissions
    """
    totals: dict[K, float] = {}
    for record in records:
        group = key(record)
        if group not in totals:
            totals[group] = 0.0
        totals[group] += record.emissions
    return totals


def _sum_over_enumeration(
    records: Iterable[EmissionRecordPydModel],
    key: RecordKey,
    members: Iterable[str],
) -> dict[str, float]:
    # Closed enumerations always report every member, absent ones as 0
    totals = {member: 0.0 for member in members}
    for group, value in sum_by_key(records, key).items():
        totals[group] += value
    return totals


def totals_by_company(records: Iterable[EmissionRecordPydModel]) -> dict[str, float]:
    """Total emissions per company name."""
    return sum_by_key(records, lambda record: record.facility_name)


def totals_by_facility(records: Iterable[EmissionRecordPydModel]) -> dict[str, float]:
    """Total emissions per facility id."""
    return sum_by_key(records, lambda record: record.facility_id)


def totals_by_scope(records: Iterable[EmissionRecordPydModel]) -> dict[str, float]:
    """Total emissions for each of Scope 1, 2 and 3."""
    return _sum_over_enumeration(
        records, lambda record: record.scope, [scope.value for scope in ScopeEnum]
    )


def totals_by_ghg_type(records: Iterable[EmissionRecordPydModel]) -> dict[str, float]:
    """Total emissions for each of CO₂, CH₄ and N₂O."""
    return _sum_over_enumeration(
        records, lambda record: record.ghg_type, [ghg.value for ghg in GHGTypeEnum]
    )


def totals_by_period(records: Iterable[EmissionRecordPydModel]) -> dict[str, float]:
    """Total emissions per reporting period present in the input."""
    return sum_by_key(records, lambda record: record.reporting_period)


def counts_by_facility(records: Iterable[EmissionRecordPydModel]) -> dict[str, int]:
    """Number of records per facility id."""
    counts: dict[str, int] = {}
    for record in records:
        counts[record.facility_id] = counts.get(record.facility_id, 0) + 1
    return counts


def percentage(part: float, whole: float) -> float:
    """
    Share of ``part`` in ``whole`` as a percentage.

    Example:
        >>> percentage(25.0, 200.0)
        12.5
        >>> percentage(0.0, 0.0)
        0.0
    """
    if not whole:
        return 0.0
    return part / whole * 100
