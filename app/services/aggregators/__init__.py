"""
Aggregation of emission records into totals.
"""
from app.services.aggregators.emission_aggregator import (
    counts_by_facility,
    percentage,
    sum_by_key,
    total_emissions,
    totals_by_company,
    totals_by_facility,
    totals_by_ghg_type,
    totals_by_period,
    totals_by_scope,
)

__all__ = [
    "counts_by_facility",
    "percentage",
    "sum_by_key",
    "total_emissions",
    "totals_by_company",
    "totals_by_facility",
    "totals_by_ghg_type",
    "totals_by_period",
    "totals_by_scope",
]
