"""Accuracy metrics for the reference DCT."""

from .quality import (
    values_differ,
    count_mismatches,
    calculate_max_error,
    calculate_rmse,
    calculate_energy,
    energy_ratio,
    roundtrip_report,
)

__all__ = [
    'values_differ',
    'count_mismatches',
    'calculate_max_error',
    'calculate_rmse',
    'calculate_energy',
    'energy_ratio',
    'roundtrip_report',
]
