"""
Date alignment for multi-series charts.

Overlaying several momentum lines on one time axis needs every line to carry
the same dates, so each series is cut down to the dates all of them share.
"""

from typing import Dict, Mapping, Set

from .momentum import MomentumResult


def common_dates(results: Mapping[str, MomentumResult]) -> Set[str]:
    """Dates present in every series (empty set for no series)."""
    date_sets = [set(result.dates) for result in results.values()]
    if not date_sets:
        return set()
    return set.intersection(*date_sets)


def align_series(results: Mapping[str, MomentumResult]) -> Dict[str, MomentumResult]:
    """
    Truncate every series to the shared dates, keeping original order.

    An empty intersection leaves every series empty. Applying this to an
    already-aligned mapping returns equal series.
    """
    shared = common_dates(results)

    aligned = {}
    for key, result in results.items():
        pairs = [(d, v) for d, v in zip(result.dates, result.values) if d in shared]
        aligned[key] = MomentumResult(
            dates=[d for d, _ in pairs],
            values=[v for _, v in pairs],
            baseline_date=result.baseline_date,
        )
    return aligned
