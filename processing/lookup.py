"""
Date lookups over ascending (dates, values) series.

Lookups return a discriminated result instead of an index sentinel:
``Found(index, date)`` or ``NOT_FOUND``.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Union

from .temporal import parse_date


@dataclass(frozen=True)
class Found:
    index: int
    date: str


@dataclass(frozen=True)
class NotFound:
    pass


NOT_FOUND = NotFound()

DateMatch = Union[Found, NotFound]


def find_on_or_before(dates: List[str], target: date) -> DateMatch:
    """
    Latest date that is on or before target.

    Scans forward keeping the smallest non-negative gap, so with duplicate
    dates the first occurrence wins.
    """
    best_index = None
    best_gap = None

    for i, d in enumerate(dates):
        gap = (target - parse_date(d)).days
        if gap >= 0 and (best_gap is None or gap < best_gap):
            best_gap = gap
            best_index = i

    if best_index is None:
        return NOT_FOUND
    return Found(best_index, dates[best_index])


def find_nearest(dates: List[str], target: date) -> DateMatch:
    """Date with the smallest absolute distance to target (earliest on ties)."""
    best_index = None
    best_gap = None

    for i, d in enumerate(dates):
        gap = abs((parse_date(d) - target).days)
        if best_gap is None or gap < best_gap:
            best_gap = gap
            best_index = i

    if best_index is None:
        return NOT_FOUND
    return Found(best_index, dates[best_index])


def find_baseline(dates: List[str], target: date) -> DateMatch:
    """
    Two-phase baseline search: on-or-before target, then nearest in either
    direction. NOT_FOUND only for an empty series.
    """
    match = find_on_or_before(dates, target)
    if isinstance(match, Found):
        return match
    return find_nearest(dates, target)
