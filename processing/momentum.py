"""
Momentum Index - rebase a series to 100 at a historical baseline.

The baseline is picked from a calendar-month target date:
- 1m: end of the month before last (e.g. in October, Aug 31)
- 6m: end of the month seven months back (in October, Mar 31)
- 1y..5y: end of last month, N years ago
- anything else: end of last month

The matched observation (not the target itself) becomes 100 and every later
observation is expressed relative to it.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from .errors import ZeroBaselineError
from .lookup import Found, find_baseline
from .temporal import month_end


logger = logging.getLogger(__name__)


@dataclass
class MomentumResult:
    """A series rebased to 100 at baseline_date, truncated to start there."""

    dates: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)
    baseline_date: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.dates

    def to_dict(self) -> dict:
        return {
            'dates': self.dates,
            'values': self.values,
            'baselineDate': self.baseline_date,
        }


_PERIOD_OFFSETS = {
    # period: (months_back, years_back)
    '1m': (2, 0),
    '6m': (7, 0),
    '1y': (1, 1),
    '2y': (1, 2),
    '3y': (1, 3),
    '4y': (1, 4),
    '5y': (1, 5),
}


def baseline_target_date(period: str, today: Optional[date] = None) -> date:
    """Calendar target for a baseline period, relative to today."""
    today = today or date.today()
    months_back, years_back = _PERIOD_OFFSETS.get(period, (1, 0))
    return month_end(today, months_back=months_back, years_back=years_back)


def calculate_momentum(
    dates: List[str],
    values: List[float],
    period: str = '1m',
    today: Optional[date] = None,
) -> MomentumResult:
    """
    Rebase a series to 100 at the baseline selected by period.

    Args:
        dates: Ascending ISO date strings
        values: Values matching dates
        period: One of 1m, 6m, 1y, 2y, 3y, 4y, 5y
        today: Reference date for the calendar target (defaults to today)

    Returns:
        MomentumResult covering baseline onward; empty when dates is empty

    Raises:
        ZeroBaselineError: the value at the matched baseline is zero
    """
    if not dates or not values:
        return MomentumResult()

    target = baseline_target_date(period, today)
    match = find_baseline(dates, target)
    if not isinstance(match, Found):
        return MomentumResult()

    baseline_value = values[match.index]
    if baseline_value == 0:
        raise ZeroBaselineError(match.date, f"Baseline value on {match.date} is zero")

    logger.debug("Baseline (%s): target %s, matched %s = %s",
                 period, target.isoformat(), match.date, baseline_value)

    rebased = [v / baseline_value * 100 for v in values[match.index:]]
    return MomentumResult(
        dates=list(dates[match.index:]),
        values=rebased,
        baseline_date=match.date,
    )
