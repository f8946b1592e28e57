"""
Month-over-Month Growth - percent change between month-end observations.

A month is represented by its last observation. The first month with data
only serves as the reference for the second, so N months of data yield N-1
growth rows labelled "Mon YYYY".
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, NamedTuple, Optional

from .errors import ZeroBaselineError
from .lookup import Found, find_on_or_before
from .temporal import month_end


logger = logging.getLogger(__name__)


MONTH_ABBR = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
              'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')


class MonthEnd(NamedTuple):
    year_month: str  # 'YYYY-MM'
    date: str
    value: float


@dataclass
class GrowthResult:
    dates: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {'dates': self.dates, 'values': self.values}


def month_label(year_month: str) -> str:
    """'2024-02' -> 'Feb 2024'"""
    year, month = year_month.split('-')
    return f"{MONTH_ABBR[int(month) - 1]} {year}"


def monthly_last_values(dates: List[str], values: List[float]) -> List[MonthEnd]:
    """Last observation of each calendar month, months ascending."""
    buckets = {}
    for d, v in zip(dates, values):
        year_month = d[:7]
        current = buckets.get(year_month)
        if current is None or d > current.date:
            buckets[year_month] = MonthEnd(year_month, d, v)

    return [buckets[ym] for ym in sorted(buckets)]


def calculate_monthly_growth(dates: List[str], values: List[float]) -> GrowthResult:
    """
    Month-over-month percent change of month-end values.

    Raises:
        ZeroBaselineError: a month's reference (previous month-end) value is zero
    """
    months = monthly_last_values(dates, values)

    growth_dates = []
    growth_values = []
    for previous, current in zip(months, months[1:]):
        if previous.value == 0:
            raise ZeroBaselineError(
                previous.date,
                f"Month-end value on {previous.date} is zero; growth for "
                f"{month_label(current.year_month)} is undefined",
            )
        growth_dates.append(month_label(current.year_month))
        growth_values.append((current.value - previous.value) / previous.value * 100)

    logger.debug("Calculated %d month-over-month growth rates from %d months",
                 len(growth_values), len(months))
    return GrowthResult(dates=growth_dates, values=growth_values)


def trailing_window(result: GrowthResult, months: Optional[int]) -> GrowthResult:
    """Keep only the last `months` rows (None keeps everything)."""
    if months is None:
        return result
    if months < 1:
        raise ValueError("months must be at least 1")
    return GrowthResult(dates=result.dates[-months:], values=result.values[-months:])


def _percent_change(start: float, end: float) -> Optional[float]:
    if not start:
        return None
    return (end - start) / start * 100


def previous_month_growth(
    dates: List[str],
    values: List[float],
    today: Optional[date] = None,
) -> Optional[float]:
    """
    Growth over the last complete month: from the end of the month before
    last to the end of last month. None when either anchor is missing or the
    starting value is zero.
    """
    today = today or date.today()
    start = find_on_or_before(dates, month_end(today, months_back=2))
    end = find_on_or_before(dates, month_end(today, months_back=1))
    if not isinstance(start, Found) or not isinstance(end, Found):
        return None
    return _percent_change(values[start.index], values[end.index])


def month_to_date_growth(
    dates: List[str],
    values: List[float],
    today: Optional[date] = None,
) -> Optional[float]:
    """Growth from the end of last month to the latest observation."""
    if not values:
        return None
    today = today or date.today()
    start = find_on_or_before(dates, month_end(today, months_back=1))
    if not isinstance(start, Found):
        return None
    return _percent_change(values[start.index], values[-1])
