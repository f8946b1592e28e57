"""
Temporal helpers - calendar-month anchors and date-range filtering.

Handles:
- Month-end anchors: "last day of the month N months / years ago"
- Display ranges: "3m", "6m", "1y", "5y", "10y", "max"
- Inclusive ISO-date filtering of (dates, values) pairs
"""

from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple

from dateutil.relativedelta import relativedelta


EARLIEST_DATE = date(1950, 1, 1)


def parse_date(value: str) -> date:
    """Parse the date part of an ISO date or timestamp string."""
    return datetime.strptime(value[:10], '%Y-%m-%d').date()


def month_end(today: date, months_back: int = 1, years_back: int = 0) -> date:
    """
    Last day of the month `months_back` months (and `years_back` years)
    before the month containing `today`.

    month_end(date(2024, 3, 15)) -> 2024-02-29
    month_end(date(2024, 3, 15), months_back=2) -> 2024-01-31
    month_end(date(2024, 3, 15), years_back=1) -> 2023-02-28
    """
    if months_back < 1:
        raise ValueError("months_back must be at least 1")
    first_of_next = today.replace(day=1) - relativedelta(years=years_back, months=months_back - 1)
    return first_of_next - timedelta(days=1)


_RANGE_MONTHS = {'3m': 3, '6m': 6}
_RANGE_YEARS = {'1y': 1, '5y': 5, '10y': 10}


def range_start_date(range_key: Optional[str], today: Optional[date] = None) -> date:
    """
    First date shown for a display range.

    Unknown or missing keys fall back to one year.
    """
    today = today or date.today()

    if range_key == 'max':
        return EARLIEST_DATE
    if range_key in _RANGE_MONTHS:
        return today - relativedelta(months=_RANGE_MONTHS[range_key])
    years = _RANGE_YEARS.get(range_key, 1)
    return today - relativedelta(years=years)


def filter_data_by_dates(
    dates: List[str],
    values: List[float],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None
) -> Tuple[List[str], List[float]]:
    """
    Filter data to a specific date range.

    Args:
        dates: List of date strings (YYYY-MM-DD)
        values: List of corresponding values
        start_date: Start date (inclusive)
        end_date: End date (inclusive)

    Returns:
        Tuple of (filtered_dates, filtered_values)
    """
    if not start_date and not end_date:
        return list(dates), list(values)

    filtered_dates = []
    filtered_values = []

    for d, value in zip(dates, values):
        if start_date and d < start_date:
            continue
        if end_date and d > end_date:
            continue
        filtered_dates.append(d)
        filtered_values.append(value)

    return filtered_dates, filtered_values
