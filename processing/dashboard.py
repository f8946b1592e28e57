"""
Dashboard view builders.

Reads stored series and assembles the momentum, growth and snapshot payloads
the frontend consumes. Everything the builders need is passed in through a
DashboardState, so each request recomputes from the files on disk.

Momentum series are aligned to common dates; growth series are not. Each
growth series is cut to its own trailing window instead.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from registry import registry as default_registry, IndicatorRegistry
from store import SeriesStore
from .alignment import align_series
from .errors import TransformError
from .growth import (
    calculate_monthly_growth,
    month_to_date_growth,
    previous_month_growth,
    trailing_window,
)
from .momentum import MomentumResult, calculate_momentum


logger = logging.getLogger(__name__)


@dataclass
class DashboardState:
    """Inputs shared by the view builders for one request."""

    store: SeriesStore
    indicators: List[str]
    registry: IndicatorRegistry = field(default_factory=lambda: default_registry)
    today: Optional[date] = None

    def reference_date(self) -> date:
        return self.today or date.today()

    def display_name(self, key: str, doc: dict) -> str:
        if doc.get('name'):
            return doc['name']
        info = self.registry.get(key)
        return info.name if info else key


def _stored_series(state: DashboardState):
    """Yield (key, doc) for every indicator that has usable data on disk."""
    for key in state.indicators:
        doc = state.store.read(key)
        if doc is None:
            continue
        yield key, doc


def build_momentum(state: DashboardState, period: str = '1m') -> dict:
    """
    Momentum payload: {success, data: {key: {name, dates, values, baselineDate}}, count}
    """
    today = state.reference_date()
    results: Dict[str, MomentumResult] = {}
    names: Dict[str, str] = {}

    for key, doc in _stored_series(state):
        try:
            result = calculate_momentum(doc['dates'], doc['values'], period, today)
        except TransformError as e:
            logger.warning("Skipping %s momentum: %s", key, e)
            continue

        if result.is_empty:
            logger.info("No momentum data for %s", key)
            continue

        results[key] = result
        names[key] = state.display_name(key, doc)

    aligned = align_series(results)
    if aligned:
        logger.info("Momentum (%s) ready for %d indicators, %d common dates",
                    period, len(aligned), len(next(iter(aligned.values())).dates))

    data = {
        key: {'name': names[key], **result.to_dict()}
        for key, result in aligned.items()
    }
    return {
        'success': len(data) > 0,
        'data': data,
        'count': len(data),
    }


def build_growth(state: DashboardState, months: Optional[int] = 24) -> dict:
    """
    Growth payload: {success, data: {key: {name, dates, values}}, count}

    Each indicator keeps its own last `months` rows; no cross-series alignment.
    """
    data = {}

    for key, doc in _stored_series(state):
        try:
            growth = calculate_monthly_growth(doc['dates'], doc['values'])
        except TransformError as e:
            logger.warning("Skipping %s growth: %s", key, e)
            continue

        if not growth.dates:
            logger.info("No growth data for %s", key)
            continue

        growth = trailing_window(growth, months)
        data[key] = {'name': state.display_name(key, doc), **growth.to_dict()}

    logger.info("Growth data ready for %d indicators", len(data))
    return {
        'success': len(data) > 0,
        'data': data,
        'count': len(data),
    }


def build_snapshot(state: DashboardState) -> dict:
    """
    Latest value plus last-month and month-to-date growth per indicator.

    Payload: {success, data: {key: {name, latestDate, latestValue,
    previousMonthGrowth, monthToDateGrowth}}, count, asOf}
    """
    today = state.reference_date()
    data = {}
    as_of = None

    for key, doc in _stored_series(state):
        dates, values = doc['dates'], doc['values']
        if not dates:
            continue

        latest_date = dates[-1]
        if as_of is None or latest_date > as_of:
            as_of = latest_date

        data[key] = {
            'name': state.display_name(key, doc),
            'latestDate': latest_date,
            'latestValue': values[-1],
            'previousMonthGrowth': previous_month_growth(dates, values, today),
            'monthToDateGrowth': month_to_date_growth(dates, values, today),
        }

    return {
        'success': len(data) > 0,
        'data': data,
        'count': len(data),
        'asOf': as_of,
    }
