"""Processing module - Series transforms and dashboard views."""

from .errors import TransformError, ZeroBaselineError
from .momentum import MomentumResult, calculate_momentum, baseline_target_date
from .alignment import align_series, common_dates
from .growth import (
    GrowthResult,
    calculate_monthly_growth,
    trailing_window,
    previous_month_growth,
    month_to_date_growth,
)
from .temporal import filter_data_by_dates, range_start_date
from .dashboard import DashboardState, build_momentum, build_growth, build_snapshot

__all__ = [
    'TransformError',
    'ZeroBaselineError',
    'MomentumResult',
    'calculate_momentum',
    'baseline_target_date',
    'align_series',
    'common_dates',
    'GrowthResult',
    'calculate_monthly_growth',
    'trailing_window',
    'previous_month_growth',
    'month_to_date_growth',
    'filter_data_by_dates',
    'range_start_date',
    'DashboardState',
    'build_momentum',
    'build_growth',
    'build_snapshot',
]
