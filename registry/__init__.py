"""Registry module - Indicator catalogue."""

from .indicator_registry import (
    IndicatorRegistry,
    IndicatorInfo,
    INDICATORS_DB,
    DASHBOARD_INDICATORS,
    registry,
)

__all__ = [
    'IndicatorRegistry',
    'IndicatorInfo',
    'INDICATORS_DB',
    'DASHBOARD_INDICATORS',
    'registry',
]
