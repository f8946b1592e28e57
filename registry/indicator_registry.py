"""
Indicator Registry - Single Source of Truth

Every indicator the dashboard knows about: its display name, which provider
serves it, and the provider-side identifier (FRED series id or Yahoo ticker).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class IndicatorInfo:
    """Metadata for a single dashboard indicator."""

    key: str
    name: str
    source: str  # 'fred' or 'yahoo'
    source_id: str
    region: str = 'us'  # 'us' or 'japan'
    color: str = '#888888'


# =============================================================================
# INDICATOR DATABASE
# =============================================================================

INDICATORS_DB: Dict[str, IndicatorInfo] = {
    'sp500': IndicatorInfo(
        key='sp500',
        name='S&P 500 Index',
        source='yahoo',
        source_id='^GSPC',
        color='#2E86AB',
    ),
    'treasury': IndicatorInfo(
        key='treasury',
        name='iShares 7-10 Year Treasury Bond ETF',
        source='yahoo',
        source_id='IEF',
        color='#A23B72',
    ),
    'oil': IndicatorInfo(
        key='oil',
        name='Crude Oil Prices: WTI',
        source='fred',
        source_id='DCOILWTICO',
        color='#F18F01',
    ),
    'gold': IndicatorInfo(
        key='gold',
        name='Gold Futures',
        source='yahoo',
        source_id='GC=F',
        color='#C9A227',
    ),
    'dollar': IndicatorInfo(
        key='dollar',
        name='Advanced Foreign Economies Dollar Index',
        source='fred',
        source_id='DTWEXAFEGS',
        color='#3B8B5A',
    ),
    'nikkei': IndicatorInfo(
        key='nikkei',
        name='Nikkei 225 Index',
        source='yahoo',
        source_id='^N225',
        region='japan',
        color='#DC143C',
    ),
    'topix': IndicatorInfo(
        key='topix',
        name='TOPIX ETF',
        source='yahoo',
        source_id='1306.T',
        region='japan',
        color='#FF6B6B',
    ),
    'usdjpy': IndicatorInfo(
        key='usdjpy',
        name='USD/JPY Exchange Rate',
        source='yahoo',
        source_id='JPY=X',
        region='japan',
        color='#4ECDC4',
    ),
    'jgb': IndicatorInfo(
        key='jgb',
        name='Japanese Government Bond 10-Year Yield',
        source='fred',
        source_id='IRLTLT01JPM156N',
        region='japan',
        color='#95E1D3',
    ),
}

# Indicators compared on the momentum and growth charts, in display order
DASHBOARD_INDICATORS: List[str] = ['sp500', 'treasury', 'oil', 'gold', 'dollar']


class IndicatorRegistry:
    """Lookup over the indicator catalogue."""

    def __init__(self, indicators: Optional[Dict[str, IndicatorInfo]] = None,
                 dashboard: Optional[List[str]] = None):
        self._indicators: Dict[str, IndicatorInfo] = dict(indicators or INDICATORS_DB)
        self._dashboard: List[str] = list(dashboard or DASHBOARD_INDICATORS)

    def get(self, key: str) -> Optional[IndicatorInfo]:
        """Get metadata for an indicator by key."""
        return self._indicators.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._indicators

    def keys(self, region: Optional[str] = None) -> List[str]:
        """Indicator keys, optionally restricted to one region."""
        return [
            key for key, info in self._indicators.items()
            if region is None or info.region == region
        ]

    def all(self) -> List[IndicatorInfo]:
        return list(self._indicators.values())

    def dashboard_indicators(self) -> List[str]:
        """Keys shown on the momentum and growth charts."""
        return [key for key in self._dashboard if key in self._indicators]


# Global registry instance
registry = IndicatorRegistry()
