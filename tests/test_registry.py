"""Tests for the indicator registry."""

from registry import DASHBOARD_INDICATORS, IndicatorInfo, IndicatorRegistry, registry


class TestIndicatorRegistry:

    def test_dashboard_indicators(self):
        assert registry.dashboard_indicators() == ['sp500', 'treasury', 'oil', 'gold', 'dollar']
        assert all(key in registry for key in DASHBOARD_INDICATORS)

    def test_provider_routing(self):
        assert registry.get('sp500').source == 'yahoo'
        assert registry.get('sp500').source_id == '^GSPC'
        assert registry.get('oil').source == 'fred'
        assert registry.get('jgb').source_id == 'IRLTLT01JPM156N'

    def test_regions(self):
        assert registry.keys(region='japan') == ['nikkei', 'topix', 'usdjpy', 'jgb']
        assert 'nikkei' not in registry.keys(region='us')

    def test_unknown(self):
        assert registry.get('bitcoin') is None
        assert 'bitcoin' not in registry

    def test_custom_catalogue(self):
        custom = IndicatorRegistry({
            'btc': IndicatorInfo(key='btc', name='Bitcoin', source='yahoo', source_id='BTC-USD'),
        })
        assert custom.keys() == ['btc']
        assert custom.all()[0].region == 'us'
