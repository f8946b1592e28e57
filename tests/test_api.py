"""API tests against the FastAPI app with injected stores."""

import logging
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from api.auth import create_token, verify_token
from api.deps import (
    get_estimates_store,
    get_news_store,
    get_series_store,
    get_source_manager,
    get_today,
)
from config import config
from main import app
from sources import DataSourceManager, SeriesData
from store import EstimatesStore, NewsStore, empty_news
from tests.conftest import TODAY, FakeSource


ADMIN_PASSWORD = 'correct horse'


@pytest.fixture
def yahoo():
    return FakeSource('yahoo', {
        '^GSPC': SeriesData(id='^GSPC', dates=['2024-03-13', '2024-03-14'], values=[5165.31, 5150.48]),
    })


@pytest.fixture
def client(tmp_path, store, yahoo, monkeypatch):
    manager = DataSourceManager(store, sources=[FakeSource('fred'), yahoo], delay_seconds=0)
    estimates = EstimatesStore(tmp_path / "estimates.json")
    news = NewsStore(tmp_path / "sp500_news.json")

    app.dependency_overrides[get_series_store] = lambda: store
    app.dependency_overrides[get_source_manager] = lambda: manager
    app.dependency_overrides[get_estimates_store] = lambda: estimates
    app.dependency_overrides[get_news_store] = lambda: news
    app.dependency_overrides[get_today] = lambda: TODAY
    monkeypatch.setattr(config, 'admin_password', ADMIN_PASSWORD)

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {'Authorization': f"Bearer {create_token(ADMIN_PASSWORD)}"}


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_status_lists_indicators(self, client, save_series):
        save_series('oil', ['2024-01-02', '2024-01-03'], [70.0, 71.0])

        body = client.get("/api/status").json()

        assert body['indicators']['oil']['observations'] == 2
        assert body['indicators']['oil']['lastUpdated']
        assert body['indicators']['nikkei']['region'] == 'japan'
        assert body['indicators']['sp500']['observations'] == 0
        assert body['config']['admin_password_configured'] is True
        assert body['data_sources'] == {'Fake fred': True, 'Fake yahoo': True}

    def test_startup_configures_logging(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, 'data_dir', tmp_path / "data")

        with patch('main.logging.basicConfig') as mock_basic_config:
            with TestClient(app) as client:
                assert client.get("/health").status_code == 200

        mock_basic_config.assert_called_once()
        assert mock_basic_config.call_args.kwargs['level'] == logging.INFO
        assert (tmp_path / "data").is_dir()


class TestDataViews:

    def test_momentum(self, client, save_series):
        save_series('sp500', ['2024-01-31', '2024-02-15', '2024-02-29'], [100.0, 104.0, 108.0])
        save_series('gold', ['2024-01-31', '2024-02-29'], [2000.0, 2100.0])

        response = client.get("/api/data/momentum", params={'period': '1m'})
        body = response.json()

        assert response.status_code == 200
        assert body['success'] is True
        assert body['count'] == 2
        assert body['data']['sp500']['dates'] == ['2024-01-31', '2024-02-29']
        assert body['data']['gold']['values'] == pytest.approx([100.0, 105.0])
        assert body['data']['gold']['baselineDate'] == '2024-01-31'

    def test_momentum_without_data(self, client):
        body = client.get("/api/data/momentum").json()
        assert body == {'success': False, 'data': {}, 'count': 0}

    def test_momentum_invalid_period(self, client):
        response = client.get("/api/data/momentum", params={'period': '7y'})

        assert response.status_code == 422
        assert response.json()['success'] is False
        assert '7y' in response.json()['message']

    def test_growth(self, client, save_series):
        save_series('oil', ['2023-12-29', '2024-01-31', '2024-02-29'], [80.0, 72.0, 79.2])

        body = client.get("/api/data/growth").json()

        assert body['data']['oil']['dates'] == ['Jan 2024', 'Feb 2024']
        assert body['data']['oil']['values'] == pytest.approx([-10.0, 10.0])

    def test_growth_window(self, client, save_series):
        save_series('oil', ['2023-12-29', '2024-01-31', '2024-02-29'], [80.0, 72.0, 79.2])

        body = client.get("/api/data/growth", params={'months': 1}).json()

        assert body['data']['oil']['dates'] == ['Feb 2024']

    def test_growth_rejects_zero_months(self, client):
        assert client.get("/api/data/growth", params={'months': 0}).status_code == 422

    def test_snapshot(self, client, save_series):
        save_series('sp500', ['2024-01-31', '2024-02-29', '2024-03-14'], [100.0, 110.0, 121.0])

        body = client.get("/api/data/snapshot").json()

        assert body['asOf'] == '2024-03-14'
        assert body['data']['sp500']['previousMonthGrowth'] == pytest.approx(10.0)


class TestIndicatorData:

    def test_reads_stored_series(self, client, save_series):
        save_series('oil', ['2022-01-03', '2023-06-01', '2024-03-01'], [75.0, 70.0, 78.0])

        body = client.get("/api/data/oil").json()

        assert body['success'] is True
        assert body['source'] == 'local'
        assert body['data']['dates'] == ['2022-01-03', '2023-06-01', '2024-03-01']

    def test_range_1y(self, client, save_series):
        save_series('oil', ['2022-01-03', '2023-06-01', '2024-03-01'], [75.0, 70.0, 78.0])

        body = client.get("/api/data/oil", params={'range': '1y'}).json()

        assert body['data']['dates'] == ['2023-06-01', '2024-03-01']
        assert body['data']['values'] == [70.0, 78.0]

    def test_range_max(self, client, save_series):
        save_series('oil', ['2022-01-03', '2024-03-01'], [75.0, 78.0])

        body = client.get("/api/data/oil", params={'range': 'max'}).json()

        assert body['data']['dates'] == ['2022-01-03', '2024-03-01']

    def test_range_3m(self, client, save_series):
        save_series('oil', ['2023-12-14', '2023-12-15', '2024-03-01'], [75.0, 76.0, 78.0])

        body = client.get("/api/data/oil", params={'range': '3m'}).json()

        assert body['data']['dates'] == ['2023-12-15', '2024-03-01']

    def test_invalid_range(self, client):
        assert client.get("/api/data/oil", params={'range': '2w'}).status_code == 422

    def test_missing_data(self, client):
        body = client.get("/api/data/oil").json()
        assert body == {'success': False, 'message': 'No local data available', 'source': 'none'}

    def test_unknown_indicator(self, client):
        response = client.get("/api/data/bitcoin")

        assert response.status_code == 404
        assert response.json() == {'success': False, 'message': 'Invalid indicator'}

    def test_refresh(self, client, store, yahoo):
        response = client.post("/api/data/sp500/refresh")
        body = response.json()

        assert response.status_code == 200
        assert body['source'] == 'api'
        assert body['message'] == 'Data fetched from YAHOO and saved locally'
        assert body['data']['values'] == [5165.31, 5150.48]
        assert store.load('sp500')['sourceId'] == '^GSPC'
        assert yahoo.calls == ['^GSPC']

    def test_refresh_failure(self, client):
        response = client.post("/api/data/oil/refresh")

        assert response.status_code == 502
        assert response.json() == {'success': False, 'message': 'No data for DCOILWTICO'}

    def test_refresh_unknown_indicator(self, client):
        assert client.post("/api/data/bitcoin/refresh").status_code == 404


class TestEstimates:

    def test_submit_list_delete(self, client):
        submitted = client.post("/api/estimates/submit", json={
            'name': 'Ann', 'estimates': {'sp500': 5200},
        }).json()

        assert submitted['success'] is True
        estimate_id = submitted['data']['id']

        listed = client.get("/api/estimates").json()
        assert [e['name'] for e in listed['data']] == ['Ann']

        deleted = client.delete(f"/api/estimates/{estimate_id}").json()
        assert deleted == {'success': True, 'message': 'Estimate deleted successfully'}
        assert client.get("/api/estimates").json()['data'] == []

    def test_submit_requires_fields(self, client):
        response = client.post("/api/estimates/submit", json={'name': 'Ann'})

        assert response.status_code == 400
        assert response.json()['message'] == 'Name and estimates are required'

    def test_delete_missing(self, client):
        body = client.delete("/api/estimates/12345").json()
        assert body == {'success': False, 'message': 'Estimate not found'}


class TestAuth:

    def test_verify_token(self):
        token = create_token('secret', issued_at=1_000)

        assert verify_token(token, 'secret', ttl=60, now=1_030) is True
        assert verify_token(token, 'secret', ttl=60, now=1_100) is False
        assert verify_token(token, 'other', ttl=60, now=1_030) is False

    def test_verify_token_non_ascii_signature(self):
        assert verify_token('x.é', 'secret', ttl=60) is False

    def test_non_ascii_bearer_token_is_rejected(self, client):
        response = client.post(
            "/api/news/collect",
            headers={'Authorization': 'Bearer x.é'.encode('latin-1')},
        )

        assert response.status_code == 401
        assert response.json()['message'] == 'Unauthorized - Invalid token'

    def test_login(self, client):
        body = client.post("/api/auth/login", json={'password': ADMIN_PASSWORD}).json()

        assert body['success'] is True
        assert body['token']

    def test_wrong_password(self, client):
        response = client.post("/api/auth/login", json={'password': 'nope'})

        assert response.status_code == 401
        assert response.json()['message'] == 'Invalid password'

    def test_missing_password(self, client):
        assert client.post("/api/auth/login", json={}).status_code == 400

    def test_password_not_configured(self, client, monkeypatch):
        monkeypatch.setattr(config, 'admin_password', None)
        assert client.post("/api/auth/login", json={'password': 'anything'}).status_code == 401


class TestNews:

    def test_read_defaults(self, client):
        body = client.get("/api/news/sp500").json()
        assert body == {'success': True, 'data': empty_news()}

    def test_collect_requires_token(self, client):
        response = client.post("/api/news/collect")

        assert response.status_code == 401
        assert response.json()['message'] == 'Unauthorized - No token provided'

    def test_collect_rejects_bad_token(self, client):
        response = client.post("/api/news/collect", headers={'Authorization': 'Bearer forged.token'})

        assert response.status_code == 401
        assert response.json()['message'] == 'Unauthorized - Invalid token'

    def test_collect_without_google_config(self, client, admin_headers, monkeypatch):
        monkeypatch.setattr(config, 'google_search_api_key', None)

        response = client.post("/api/news/collect", headers=admin_headers)

        assert response.status_code == 400

    def test_collect(self, client, admin_headers, monkeypatch):
        monkeypatch.setattr(config, 'google_search_api_key', 'key')
        monkeypatch.setattr(config, 'google_search_engine_id', 'cx')
        doc = {**empty_news(), 'bullish': [{'url': 'https://example.com', 'title': 'Up'}]}

        async def fake_collect(api_key, engine_id):
            return doc

        monkeypatch.setattr('api.news.collect_news', fake_collect)

        body = client.post("/api/news/collect", headers=admin_headers).json()

        assert body['success'] is True
        assert '1 bullish' in body['message']
        assert client.get("/api/news/sp500").json()['data']['bullish'][0]['title'] == 'Up'

    def test_reset_cost(self, client, admin_headers):
        assert client.post("/api/news/reset-cost", headers=admin_headers).status_code == 404

        client.app.dependency_overrides[get_news_store]().save({**empty_news(), 'totalCost': 1.5})
        body = client.post("/api/news/reset-cost", headers=admin_headers).json()

        assert body == {'success': True, 'message': 'Cost counter reset to $0.00'}
        assert client.get("/api/news/sp500").json()['data']['totalCost'] == 0
