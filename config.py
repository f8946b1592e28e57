"""
Market Momentum Dashboard - Centralized Configuration

All environment variables, constants, and settings in one place.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()


PROJECT_ROOT = Path(__file__).parent


def _split_csv(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(',') if item.strip()]


@dataclass
class Config:
    """Application configuration loaded from environment."""

    # API Keys
    fred_api_key: Optional[str] = None
    google_search_api_key: Optional[str] = None
    google_search_engine_id: Optional[str] = None

    # Admin
    admin_password: Optional[str] = None
    admin_token_ttl: int = 43200       # 12 hours

    # Storage
    data_dir: Path = field(default_factory=lambda: PROJECT_ROOT / 'data')
    max_estimates: int = 100

    # Provider settings
    fred_observation_start: str = '1950-01-01'
    yahoo_history_years: int = 20
    refresh_delay_seconds: float = 3.0
    http_timeout: float = 15.0

    # View settings
    default_momentum_period: str = '1m'
    growth_window_months: int = 24

    cors_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ])

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        data_dir = os.environ.get('DATA_DIR')
        cors = _split_csv(os.environ.get('CORS_ORIGINS'))

        cfg = cls(
            fred_api_key=os.environ.get('FRED_API_KEY'),
            google_search_api_key=os.environ.get('GOOGLE_SEARCH_API_KEY'),
            google_search_engine_id=os.environ.get('GOOGLE_SEARCH_ENGINE_ID'),
            admin_password=os.environ.get('ADMIN_PASSWORD'),

            # Allow override via env
            admin_token_ttl=int(os.environ.get('ADMIN_TOKEN_TTL', 43200)),
            fred_observation_start=os.environ.get('FRED_OBSERVATION_START', '1950-01-01'),
            yahoo_history_years=int(os.environ.get('YAHOO_HISTORY_YEARS', 20)),
            refresh_delay_seconds=float(os.environ.get('REFRESH_DELAY_SECONDS', 3)),
            growth_window_months=int(os.environ.get('GROWTH_WINDOW_MONTHS', 24)),
        )
        if data_dir:
            cfg.data_dir = Path(data_dir)
        if cors:
            cfg.cors_origins = cors
        return cfg

    @property
    def google_search_configured(self) -> bool:
        return bool(self.google_search_api_key and self.google_search_engine_id)

    def missing_settings(self) -> List[str]:
        """Names of optional settings that are not configured."""
        missing = []
        if not self.fred_api_key:
            missing.append('FRED_API_KEY')
        if not self.google_search_configured:
            missing.append('GOOGLE_SEARCH_API_KEY/GOOGLE_SEARCH_ENGINE_ID')
        if not self.admin_password:
            missing.append('ADMIN_PASSWORD')
        return missing


# Global config instance
config = Config.from_env()


# Momentum baseline periods accepted by the API
MOMENTUM_PERIODS = ('1m', '6m', '1y', '2y', '3y', '4y', '5y')

# Raw-series display ranges (Japan dashboard)
SERIES_RANGES = ('3m', '6m', '1y', '5y', '10y', 'max')
