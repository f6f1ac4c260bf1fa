"""Shared test fixtures."""

from pathlib import Path

import pytest

from weatherapp.config.schema import AppConfig, EndpointsConfig
from weatherapp.models.weather import CurrentWeather, ForecastSeries

FIXTURE_DIR = Path(__file__).parent / "fixtures"

TEST_BASE = "https://test-owm.example.com"
CURRENT_URL = f"{TEST_BASE}/data/2.5/weather"
GEOCODE_URL = f"{TEST_BASE}/geo/1.0/direct"
FORECAST_URL = f"{TEST_BASE}/data/2.5/forecast"
ICON_URL = f"{TEST_BASE}/img/wn"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def load_fixture():
    """Return a loader for fixture file text."""

    def _load(name: str) -> str:
        return (FIXTURE_DIR / name).read_text()

    return _load


@pytest.fixture
def test_config() -> AppConfig:
    """AppConfig pointing at the test host with a fake key."""
    return AppConfig(
        api_key="test-key-123",
        endpoints=EndpointsConfig(
            current_weather_url=CURRENT_URL,
            geocode_url=GEOCODE_URL,
            forecast_url=FORECAST_URL,
            icon_base_url=ICON_URL,
        ),
    )


class RecordingSink:
    """Render sink that remembers every call in order."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []

    def show_current(self, current: CurrentWeather) -> None:
        self.calls.append(("current", current))

    def show_forecast(self, forecast: ForecastSeries) -> None:
        self.calls.append(("forecast", forecast))

    def show_error(self, message: str) -> None:
        self.calls.append(("error", message))

    def of(self, kind: str) -> list:
        return [value for k, value in self.calls if k == kind]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
