"""OpenWeather request URL builders."""

import re
from urllib.parse import quote, urlencode

from weatherapp.config.schema import AppConfig
from weatherapp.models.weather import Coordinates

_APPID_RE = re.compile(r"(appid=)[^&]*")


def _with_query(base: str, params: list[tuple[str, str]]) -> str:
    return f"{base}?{urlencode(params, quote_via=quote)}"


def current_weather_url(config: AppConfig, city: str) -> str:
    return _with_query(
        config.endpoints.current_weather_url,
        [("q", city), ("appid", config.api_key), ("units", config.units)],
    )


def geocode_url(config: AppConfig, city: str) -> str:
    return _with_query(
        config.endpoints.geocode_url,
        [("q", city), ("limit", str(config.geocode_limit)), ("appid", config.api_key)],
    )


def forecast_url(config: AppConfig, coords: Coordinates) -> str:
    return _with_query(
        config.endpoints.forecast_url,
        [
            ("lat", f"{coords.lat:.7f}"),
            ("lon", f"{coords.lon:.7f}"),
            ("appid", config.api_key),
            ("units", config.units),
        ],
    )


def icon_url(config: AppConfig, icon_code: str) -> str:
    base = config.endpoints.icon_base_url.rstrip("/")
    return f"{base}/{quote(icon_code)}@2x.png"


def redact_url(url: str) -> str:
    """Hide the API key so a URL can be logged."""
    return _APPID_RE.sub(r"\1***", url)
