"""Pydantic v2 configuration schema with strict validation."""

from typing import Literal

from pydantic import BaseModel, Field

from weatherapp.config.defaults import (
    API_KEY_ENV,
    CURRENT_WEATHER_URL,
    FORECAST_URL,
    GEOCODE_URL,
    ICON_BASE_URL,
)


class EndpointsConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    current_weather_url: str = CURRENT_WEATHER_URL
    geocode_url: str = GEOCODE_URL
    forecast_url: str = FORECAST_URL
    icon_base_url: str = ICON_BASE_URL


class AppConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    api_key: str = ""
    api_key_env: str = Field(default=API_KEY_ENV, min_length=1)
    units: Literal["metric"] = "metric"
    geocode_limit: int = Field(default=1, ge=1, le=5)
    endpoints: EndpointsConfig = EndpointsConfig()

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())
