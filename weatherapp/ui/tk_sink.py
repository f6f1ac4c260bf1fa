"""Render sink that marshals updates onto the Tk event loop.

Pipeline calls arrive on the worker thread. Icons are downloaded there too;
only the widget updates are scheduled onto the UI thread through
``scheduler.after(0, ...)``.
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol

from weatherapp.config.schema import AppConfig
from weatherapp.ingest.urls import icon_url
from weatherapp.models.errors import FetchError
from weatherapp.models.weather import CurrentWeather, ForecastSeries

logger = logging.getLogger(__name__)

IconLoader = Callable[[str], bytes]


class Scheduler(Protocol):
    def after(self, ms: int, func: Callable[..., Any], *args: Any) -> Any: ...


class WeatherView(Protocol):
    def set_current(self, current: CurrentWeather, icon: bytes | None) -> None: ...

    def set_forecast(self, forecast: ForecastSeries, icons: list[bytes | None]) -> None: ...

    def set_status(self, message: str) -> None: ...


class TkRenderSink:
    def __init__(
        self,
        scheduler: Scheduler,
        view: WeatherView,
        config: AppConfig,
        icon_loader: IconLoader | None = None,
    ):
        self.scheduler = scheduler
        self.view = view
        self.config = config
        self.icon_loader = icon_loader
        self._icon_cache: dict[str, bytes] = {}

    def show_current(self, current: CurrentWeather) -> None:
        icon = self._load_icon(current.icon)
        self.scheduler.after(0, self.view.set_current, current, icon)

    def show_forecast(self, forecast: ForecastSeries) -> None:
        icons = [self._load_icon(day.icon) for day in forecast]
        self.scheduler.after(0, self.view.set_forecast, forecast, icons)

    def show_error(self, message: str) -> None:
        self.scheduler.after(0, self.view.set_status, message)

    def _load_icon(self, code: str) -> bytes | None:
        if self.icon_loader is None:
            return None
        if code in self._icon_cache:
            return self._icon_cache[code]
        try:
            data = self.icon_loader(icon_url(self.config, code))
        except FetchError as e:
            logger.warning("Could not load icon %s: %s", code, e)
            return None
        self._icon_cache[code] = data
        return data
