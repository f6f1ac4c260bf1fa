"""Render sinks: where the pipeline hands finished display records."""

import sys
from typing import Protocol, TextIO

from weatherapp.models.weather import CurrentWeather, ForecastSeries
from weatherapp.reporting.formatters import format_current_text, format_forecast_text


class RenderSink(Protocol):
    def show_current(self, current: CurrentWeather) -> None: ...

    def show_forecast(self, forecast: ForecastSeries) -> None: ...

    def show_error(self, message: str) -> None: ...


class NullSink:
    def show_current(self, current: CurrentWeather) -> None:
        pass

    def show_forecast(self, forecast: ForecastSeries) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass


class ConsoleSink:
    """Writes each section as plain text as soon as it is ready."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def show_current(self, current: CurrentWeather) -> None:
        print(format_current_text(current), file=self.out)

    def show_forecast(self, forecast: ForecastSeries) -> None:
        print(format_forecast_text(forecast), file=self.out)

    def show_error(self, message: str) -> None:
        print(f"Error: {message}", file=self.err)
