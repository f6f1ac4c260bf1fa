"""Tests for the console and Tk render sinks."""

import io

import pytest

from weatherapp.config.schema import AppConfig
from weatherapp.models.errors import HttpStatusError
from weatherapp.models.weather import CurrentWeather, ForecastDay, ForecastSeries
from weatherapp.reporting.sink import ConsoleSink, NullSink
from weatherapp.ui.tk_sink import TkRenderSink

CURRENT = CurrentWeather(
    temperature=21.3, humidity=60, wind_speed=4.2, condition="clear sky", icon="01d"
)
SERIES = ForecastSeries(
    days=(
        ForecastDay("2026-10-17", "Sat", 10.0, 15.0, "clear sky", "01d"),
        ForecastDay("2026-10-18", "Sun", 11.8, 16.8, "few clouds", "02d"),
        ForecastDay("2026-10-19", "Mon", 12.6, 17.6, "clear sky", "01d"),
    )
)


class FakeScheduler:
    """Queues after() callbacks until the test drains them, like a Tk loop."""

    def __init__(self):
        self.pending = []

    def after(self, ms, func, *args):
        self.pending.append((ms, func, args))

    def drain(self):
        while self.pending:
            _, func, args = self.pending.pop(0)
            func(*args)


class FakeView:
    def __init__(self):
        self.calls = []

    def set_current(self, current, icon):
        self.calls.append(("current", current, icon))

    def set_forecast(self, forecast, icons):
        self.calls.append(("forecast", forecast, icons))

    def set_status(self, message):
        self.calls.append(("status", message))


class TestConsoleSink:
    def test_writes_sections_and_errors(self):
        out, err = io.StringIO(), io.StringIO()
        sink = ConsoleSink(out=out, err=err)

        sink.show_current(CURRENT)
        sink.show_forecast(SERIES)
        sink.show_error("Failed to fetch forecast data.")

        assert "Temperature: 21.3°C" in out.getvalue()
        assert "  Sun 2026-10-18  11.8°C / 16.8°C  few clouds" in out.getvalue()
        assert err.getvalue() == "Error: Failed to fetch forecast data.\n"

    def test_null_sink_accepts_everything(self):
        sink = NullSink()
        sink.show_current(CURRENT)
        sink.show_forecast(SERIES)
        sink.show_error("x")


class TestTkRenderSink:
    @pytest.fixture
    def scheduler(self):
        return FakeScheduler()

    @pytest.fixture
    def view(self):
        return FakeView()

    def test_updates_are_deferred_to_scheduler(self, scheduler, view, test_config):
        sink = TkRenderSink(scheduler, view, test_config)

        sink.show_current(CURRENT)
        sink.show_error("Error fetching location data.")
        assert view.calls == []
        assert [ms for ms, _, _ in scheduler.pending] == [0, 0]

        scheduler.drain()
        assert view.calls == [
            ("current", CURRENT, None),
            ("status", "Error fetching location data."),
        ]

    def test_icons_loaded_before_marshalling(self, scheduler, view, test_config):
        requested = []

        def loader(url):
            requested.append(url)
            return url.encode()

        sink = TkRenderSink(scheduler, view, test_config, icon_loader=loader)
        sink.show_current(CURRENT)
        assert requested == ["https://test-owm.example.com/img/wn/01d@2x.png"]

        scheduler.drain()
        assert view.calls[0][2] == b"https://test-owm.example.com/img/wn/01d@2x.png"

    def test_forecast_icons_cached_per_code(self, scheduler, view, test_config):
        requested = []

        def loader(url):
            requested.append(url)
            return b"png"

        sink = TkRenderSink(scheduler, view, test_config, icon_loader=loader)
        sink.show_forecast(SERIES)
        scheduler.drain()

        assert len(requested) == 2
        kind, forecast, icons = view.calls[0]
        assert kind == "forecast"
        assert forecast is SERIES
        assert icons == [b"png", b"png", b"png"]

    def test_icon_failure_renders_without_icon(self, scheduler, view, test_config):
        calls = []

        def loader(url):
            calls.append(url)
            raise HttpStatusError("HTTP 404", 404)

        sink = TkRenderSink(scheduler, view, test_config, icon_loader=loader)
        sink.show_current(CURRENT)
        sink.show_current(CURRENT)
        scheduler.drain()

        assert [c[2] for c in view.calls] == [None, None]
        # failures are retried on the next request
        assert len(calls) == 2

    def test_default_config_icon_host(self, scheduler, view):
        requested = []
        sink = TkRenderSink(
            scheduler, view, AppConfig(), icon_loader=lambda u: requested.append(u) or b""
        )
        sink.show_current(CURRENT)
        assert requested == ["https://openweathermap.org/img/wn/01d@2x.png"]
