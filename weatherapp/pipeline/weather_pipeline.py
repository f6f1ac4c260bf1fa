"""Weather pipeline: current conditions and 5-day forecast for one city."""

import logging

from weatherapp.config.schema import AppConfig
from weatherapp.ingest import urls
from weatherapp.ingest.decoder import (
    decode_coordinates,
    decode_current_weather,
    decode_forecast,
)
from weatherapp.ingest.openweather_client import OpenWeatherClient
from weatherapp.models.errors import (
    ConfigError,
    DecodeError,
    FetchError,
    InputError,
    NetworkError,
    NotFoundError,
)
from weatherapp.models.weather import CurrentWeather, ForecastSeries, WeatherReport
from weatherapp.reporting.formatters import format_report_text
from weatherapp.reporting.sink import RenderSink

logger = logging.getLogger(__name__)

MSG_KEY_MISSING = "API key is missing. Please set the API key."
MSG_CITY_MISSING = "Please enter a city name."
MSG_WEATHER_FAILED = "Failed to fetch weather data."
MSG_WEATHER_ERROR = "Error fetching weather data."
MSG_LOCATION_ERROR = "Error fetching location data."
MSG_FORECAST_FAILED = "Failed to fetch forecast data."


class WeatherPipeline:
    """Runs both request branches and hands results to a render sink.

    The current-weather and forecast branches are independent: a failure in
    one is reported through the sink and does not stop the other. run()
    never raises.
    """

    def __init__(self, config: AppConfig, client: OpenWeatherClient, sink: RenderSink):
        self.config = config
        self.client = client
        self.sink = sink

    def run(self, city: str | None) -> WeatherReport:
        query = (city or "").strip()
        report = WeatherReport(city=query)

        try:
            self._check_preconditions(query)
        except (ConfigError, InputError) as e:
            logger.warning("Request rejected: %s", e)
            message = MSG_KEY_MISSING if isinstance(e, ConfigError) else MSG_CITY_MISSING
            self._report_error(report, message)
            return report

        current = self._run_current(query, report)
        if current is not None:
            report.current = current
            self._render(self.sink.show_current, current)

        forecast = self._run_forecast(query, report)
        if forecast is not None:
            report.forecast = forecast
            self._render(self.sink.show_forecast, forecast)

        logger.info("\n%s", format_report_text(report))
        return report

    def fetch_current(self, city: str) -> CurrentWeather:
        text = self.client.fetch_text(urls.current_weather_url(self.config, city))
        return decode_current_weather(text)

    def fetch_forecast(self, city: str) -> ForecastSeries:
        """Resolve the city to coordinates, then fetch its forecast."""
        geo_text = self.client.fetch_text(urls.geocode_url(self.config, city))
        coords = decode_coordinates(geo_text)
        logger.debug("Resolved %r to %s,%s", city, coords.lat, coords.lon)
        text = self.client.fetch_text(urls.forecast_url(self.config, coords))
        return decode_forecast(text)

    def _check_preconditions(self, query: str) -> None:
        if not self.config.has_api_key:
            raise ConfigError(f"{self.config.api_key_env} is not set")
        if not query:
            raise InputError("City query is blank")

    def _run_current(self, query: str, report: WeatherReport) -> CurrentWeather | None:
        try:
            return self.fetch_current(query)
        except NetworkError:
            logger.exception("Failed to fetch current weather for %r", query)
            self._report_error(report, MSG_WEATHER_FAILED)
        except (FetchError, DecodeError):
            logger.exception("Bad current weather response for %r", query)
            self._report_error(report, MSG_WEATHER_ERROR)
        except Exception:
            logger.exception("Unexpected error fetching current weather for %r", query)
            self._report_error(report, MSG_WEATHER_FAILED)
        return None

    def _run_forecast(self, query: str, report: WeatherReport) -> ForecastSeries | None:
        try:
            return self.fetch_forecast(query)
        except NotFoundError:
            logger.exception("No location found for %r", query)
            self._report_error(report, MSG_LOCATION_ERROR)
        except Exception:
            logger.exception("Failed to fetch forecast for %r", query)
            self._report_error(report, MSG_FORECAST_FAILED)
        return None

    def _report_error(self, report: WeatherReport, message: str) -> None:
        report.errors.append(message)
        self._render(self.sink.show_error, message)

    def _render(self, show, value) -> None:
        try:
            show(value)
        except Exception:
            logger.exception("Render sink failed in %s", show.__name__)
