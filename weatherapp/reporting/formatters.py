"""Label and summary formatters for weather display records."""

import json
from dataclasses import asdict

from weatherapp.models.weather import (
    CurrentWeather,
    ForecastDay,
    ForecastSeries,
    WeatherReport,
)


def temperature_label(celsius: float) -> str:
    return f"{celsius:.1f}°C"


def humidity_label(percent: int) -> str:
    return f"{percent}%"


def wind_speed_label(mps: float) -> str:
    return f"{mps:.1f} m/s"


def tile_temperature_label(day: ForecastDay) -> str:
    return f"{temperature_label(day.temp_min)} / {temperature_label(day.temp_max)}"


def format_current_text(c: CurrentWeather) -> str:
    """Plain text block for the current conditions."""
    lines = [
        f"Temperature: {temperature_label(c.temperature)}",
        f"Humidity: {humidity_label(c.humidity)}",
        f"Wind: {wind_speed_label(c.wind_speed)}",
        f"Condition: {c.condition}",
    ]
    return "\n".join(lines)


def format_forecast_text(series: ForecastSeries) -> str:
    if not series.days:
        return "Forecast: no data"
    lines = ["Forecast:"]
    for d in series:
        lines.append(f"  {d.day} {d.date}  {tile_temperature_label(d)}  {d.condition}")
    return "\n".join(lines)


def format_report_json(report: WeatherReport) -> str:
    """JSON for programmatic consumption; keys sorted so output is stable."""
    data = {
        "city": report.city,
        "current": None,
        "forecast": None,
        "errors": list(report.errors),
    }
    if report.current is not None:
        data["current"] = {
            **asdict(report.current),
            "labels": {
                "temperature": temperature_label(report.current.temperature),
                "humidity": humidity_label(report.current.humidity),
                "wind_speed": wind_speed_label(report.current.wind_speed),
            },
        }
    if report.forecast is not None:
        data["forecast"] = [
            {**asdict(d), "label": tile_temperature_label(d)} for d in report.forecast
        ]
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)


def format_report_text(report: WeatherReport) -> str:
    """Plain text report for logging. Failed sections are left out."""
    parts = [f"=== Weather for {report.city} ===" if report.city else "=== Weather ==="]
    if report.current is not None:
        parts.append(format_current_text(report.current))
    if report.forecast is not None:
        parts.append(format_forecast_text(report.forecast))
    for error in report.errors:
        parts.append(f"Error: {error}")
    return "\n".join(parts)
