"""Decode OpenWeather JSON bodies into display records.

Field paths are fixed. A missing or mistyped field raises DecodeError
carrying the path (``main.temp``, ``list[8].dt_txt``, ...); nothing is
defaulted.
"""

import json
import math
from datetime import date
from typing import Any

from weatherapp.models.errors import DecodeError, NotFoundError
from weatherapp.models.weather import (
    Coordinates,
    CurrentWeather,
    ForecastDay,
    ForecastSeries,
)

# The forecast feed has one slot per 3 hours, so every 8th slot is one per day.
FORECAST_SLOT_STRIDE = 8

_DAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def decode_current_weather(text: str) -> CurrentWeather:
    doc = _parse_object(text)
    return CurrentWeather(
        temperature=_number(doc, "main", "temp"),
        humidity=int(_number(doc, "main", "humidity")),
        wind_speed=_number(doc, "wind", "speed"),
        condition=_string(doc, "weather", 0, "description"),
        icon=_string(doc, "weather", 0, "icon"),
    )


def decode_coordinates(text: str) -> Coordinates:
    """Coordinates of the first geocoding match.

    An empty result array raises NotFoundError rather than DecodeError.
    """
    doc = _parse(text)
    if not isinstance(doc, list):
        raise DecodeError("Expected a JSON array", "$")
    if not doc:
        raise NotFoundError("No location matched the query")
    return Coordinates(
        lat=_number(doc, 0, "lat", root="$"),
        lon=_number(doc, 0, "lon", root="$"),
    )


def decode_forecast(text: str) -> ForecastSeries:
    """Sample the 3-hour forecast list at a fixed stride.

    Keeps slots 0, 8, 16, ... so a list of n slots yields ceil(n / 8) days.
    """
    doc = _parse_object(text)
    slots = _lookup(doc, "list")
    if not isinstance(slots, list):
        raise DecodeError("Expected an array", "list")

    days = []
    for index in range(0, len(slots), FORECAST_SLOT_STRIDE):
        days.append(_forecast_day(doc, index))
    return ForecastSeries(days=tuple(days))


def _forecast_day(doc: dict, index: int) -> ForecastDay:
    slot = ("list", index)
    dt_txt = _string(doc, *slot, "dt_txt")
    try:
        slot_date = date.fromisoformat(dt_txt[:10])
    except ValueError as e:
        raise DecodeError(f"Bad date {dt_txt!r}", _path(*slot, "dt_txt")) from e

    return ForecastDay(
        date=slot_date.isoformat(),
        day=_DAY_ABBR[slot_date.weekday()],
        temp_min=_number(doc, *slot, "main", "temp_min"),
        temp_max=_number(doc, *slot, "main", "temp_max"),
        condition=_string(doc, *slot, "weather", 0, "description"),
        icon=_string(doc, *slot, "weather", 0, "icon"),
    )


def _parse(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Invalid JSON: {e}", "$") from e


def _parse_object(text: str) -> dict:
    doc = _parse(text)
    if not isinstance(doc, dict):
        raise DecodeError("Expected a JSON object", "$")
    return doc


def _path(*keys: str | int, root: str = "") -> str:
    out = root
    for key in keys:
        if isinstance(key, int):
            out += f"[{key}]"
        else:
            out += f".{key}" if out else key
    return out or "$"


def _lookup(doc: Any, *keys: str | int, root: str = "") -> Any:
    node = doc
    for i, key in enumerate(keys):
        here = _path(*keys[: i + 1], root=root)
        if isinstance(key, int):
            if not isinstance(node, list) or key >= len(node):
                raise DecodeError("Missing array element", here)
        elif not isinstance(node, dict) or key not in node:
            raise DecodeError("Missing field", here)
        node = node[key]
    return node


def _number(doc: Any, *keys: str | int, root: str = "") -> float:
    value = _lookup(doc, *keys, root=root)
    # bool is an int subclass; JSON true/false is not a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Expected a number, got {value!r}", _path(*keys, root=root))
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    # json.loads accepts NaN, Infinity and 1e400
    if not math.isfinite(number):
        raise DecodeError(
            f"Expected a finite number, got {value!r}", _path(*keys, root=root)
        )
    return number


def _string(doc: Any, *keys: str | int, root: str = "") -> str:
    value = _lookup(doc, *keys, root=root)
    if not isinstance(value, str):
        raise DecodeError(f"Expected a string, got {value!r}", _path(*keys, root=root))
    return value
