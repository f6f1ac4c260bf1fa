"""CLI entry point for the weather app."""

import argparse
import json
import logging

from weatherapp.config.loader import load_config, masked_config_dict
from weatherapp.ingest.openweather_client import OpenWeatherClient
from weatherapp.pipeline.weather_pipeline import WeatherPipeline
from weatherapp.reporting.formatters import format_report_json
from weatherapp.reporting.sink import ConsoleSink, NullSink


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="Current weather and 5-day forecast from OpenWeather",
    )
    parser.add_argument(
        "--config", default=None, help="Config YAML path (defaults built in)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log at DEBUG level"
    )

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch weather for a city")
    fetch_p.add_argument("city", help="City name, e.g. 'New York'")
    fetch_p.add_argument(
        "--json", action="store_true", help="Print one JSON document"
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    # gui
    sub.add_parser("gui", help="Open the desktop window")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, which carry the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error: could not load config: {e}")
        return 1

    if args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "gui":
        return _cmd_gui(config)
    else:
        parser.print_help()
        return 1


def _cmd_fetch(config, args) -> int:
    query = args.city.strip()
    # a blank query is rejected by the pipeline; no heading for it
    if not args.json and query:
        print(f"=== Weather for {query} ===")
    sink = NullSink() if args.json else ConsoleSink()
    with OpenWeatherClient() as client:
        report = WeatherPipeline(config, client, sink).run(args.city)
    if args.json:
        print(format_report_json(report))
    return 0 if report.complete else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(json.dumps(masked_config_dict(config), indent=2))
        return 0
    print("Use: config show")
    return 1


def _cmd_gui(config) -> int:
    # tkinter is optional on headless installs
    from weatherapp.ui.tk_app import run_app

    run_app(config)
    return 0
