"""Tkinter window for the weather pipeline."""

import base64
import logging
import tkinter as tk
from collections.abc import Callable
from tkinter import ttk

from weatherapp.config.schema import AppConfig
from weatherapp.ingest.openweather_client import OpenWeatherClient
from weatherapp.models.weather import CurrentWeather, ForecastSeries
from weatherapp.pipeline.request_runner import RequestRunner
from weatherapp.pipeline.weather_pipeline import WeatherPipeline
from weatherapp.reporting.formatters import (
    humidity_label,
    temperature_label,
    tile_temperature_label,
    wind_speed_label,
)
from weatherapp.ui.tk_sink import TkRenderSink

logger = logging.getLogger(__name__)


class WeatherWindow:
    """Widgets only; every method here must run on the Tk thread."""

    def __init__(self, root: tk.Tk, on_submit: Callable[[str], bool] | None = None) -> None:
        self.root = root
        self.root.title("Weather App")
        self.root.geometry("760x520")
        self.on_submit = on_submit

        self.city_var = tk.StringVar()
        self.status_var = tk.StringVar(value="Enter a city and press Get Weather.")
        self.current_vars: dict[str, tk.StringVar] = {
            "temperature": tk.StringVar(value="--"),
            "humidity": tk.StringVar(value="--"),
            "wind": tk.StringVar(value="--"),
            "condition": tk.StringVar(value="--"),
        }
        # PhotoImage objects must stay referenced or Tk drops them
        self._images: list[tk.PhotoImage] = []
        self._current_image: tk.PhotoImage | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(2, weight=1)

        search_frame = ttk.Frame(self.root)
        search_frame.grid(row=0, column=0, sticky="ew", padx=12, pady=8)
        search_frame.columnconfigure(1, weight=1)

        ttk.Label(search_frame, text="City:").grid(row=0, column=0, padx=6)
        entry = ttk.Entry(search_frame, textvariable=self.city_var)
        entry.grid(row=0, column=1, padx=6, sticky="ew")
        entry.bind("<Return>", lambda _e: self._on_search())
        self.search_button = ttk.Button(
            search_frame, text="Get Weather", command=self._on_search
        )
        self.search_button.grid(row=0, column=2, padx=6)
        ttk.Label(search_frame, textvariable=self.status_var).grid(
            row=1, column=0, columnspan=3, sticky="w", padx=6, pady=(6, 0)
        )

        current_frame = ttk.LabelFrame(self.root, text="Current weather")
        current_frame.grid(row=1, column=0, sticky="ew", padx=12, pady=8)
        self.icon_label = ttk.Label(current_frame)
        self.icon_label.grid(row=0, column=0, rowspan=2, padx=8)
        for col, (key, title) in enumerate(
            [("temperature", "Temperature"), ("humidity", "Humidity"),
             ("wind", "Wind"), ("condition", "Condition")],
            start=1,
        ):
            current_frame.columnconfigure(col, weight=1)
            ttk.Label(current_frame, text=title).grid(row=0, column=col, padx=4, pady=4)
            ttk.Label(current_frame, textvariable=self.current_vars[key]).grid(
                row=1, column=col, padx=4, pady=4
            )

        self.forecast_frame = ttk.LabelFrame(self.root, text="5-day forecast")
        self.forecast_frame.grid(row=2, column=0, sticky="nsew", padx=12, pady=8)

    def _on_search(self) -> None:
        if self.on_submit is None:
            return
        if not self.on_submit(self.city_var.get()):
            self.status_var.set("A request is already running.")

    def set_busy(self, busy: bool) -> None:
        self.search_button.state(["disabled"] if busy else ["!disabled"])
        if busy:
            self.status_var.set("Fetching weather…")

    def set_status(self, message: str) -> None:
        self.status_var.set(message)

    def set_current(self, current: CurrentWeather, icon: bytes | None) -> None:
        self.current_vars["temperature"].set(temperature_label(current.temperature))
        self.current_vars["humidity"].set(humidity_label(current.humidity))
        self.current_vars["wind"].set(wind_speed_label(current.wind_speed))
        self.current_vars["condition"].set(current.condition)
        self._current_image = self._photo(icon)
        self.icon_label.configure(image=self._current_image or "")
        self.status_var.set("")

    def set_forecast(self, forecast: ForecastSeries, icons: list[bytes | None]) -> None:
        for child in self.forecast_frame.winfo_children():
            child.destroy()
        self._images.clear()

        for col, (day, icon) in enumerate(zip(forecast, icons)):
            tile = ttk.Frame(self.forecast_frame, padding=6)
            tile.grid(row=0, column=col, padx=4, sticky="n")
            ttk.Label(tile, text=day.day, font=("TkDefaultFont", 11, "bold")).pack()
            image = self._photo(icon)
            if image is not None:
                self._images.append(image)
                ttk.Label(tile, image=image).pack()
            ttk.Label(tile, text=tile_temperature_label(day)).pack()
            ttk.Label(tile, text=day.condition, wraplength=120).pack()

    def _photo(self, data: bytes | None) -> tk.PhotoImage | None:
        if not data:
            return None
        try:
            return tk.PhotoImage(data=base64.b64encode(data).decode("ascii"))
        except tk.TclError as e:
            logger.warning("Could not decode icon image: %s", e)
            return None


def run_app(config: AppConfig) -> None:
    """Build the window, wire the pipeline and block in the Tk main loop."""
    root = tk.Tk()
    window = WeatherWindow(root)
    with OpenWeatherClient() as client:
        sink = TkRenderSink(root, window, config, icon_loader=client.fetch_bytes)
        pipeline = WeatherPipeline(config, client, sink)
        runner = RequestRunner(
            pipeline, on_busy=lambda busy: root.after(0, window.set_busy, busy)
        )
        window.on_submit = runner.submit
        root.mainloop()
