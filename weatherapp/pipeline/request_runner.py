"""Run pipeline requests off the caller's thread, one at a time."""

import logging
import threading
from collections.abc import Callable

from weatherapp.pipeline.weather_pipeline import WeatherPipeline

logger = logging.getLogger(__name__)


class RequestRunner:
    """Single-flight worker for UI triggers.

    submit() refuses a new request while one is in flight. on_busy is
    called with True when a request starts and False when it ends; the
    False call comes from the worker thread, so UI callers must marshal it.
    """

    def __init__(
        self,
        pipeline: WeatherPipeline,
        on_busy: Callable[[bool], None] | None = None,
    ):
        self.pipeline = pipeline
        self.on_busy = on_busy
        self._lock = threading.Lock()
        self._worker: threading.Thread | None = None

    @property
    def busy(self) -> bool:
        with self._lock:
            return self._worker is not None

    def submit(self, city: str) -> bool:
        """Start a request for city. Returns False if one is already running."""
        with self._lock:
            if self._worker is not None:
                logger.info("Request for %r ignored: another is in flight", city)
                return False
            worker = threading.Thread(
                target=self._run, args=(city,), name="weather-request", daemon=True
            )
            self._worker = worker

        self._notify(True)
        worker.start()
        return True

    def wait(self, timeout: float | None = None) -> None:
        with self._lock:
            worker = self._worker
        if worker is not None:
            worker.join(timeout)

    def _run(self, city: str) -> None:
        try:
            self.pipeline.run(city)
        except Exception:
            logger.exception("Request for %r crashed", city)
        finally:
            with self._lock:
                self._worker = None
            self._notify(False)

    def _notify(self, busy: bool) -> None:
        if self.on_busy is None:
            return
        try:
            self.on_busy(busy)
        except Exception:
            logger.exception("on_busy callback failed")
