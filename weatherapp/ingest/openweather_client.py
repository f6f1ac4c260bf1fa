"""OpenWeather HTTP client: one blocking GET per call, no retries."""

import logging

import httpx

from weatherapp.ingest.urls import redact_url
from weatherapp.models.errors import HttpStatusError, NetworkError

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Thin wrapper around an httpx.Client.

    Timeouts are the httpx defaults. A client passed in by the caller is
    left open on close().
    """

    def __init__(self, http: httpx.Client | None = None):
        self._owns_http = http is None
        self.http = http if http is not None else httpx.Client()

    def fetch_text(self, url: str) -> str:
        """GET url and return the body text.

        Raises NetworkError on transport failure and HttpStatusError on a
        non-2xx status or an empty body.
        """
        resp = self._get(url)
        body = resp.text
        if not body.strip():
            raise HttpStatusError(
                f"Empty body from {redact_url(url)}", resp.status_code
            )
        return body

    def fetch_bytes(self, url: str) -> bytes:
        """GET url and return the raw body; same failures as fetch_text."""
        resp = self._get(url)
        if not resp.content:
            raise HttpStatusError(
                f"Empty body from {redact_url(url)}", resp.status_code
            )
        return resp.content

    def _get(self, url: str) -> httpx.Response:
        safe_url = redact_url(url)
        logger.debug("GET %s", safe_url)
        try:
            resp = self.http.get(url)
        except httpx.RequestError as e:
            raise NetworkError(f"Request failed: {safe_url}: {e}") from e

        if not resp.is_success:
            logger.warning("OpenWeather %s returned %d", safe_url, resp.status_code)
            raise HttpStatusError(
                f"HTTP {resp.status_code} from {safe_url}", resp.status_code
            )
        return resp

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
