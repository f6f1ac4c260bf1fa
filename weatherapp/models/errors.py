"""Error taxonomy for the weather request pipeline."""


class WeatherAppError(Exception):
    """Base class for every failure the pipeline converts to a message."""


class ConfigError(WeatherAppError):
    """Raised when the API key is not configured."""


class InputError(WeatherAppError):
    """Raised when the city query is empty after trimming."""


class FetchError(WeatherAppError):
    """Raised when an HTTP request does not yield a usable body."""


class NetworkError(FetchError):
    """DNS, connect, timeout or other transport failure."""


class HttpStatusError(FetchError):
    """Non-2xx status, or a 2xx status with an empty body."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WeatherAppError):
    """Raised when a response is not valid JSON or lacks a required field."""

    def __init__(self, message: str, path: str = "$"):
        super().__init__(f"{message} (at {path})")
        self.path = path


class NotFoundError(WeatherAppError):
    """Raised when geocoding returns no match for the city."""
