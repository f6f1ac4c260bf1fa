"""Weather display records built from OpenWeather responses."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True)
class CurrentWeather:
    temperature: float  # degrees C
    humidity: int  # percent
    wind_speed: float  # m/s
    condition: str
    icon: str


@dataclass(frozen=True)
class ForecastDay:
    date: str  # YYYY-MM-DD
    day: str  # Mon, Tue, ...
    temp_min: float
    temp_max: float
    condition: str
    icon: str


@dataclass(frozen=True)
class ForecastSeries:
    days: tuple[ForecastDay, ...] = ()

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self):
        return iter(self.days)


@dataclass
class WeatherReport:
    """Outcome of one request: whatever rendered, plus user-facing errors."""

    city: str
    current: CurrentWeather | None = None
    forecast: ForecastSeries | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return self.current is not None and self.forecast is not None and not self.errors
