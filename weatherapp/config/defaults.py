"""Default OpenWeather endpoints and environment variable names."""

API_KEY_ENV = "OPENWEATHER_API_KEY"

CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
GEOCODE_URL = "https://api.openweathermap.org/geo/1.0/direct"
FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"
ICON_BASE_URL = "https://openweathermap.org/img/wn"
