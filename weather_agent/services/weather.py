# services/weather.py
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from ..errors import AppError
from ..models import DailyForecast, ForecastSnapshot, GeoLocation
from ..result import Result, from_awaitable
from .open_meteo import error_mapper

ForecastFn = Callable[[float, float], Awaitable[Dict[str, Any]]]

# WMO weather interpretation codes as used by Open-Meteo
WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def describe_weather_code(code: int, table: Optional[Mapping[int, str]] = None) -> str:
    """Unmapped codes are a labeling gap, not an error."""
    return (WEATHER_CODES if table is None else table).get(code, "Unknown")


async def _load_snapshot(location: GeoLocation, current: ForecastFn) -> ForecastSnapshot:
    data = await current(location.latitude, location.longitude)
    cur = data["current"]
    return ForecastSnapshot(
        temperature=cur["temperature_2m"],
        feels_like=cur["apparent_temperature"],
        humidity=cur["relative_humidity_2m"],
        wind_speed=cur["wind_speed_10m"],
        wind_gust=cur["wind_gusts_10m"],
        condition_code=int(cur["weather_code"]),
        location_name=location.name,
    )


async def fetch_forecast(location: GeoLocation, current: ForecastFn) -> Result[ForecastSnapshot, AppError]:
    """
    Current conditions for resolved coordinates.
    Numbers are passed through in the API's units, no conversion or rounding.
    """
    return await from_awaitable(
        _load_snapshot(location, current), error_mapper("Failed to fetch weather data")
    )


async def _load_daily(
    location: GeoLocation, hourly: ForecastFn, table: Optional[Mapping[int, str]]
) -> DailyForecast:
    data = await hourly(location.latitude, location.longitude)
    cur = data["current"]
    series = data["hourly"]
    temps = [t for t in series["temperature_2m"] if t is not None]
    if not temps:
        raise ValueError("hourly temperature series is empty")
    chances = [p for p in series.get("precipitation_probability") or [] if p is not None]
    return DailyForecast(
        date=cur.get("time", ""),
        max_temp=max(temps),
        min_temp=min(temps),
        precipitation_chance=max(chances, default=0),
        condition=describe_weather_code(int(cur["weather_code"]), table),
        location=location.name,
    )


async def fetch_daily_forecast(
    location: GeoLocation, hourly: ForecastFn, table: Optional[Mapping[int, str]] = None
) -> Result[DailyForecast, AppError]:
    """Min/max temperature and peak precipitation chance from the hourly series."""
    return await from_awaitable(
        _load_daily(location, hourly, table), error_mapper("Failed to fetch weather data")
    )
