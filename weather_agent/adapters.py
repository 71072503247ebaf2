# adapters.py
"""
Turn a terminal Result into what a boundary caller receives.
This is the only module that knows about HTTP status codes.
"""
from typing import Any, Callable, Dict, Tuple

from .errors import AppError, Infrastructure, NotFound, UpstreamAPI, Validation
from .models import DailyForecast, WeatherReport, WeatherSummary
from .result import Ok, Result

APOLOGY = "エラーが発生しました。もう一度お試しください。"


def http_status(error: AppError) -> int:
    if isinstance(error, Validation):
        return 400
    if isinstance(error, NotFound):
        return 404
    if isinstance(error, UpstreamAPI):
        return error.status_code or 500
    if isinstance(error, Infrastructure):
        return 500
    raise TypeError(f"unknown error kind: {type(error).__name__}")


def error_body(error: AppError) -> Dict[str, Any]:
    return {"error": error.message, "kind": error.kind}


def to_http_response(
    result: Result[Any, AppError], render: Callable[[Any], Dict[str, Any]]
) -> Tuple[Dict[str, Any], int]:
    if isinstance(result, Ok):
        return render(result.value), 200
    return error_body(result.error), http_status(result.error)


def format_weather_text(weather) -> str:
    if isinstance(weather, DailyForecast):
        return "\n".join([
            f"📍 {weather.location}",
            f"☁️ {weather.condition}",
            f"🌡️ {weather.min_temp}°C - {weather.max_temp}°C",
            f"☔ {weather.precipitation_chance}%",
        ])
    return "\n".join([
        f"📍 {weather.location}",
        f"☁️ {weather.conditions}",
        f"🌡️ {weather.temperature}°C (feels like {weather.feels_like}°C)",
        f"💧 {weather.humidity}%",
        f"💨 {weather.wind_speed} km/h (gusts {weather.wind_gust} km/h)",
    ])


def to_chat_reply(result: Result[Any, AppError]) -> str:
    """Never exposes error details to the chat user."""
    if not isinstance(result, Ok):
        return APOLOGY
    value = result.value
    if isinstance(value, WeatherReport):
        return value.advice or format_weather_text(value.weather)
    if isinstance(value, (WeatherSummary, DailyForecast)):
        return format_weather_text(value)
    return str(value)
