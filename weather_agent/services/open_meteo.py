# services/open_meteo.py
import asyncio
import logging
from typing import Any, Callable, Dict, Optional

import requests

from ..errors import AppError, infrastructure, upstream_api

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_FIELDS = [
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "wind_speed_10m",
    "wind_gusts_10m",
    "weather_code",
]


class OpenMeteoError(Exception):
    """Open-Meteo answered with an error status."""

    def __init__(self, status: int, reason: str) -> None:
        super().__init__(reason)
        self.status = status
        self.reason = reason


def get_json(url: str, params: Dict[str, Any], timeout: float = 10.0) -> Dict[str, Any]:
    """
    GET an Open-Meteo endpoint and return the decoded body.
    Error responses carry {"error": true, "reason": "..."}; they raise OpenMeteoError.
    """
    r = requests.get(url, params=params, timeout=timeout)
    if r.status_code >= 400:
        try:
            reason = (r.json() or {}).get("reason")
        except ValueError:
            reason = None
        raise OpenMeteoError(r.status_code, reason or r.reason or "request failed")
    data = r.json()
    if not isinstance(data, dict):
        raise ValueError(f"unexpected response type {type(data).__name__}")
    return data


def error_mapper(message: str) -> Callable[[Exception], AppError]:
    """Build the map_error for from_awaitable around one Open-Meteo call."""
    def _map(e: Exception) -> AppError:
        if isinstance(e, OpenMeteoError):
            logger.warning("%s: Open-Meteo returned %s (%s)", message, e.status, e.reason)
            return upstream_api(e.reason, e.status)
        logger.warning("%s: %s", message, e.__class__.__name__)
        return infrastructure(message, cause=e)
    return _map


class OpenMeteoClient:
    """
    Key-less Open-Meteo lookups as coroutines.
    requests is blocking, so each call runs in a worker thread; one attempt per call.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        language: str = "en",
        geocoding_url: str = GEOCODING_URL,
        forecast_url: str = FORECAST_URL,
    ):
        self.timeout = timeout
        self.language = language
        self.geocoding_url = geocoding_url
        self.forecast_url = forecast_url

    async def search(self, name: str) -> Dict[str, Any]:
        params = {"name": name, "count": 1, "language": self.language, "format": "json"}
        return await asyncio.to_thread(get_json, self.geocoding_url, params, self.timeout)

    async def current(self, latitude: float, longitude: float) -> Dict[str, Any]:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
        }
        return await asyncio.to_thread(get_json, self.forecast_url, params, self.timeout)

    async def hourly(self, latitude: float, longitude: float, timezone: Optional[str] = "auto") -> Dict[str, Any]:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": "precipitation,weather_code",
            "hourly": "precipitation_probability,temperature_2m",
            "timezone": timezone,
        }
        return await asyncio.to_thread(get_json, self.forecast_url, params, self.timeout)
