"""Pytest fixtures: canned Open-Meteo payloads and stubbed collaborators."""

import copy
from typing import Any, Dict
from unittest.mock import AsyncMock

import pytest

from weather_agent.config import Settings
from weather_agent.pipeline import WeatherPipeline

TOKYO_GEOCODE: Dict[str, Any] = {
    "results": [
        {"latitude": 35.68, "longitude": 139.69, "name": "Tokyo", "country": "Japan"},
        {"latitude": 40.1, "longitude": -80.2, "name": "Tokyo Township", "country": "United States"},
    ]
}

TOKYO_CURRENT: Dict[str, Any] = {
    "current": {
        "time": "2025-06-01T12:00",
        "temperature_2m": 22,
        "apparent_temperature": 21.4,
        "relative_humidity_2m": 60,
        "wind_speed_10m": 10.8,
        "wind_gusts_10m": 25.2,
        "weather_code": 1,
    }
}

TOKYO_HOURLY: Dict[str, Any] = {
    "current": {"time": "2025-06-01T12:00", "precipitation": 0.0, "weather_code": 61},
    "hourly": {
        "temperature_2m": [18.2, 21.0, 24.5, 19.9],
        "precipitation_probability": [10, 65, 40, 5],
    },
}


@pytest.fixture
def search() -> AsyncMock:
    return AsyncMock(return_value=copy.deepcopy(TOKYO_GEOCODE))


@pytest.fixture
def current() -> AsyncMock:
    return AsyncMock(return_value=copy.deepcopy(TOKYO_CURRENT))


@pytest.fixture
def hourly() -> AsyncMock:
    return AsyncMock(return_value=copy.deepcopy(TOKYO_HOURLY))


@pytest.fixture
def summarizer() -> AsyncMock:
    return AsyncMock(return_value="Go for a walk in Yoyogi Park.")


@pytest.fixture
def pipeline(search: AsyncMock, current: AsyncMock, hourly: AsyncMock) -> WeatherPipeline:
    return WeatherPipeline(search=search, current=current, hourly=hourly)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key=None,
        line_channel_secret="line-secret",
        line_channel_access_token="line-token",
    )
