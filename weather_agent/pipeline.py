# pipeline.py
"""
validate -> geocode -> forecast -> format, stopping at the first Err.

The pipeline is a pure function of its input and the collaborators handed to
it; it never reads the environment and keeps no per-request state, so one
instance can serve concurrent requests.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from .config import Settings
from .errors import AppError, infrastructure, validation
from .models import DailyForecast, ForecastSnapshot, WeatherReport, WeatherSummary
from .result import Err, Result, and_then_async, err, from_awaitable, map_ok, ok
from .services.geocode import SearchFn, geocode
from .services.open_meteo import OpenMeteoClient
from .services.summarizer import OpenAISummarizer, summarizer_error
from .services.weather import ForecastFn, describe_weather_code, fetch_daily_forecast, fetch_forecast

logger = logging.getLogger(__name__)

MAX_CITY_LENGTH = 100

Summarizer = Callable[[Dict[str, Any], str, Optional[str]], Awaitable[str]]


def validate_city(raw: Any) -> Result[str, AppError]:
    if not isinstance(raw, str) or not raw.strip():
        return err(validation("City parameter is required", field="city"))
    city = raw.strip()
    if len(city) > MAX_CITY_LENGTH:
        return err(validation(f"City must be at most {MAX_CITY_LENGTH} characters", field="city"))
    return ok(city)


def format_summary(snapshot: ForecastSnapshot, table: Optional[Mapping[int, str]] = None) -> WeatherSummary:
    return WeatherSummary(
        temperature=snapshot.temperature,
        feels_like=snapshot.feels_like,
        humidity=snapshot.humidity,
        wind_speed=snapshot.wind_speed,
        wind_gust=snapshot.wind_gust,
        conditions=describe_weather_code(snapshot.condition_code, table),
        location=snapshot.location_name,
    )


class WeatherPipeline:
    def __init__(
        self,
        search: SearchFn,
        current: ForecastFn,
        hourly: Optional[ForecastFn] = None,
        summarizer: Optional[Summarizer] = None,
        condition_table: Optional[Mapping[int, str]] = None,
    ):
        self.search = search
        self.current = current
        self.hourly = hourly
        self.summarizer = summarizer
        self.condition_table = condition_table

    async def run(self, city: Any) -> Result[WeatherSummary, AppError]:
        """Current weather for a place name."""
        checked = validate_city(city)
        located = await and_then_async(checked, lambda name: geocode(name, self.search))
        snapshot = await and_then_async(located, lambda loc: fetch_forecast(loc, self.current))
        result = map_ok(snapshot, lambda s: format_summary(s, self.condition_table))
        if isinstance(result, Err):
            logger.info("Weather lookup for %r failed: %s", city, result.error.kind)
        return result

    async def outlook(self, city: Any) -> Result[DailyForecast, AppError]:
        """Today's min/max and peak precipitation chance for a place name."""
        checked = validate_city(city)
        if self.hourly is None:
            return err(infrastructure("Daily forecast lookup is not configured"))
        located = await and_then_async(checked, lambda name: geocode(name, self.search))
        return await and_then_async(
            located, lambda loc: fetch_daily_forecast(loc, self.hourly, self.condition_table)
        )

    async def report(self, city: Any, activity: Optional[str] = None) -> Result[WeatherReport, AppError]:
        summary = await self.run(city)
        return await and_then_async(summary, lambda s: self._advise(s, activity))

    async def plan(self, city: Any) -> Result[WeatherReport, AppError]:
        forecast = await self.outlook(city)
        return await and_then_async(forecast, lambda f: self._advise(f, None))

    async def _advise(self, weather, activity: Optional[str]) -> Result[WeatherReport, AppError]:
        if self.summarizer is None:
            return ok(WeatherReport(weather=weather))
        text = await from_awaitable(
            self.summarizer(weather.to_dict(), weather.location, activity), summarizer_error
        )
        return map_ok(text, lambda advice: WeatherReport(weather=weather, advice=advice))

    def run_sync(self, city: Any) -> Result[WeatherSummary, AppError]:
        return asyncio.run(self.run(city))


def build_pipeline(settings: Settings) -> WeatherPipeline:
    client = OpenMeteoClient(timeout=settings.http_timeout, language=settings.geocoding_language)
    summarizer = None
    if settings.openai_api_key:
        summarizer = OpenAISummarizer(api_key=settings.openai_api_key, model=settings.model)
    else:
        logger.warning("OPENAI_API_KEY not set; responses will not include recommendations")
    return WeatherPipeline(
        search=client.search,
        current=client.current,
        hourly=client.hourly,
        summarizer=summarizer,
    )
