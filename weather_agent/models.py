from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union

# Units are Open-Meteo defaults, passed through as received:
# temperatures in °C, humidity and precipitation chance in %, wind in km/h.


@dataclass(frozen=True)
class GeoLocation:
    latitude: float
    longitude: float
    name: str


@dataclass(frozen=True)
class ForecastSnapshot:
    temperature: float
    feels_like: float
    humidity: float
    wind_speed: float
    wind_gust: float
    condition_code: int
    location_name: str


@dataclass(frozen=True)
class WeatherSummary:
    temperature: float
    feels_like: float
    humidity: float
    wind_speed: float
    wind_gust: float
    conditions: str
    location: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DailyForecast:
    date: str
    max_temp: float
    min_temp: float
    precipitation_chance: float
    condition: str
    location: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WeatherReport:
    """Structured weather plus the summarizer's text (None without a summarizer)."""
    weather: Union[WeatherSummary, DailyForecast]
    advice: Optional[str] = None

    @property
    def location(self) -> str:
        return self.weather.location

    def to_dict(self) -> Dict[str, Any]:
        return {"weather": self.weather.to_dict(), "response": self.advice}
