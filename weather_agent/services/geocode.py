# services/geocode.py
from typing import Any, Awaitable, Callable, Dict, List

from ..errors import AppError, not_found
from ..models import GeoLocation
from ..result import Result, and_then, err, from_awaitable, ok
from .open_meteo import error_mapper

SearchFn = Callable[[str], Awaitable[Dict[str, Any]]]


async def _candidates(place: str, search: SearchFn) -> List[GeoLocation]:
    data = await search(place)
    results = data.get("results") or []
    # first match wins, the rest are never parsed
    return [
        GeoLocation(
            latitude=float(top["latitude"]),
            longitude=float(top["longitude"]),
            name=top.get("name") or place,
        )
        for top in results[:1]
    ]


async def geocode(place: str, search: SearchFn) -> Result[GeoLocation, AppError]:
    """
    Resolve a place name to coordinates.
    Zero results is NotFound; network or parse failure is Infrastructure.
    """
    found = await from_awaitable(
        _candidates(place, search), error_mapper("Failed to fetch geocoding data")
    )
    return and_then(
        found,
        lambda candidates: ok(candidates[0]) if candidates else err(not_found("location", place)),
    )
