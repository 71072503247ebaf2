# intent.py
"""Pull a place name out of a free-text chat message."""
import re

from .errors import AppError, validation
from .result import Result, err, ok

WEATHER_KEYWORDS = ("天気", "気温", "予報", "weather", "forecast", "temperature")

# first match wins
PATTERNS = [
    # the place is the segment right before the final の天気, so 今日の東京の天気 -> 東京
    re.compile(r"(?:^|の)(?P<place>[^の]+?)\s*の\s*(?:天気|気温|予報)"),
    re.compile(r"\b(?:weather|forecast|temperature)\b.*?\b(?:in|for|at)\s+(?P<place>.+)$", re.IGNORECASE),
    re.compile(
        r"^(?P<place>.+?)\s+(?:weather|forecast|temperature)(?:\s+(?:today|now|tomorrow))?\s*[?？!！.]*$",
        re.IGNORECASE,
    ),
]

_TRAILING = "?？!！。.、, 　"

_LEADING_TIME = re.compile(r"^(?:今日|明日)\s*")
_TRAILING_TIME = re.compile(
    r"(?:\s+(?:today|tonight|now|tomorrow|今)|\s*(?:今日|明日))$", re.IGNORECASE
)


def _clean(place: str) -> str:
    place = place.strip().strip(_TRAILING)
    if place.endswith("は"):
        place = place[:-1]
    place = _LEADING_TIME.sub("", place)
    while True:
        trimmed = _TRAILING_TIME.sub("", place).strip().strip(_TRAILING)
        if trimmed == place:
            return place
        place = trimmed


def extract_place(text: str) -> Result[str, AppError]:
    """
    "東京の天気" -> Ok("東京"), "weather in Paris?" -> Ok("Paris").
    Messages without a weather keyword or a recognisable place are Validation errors.
    """
    if not isinstance(text, str) or not text.strip():
        return err(validation("Message is empty", field="message"))
    message = text.strip()
    lowered = message.lower()
    if not any(k in lowered for k in WEATHER_KEYWORDS):
        return err(validation("Message does not ask about the weather", field="message"))
    for pattern in PATTERNS:
        m = pattern.search(message)
        if m:
            place = _clean(m.group("place"))
            if place:
                return ok(place)
    return err(validation("Could not find a place name in the message", field="message"))
