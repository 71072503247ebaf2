# tools.py
"""
Function-calling tools for the chat agent.

SDK tool callers expect failures as exceptions, so get_weather_tool is the
one place where an Err is turned back into a raised ToolError.
"""
import json
import logging
from typing import Any, Dict

from .pipeline import WeatherPipeline
from .result import is_err, unwrap, unwrap_err

logger = logging.getLogger(__name__)

TOOLS = [
    {
        "type": "function",
        "function": {
            "name": "get_weather",
            "description": "Get current weather for a location",
            "parameters": {
                "type": "object",
                "properties": {
                    "location": {"type": "string", "description": "City name"},
                },
                "required": ["location"],
            },
        },
    }
]


class ToolError(Exception):
    def __init__(self, message: str, kind: str) -> None:
        super().__init__(message)
        self.kind = kind


def get_weather_tool(location: str, pipeline: WeatherPipeline) -> Dict[str, Any]:
    """Returns {"temperature", "feels_like", "humidity", "wind_speed", "wind_gust", "conditions", "location"}."""
    result = pipeline.run_sync(location)
    if is_err(result):
        error = unwrap_err(result)
        raise ToolError(error.message, error.kind)
    return unwrap(result).to_dict()


def dispatch_tool(name: str, arguments: str, pipeline: WeatherPipeline) -> str:
    """Run one tool call and return its output as a JSON string."""
    try:
        args = json.loads(arguments or "{}")
    except json.JSONDecodeError:
        return json.dumps({"error": "invalid tool arguments"})

    logger.debug("Executing tool: %s with args: %s", name, args)
    if name != "get_weather":
        return json.dumps({"error": f"unknown tool {name}"})
    try:
        out = get_weather_tool(args.get("location", ""), pipeline)
    except ToolError as e:
        logger.info("Tool %s failed: %s", name, e)
        return json.dumps({"error": str(e), "kind": e.kind}, ensure_ascii=False)
    return json.dumps(out, ensure_ascii=False)
