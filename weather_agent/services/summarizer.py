# services/summarizer.py
import asyncio
import json
import logging
from typing import Any, Dict, Optional

import openai
from openai import OpenAI

from ..errors import AppError, infrastructure, upstream_api

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
You are a local activities and travel expert who excels at weather-based planning.
Analyze the weather data you are given and recommend practical activities.

Structure your answer as:

📅 Weather in [City]
🌡️ WEATHER SUMMARY
• Conditions, temperature (°C), feels like, humidity (%), wind (km/h, gusts)
🌅 MORNING ACTIVITIES
• [Activity] - [specific place or route], best timing, weather note
🌞 AFTERNOON ACTIVITIES
• [Activity] - [specific place or route], best timing, weather note
🏠 INDOOR ALTERNATIVES
• [Activity] - [specific venue], ideal for which weather
⚠️ SPECIAL CONSIDERATIONS
• Weather warnings, humidity, wind

Guidelines:
- 2-3 time-specific outdoor activities, 1-2 indoor backups
- For precipitation chance above 50% or humidity above 70%, lead with indoor activities
- For strong wind, avoid activities near water or at heights
- Activities must be specific to the location
- Keep descriptions concise
""".strip()


def build_prompt(weather: Dict[str, Any], location: str, activity: Optional[str] = None) -> str:
    if activity:
        ask = f"Is the weather in {location} suitable for {activity}? Suggest how and when to do it."
    else:
        ask = f"Based on the following weather for {location}, suggest appropriate activities."
    return f"{ask}\n{json.dumps(weather, indent=2, ensure_ascii=False)}"


class OpenAISummarizer:
    """Turns structured weather into free-form recommendation text."""

    def __init__(self, api_key: Optional[str] = None, model: str = "gpt-4o-mini", client: Optional[OpenAI] = None):
        self.client = client or OpenAI(api_key=api_key)
        self.model = model

    def _complete(self, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": INSTRUCTIONS},
                {"role": "user", "content": prompt},
            ],
        )
        text = (response.choices[0].message.content or "").strip()
        if not text:
            raise ValueError("summarizer returned no text")
        return text

    async def __call__(self, weather: Dict[str, Any], location: str, activity: Optional[str] = None) -> str:
        return await asyncio.to_thread(self._complete, build_prompt(weather, location, activity))


def summarizer_error(e: Exception) -> AppError:
    if isinstance(e, openai.APIConnectionError):
        logger.warning("Summarizer unreachable: %s", e.__class__.__name__)
        return infrastructure("Summarizer unreachable", cause=e)
    if isinstance(e, openai.APIError):
        logger.warning("Summarizer request failed: %s", e.__class__.__name__)
        return upstream_api("Summarizer request failed")
    logger.warning("Summarizer failed: %s", e)
    return infrastructure("Failed to generate recommendations", cause=e)
