# chat.py
import asyncio
import logging
from typing import Any, Dict, List, Optional

from .adapters import to_chat_reply
from .errors import AppError, infrastructure
from .intent import extract_place
from .pipeline import WeatherPipeline
from .result import Result, and_then_async, from_awaitable, is_err
from .services.line import LineClient

logger = logging.getLogger(__name__)


async def answer(text: str, pipeline: WeatherPipeline) -> str:
    """Free text in, reply text out; failures become the fixed apology."""
    place = extract_place(text)
    result = await and_then_async(place, pipeline.report)
    return to_chat_reply(result)


async def handle_event(
    event: Dict[str, Any], pipeline: WeatherPipeline, line: LineClient
) -> Optional[Result[int, AppError]]:
    """Answer one LINE webhook event. Only text messages get a reply."""
    if not isinstance(event, dict) or event.get("type") != "message":
        return None
    message = event.get("message")
    reply_token = event.get("replyToken")
    if not isinstance(message, dict) or message.get("type") != "text" or not reply_token:
        return None

    reply = await answer(message.get("text", ""), pipeline)
    sent = await from_awaitable(
        line.reply(reply_token, reply),
        lambda e: infrastructure("Failed to send LINE reply", cause=e),
    )
    if is_err(sent):
        logger.error("Failed to send LINE reply: %s", sent.error.cause)
    return sent


async def handle_events(
    events: List[Dict[str, Any]], pipeline: WeatherPipeline, line: Optional[LineClient]
) -> List[Optional[Result[int, AppError]]]:
    if line is None:
        logger.warning("LINE_CHANNEL_ACCESS_TOKEN not set; dropping %d event(s)", len(events))
        return []
    # each event gets its own pipeline run; nothing is shared between them
    return list(await asyncio.gather(*(handle_event(e, pipeline, line) for e in events)))
