"""Tests for chat answers and LINE event handling."""

from unittest.mock import AsyncMock

import pytest
import requests

from weather_agent.adapters import APOLOGY
from weather_agent.chat import answer, handle_event, handle_events
from weather_agent.pipeline import WeatherPipeline
from weather_agent.result import is_err, unwrap


def text_event(text: str, token: str = "reply-token") -> dict:
    return {"type": "message", "replyToken": token, "message": {"type": "text", "text": text}}


class TestAnswer:
    @pytest.mark.asyncio
    async def test_weather_reply(self, pipeline: WeatherPipeline, search: AsyncMock) -> None:
        reply = await answer("東京の天気", pipeline)
        search.assert_awaited_once_with("東京")
        assert "Mainly clear" in reply

    @pytest.mark.asyncio
    async def test_no_keyword_is_apology_without_lookup(self, pipeline: WeatherPipeline, search: AsyncMock) -> None:
        assert await answer("こんにちは", pipeline) == APOLOGY
        search.assert_not_called()

    @pytest.mark.asyncio
    async def test_infrastructure_failure_is_apology(self, pipeline: WeatherPipeline, current: AsyncMock) -> None:
        current.side_effect = ConnectionError("internal detail")
        reply = await answer("東京の天気", pipeline)
        assert reply == APOLOGY
        assert "internal detail" not in reply


class TestHandleEvents:
    @pytest.mark.asyncio
    async def test_replies_to_text_messages(self, pipeline: WeatherPipeline) -> None:
        line = AsyncMock()
        line.reply.return_value = 200
        result = await handle_event(text_event("東京の天気", "tok-1"), pipeline, line)
        assert unwrap(result) == 200
        token, text = line.reply.await_args.args
        assert token == "tok-1"
        assert "Tokyo" in text

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "event",
        [
            {"type": "follow", "replyToken": "t"},
            {"type": "message", "replyToken": "t", "message": {"type": "sticker"}},
            {"type": "message", "message": {"type": "text", "text": "東京の天気"}},
            {"type": "message", "replyToken": "t", "message": "東京の天気"},
            {"type": "message", "replyToken": "t", "message": None},
            "not-an-event",
        ],
    )
    async def test_ignored_events(self, pipeline: WeatherPipeline, event) -> None:
        line = AsyncMock()
        assert await handle_event(event, pipeline, line) is None
        line.reply.assert_not_called()

    @pytest.mark.asyncio
    async def test_failed_reply_is_an_err_not_a_raise(self, pipeline: WeatherPipeline) -> None:
        line = AsyncMock()
        line.reply.side_effect = requests.HTTPError("400 Invalid reply token")
        result = await handle_event(text_event("東京の天気"), pipeline, line)
        assert is_err(result)

    @pytest.mark.asyncio
    async def test_all_events_answered(self, pipeline: WeatherPipeline) -> None:
        line = AsyncMock()
        line.reply.return_value = 200
        results = await handle_events(
            [text_event("東京の天気", "a"), text_event("hello", "b")], pipeline, line
        )
        assert len(results) == 2
        replies = {call.args[0]: call.args[1] for call in line.reply.await_args_list}
        assert "Tokyo" in replies["a"]
        assert replies["b"] == APOLOGY

    @pytest.mark.asyncio
    async def test_no_line_client(self, pipeline: WeatherPipeline, search: AsyncMock) -> None:
        assert await handle_events([text_event("東京の天気")], pipeline, None) == []
        search.assert_not_called()
