"""Tests for chat intent parsing."""

import pytest

from weather_agent.errors import Validation
from weather_agent.intent import extract_place
from weather_agent.result import unwrap, unwrap_err


class TestExtractPlace:
    @pytest.mark.parametrize(
        "text, place",
        [
            ("東京の天気", "東京"),
            ("大阪の天気は？", "大阪"),
            ("札幌の気温", "札幌"),
            ("  福岡 の 予報  ", "福岡"),
            ("weather in Paris", "Paris"),
            ("What's the weather like in New York?", "New York"),
            ("forecast for London!", "London"),
            ("Tokyo weather", "Tokyo"),
            ("Berlin weather today?", "Berlin"),
            ("weather in Tokyo today", "Tokyo"),
            ("what's the weather in Paris tomorrow?", "Paris"),
            ("今日の東京の天気", "東京"),
            ("明日の大阪の天気は？", "大阪"),
            ("東京 今日の天気", "東京"),
        ],
    )
    def test_extracts_place(self, text: str, place: str) -> None:
        assert unwrap(extract_place(text)) == place

    @pytest.mark.parametrize("text", ["こんにちは", "hello there", "東京に行きたい"])
    def test_no_weather_keyword(self, text: str) -> None:
        error = unwrap_err(extract_place(text))
        assert isinstance(error, Validation)
        assert error.field == "message"

    @pytest.mark.parametrize("text", ["天気", "weather?", "の天気"])
    def test_keyword_without_place(self, text: str) -> None:
        assert isinstance(unwrap_err(extract_place(text)), Validation)

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_message(self, text) -> None:
        assert isinstance(unwrap_err(extract_place(text)), Validation)
