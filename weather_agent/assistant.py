import logging
from typing import Any, Dict, List

from openai import OpenAI

from .pipeline import WeatherPipeline
from .services.summarizer import INSTRUCTIONS
from .tools import TOOLS, dispatch_tool

logger = logging.getLogger(__name__)

AGENT_INSTRUCTIONS = INSTRUCTIONS + "\n\nAlways call get_weather for the location before making recommendations."


class WeatherAgent:
    """Chat session that lets the model call get_weather until it answers in text."""

    def __init__(self, client: OpenAI, pipeline: WeatherPipeline, model: str = "gpt-4o-mini", max_rounds: int = 5):
        self.client = client
        self.pipeline = pipeline
        self.model = model
        self.max_rounds = max_rounds
        self.messages: List[Dict[str, Any]] = [{"role": "system", "content": AGENT_INSTRUCTIONS}]

    def _dispatch_tools(self, message) -> None:
        self.messages.append({
            "role": "assistant",
            "content": message.content,
            "tool_calls": [
                {
                    "id": call.id,
                    "type": "function",
                    "function": {"name": call.function.name, "arguments": call.function.arguments},
                }
                for call in message.tool_calls
            ],
        })
        for call in message.tool_calls:
            out = dispatch_tool(call.function.name, call.function.arguments, self.pipeline)
            logger.debug("Tool %s returned: %s...", call.function.name, out[:100])
            self.messages.append({"role": "tool", "tool_call_id": call.id, "content": out})

    def ask(self, question: str) -> str:
        self.messages.append({"role": "user", "content": question})

        for round_no in range(1, self.max_rounds + 1):
            response = self.client.chat.completions.create(
                model=self.model,
                messages=self.messages,
                tools=TOOLS,
            )
            message = response.choices[0].message
            if message.tool_calls:
                logger.debug("Round %d: %d tool call(s)", round_no, len(message.tool_calls))
                self._dispatch_tools(message)
                continue

            text = message.content or ""
            self.messages.append({"role": "assistant", "content": text})
            return text or "(no text)"

        logger.warning("No text reply after %d tool rounds", self.max_rounds)
        return f"(no reply after {self.max_rounds} tool rounds)"
