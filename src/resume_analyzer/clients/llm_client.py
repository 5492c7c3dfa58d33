"""Claude API wrapper for schema-constrained JSON generation."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

import anthropic

from resume_analyzer.errors import TransportError

logger = logging.getLogger(__name__)

TOOL_NAME = "record_resume_analysis"

SYSTEM_PROMPT = (
    "You return resume analyses only by calling the "
    f"{TOOL_NAME} tool with arguments matching its input schema."
)


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Async Claude API client.

    The output schema is enforced through a forced tool call; the tool input
    is serialized back to JSON text. SDK retries are disabled so each request
    is exactly one API call.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        model: str = "claude-haiku-4-5-20251001",
        temperature: float = 0.0,
        max_tokens: int = 8192,
    ):
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def _call_api(self, prompt: str, schema: dict) -> anthropic.types.Message:
        return await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt}],
            tools=[{
                "name": TOOL_NAME,
                "description": "Record the structured resume analysis.",
                "input_schema": schema,
            }],
            tool_choice={"type": "tool", "name": TOOL_NAME},
        )

    async def generate(self, prompt: str, schema: dict) -> LLMResponse:
        """Send a prompt constrained to ``schema`` and return JSON text with usage."""
        logger.debug("LLM call: model=%s", self.model)
        try:
            message = await self._call_api(prompt, schema)
        except anthropic.APIError as exc:
            logger.error("LLM call failed: %s", type(exc).__name__)
            raise TransportError(f"Claude API error: {exc}") from exc
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((self.model, input_tokens, output_tokens))
        return LLMResponse(
            text=_message_text(message),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    async def generate_structured(self, prompt: str, schema: dict) -> str:
        """Generation capability for ResumeAnalyzer: text only."""
        response = await self.generate(prompt, schema)
        return response.text

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary


def _message_text(message: anthropic.types.Message) -> str:
    """JSON text of the forced tool call, or the plain text blocks if absent."""
    for block in message.content:
        if block.type == "tool_use" and block.name == TOOL_NAME:
            return json.dumps(block.input, ensure_ascii=False)
    return "".join(block.text for block in message.content if block.type == "text")
