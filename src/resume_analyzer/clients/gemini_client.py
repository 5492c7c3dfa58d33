"""Gemini API wrapper for schema-constrained JSON generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from google import genai
from google.genai import errors, types

from resume_analyzer.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass
class GeminiResponse:
    """Response text from Gemini including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class GeminiClient:
    """Async Gemini client. Makes exactly one API call per request."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        model: str = "gemini-3-flash-preview",
        temperature: float = 0.0,
        max_tokens: int = 8192,
    ):
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            # HttpOptions.timeout is in milliseconds
            kwargs["http_options"] = types.HttpOptions(timeout=int(timeout * 1000))
        self.client = genai.Client(**kwargs)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def generate(self, prompt: str, schema: dict) -> GeminiResponse:
        """Send a prompt constrained to ``schema`` and return the raw JSON text."""
        logger.debug("Gemini call: model=%s", self.model)
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_json_schema=schema,
            temperature=self.temperature,
            max_output_tokens=self.max_tokens,
        )
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except errors.APIError as exc:
            logger.error("Gemini call failed: %s %s", exc.code, exc.status)
            raise TransportError(f"Gemini API error {exc.code}: {exc.message}") from exc
        except (httpx.HTTPError, TimeoutError) as exc:
            logger.error("Gemini connection failed: %s", type(exc).__name__)
            raise TransportError(f"Gemini connection failed: {exc}") from exc

        usage = response.usage_metadata
        input_tokens = (usage.prompt_token_count or 0) if usage else 0
        output_tokens = (usage.candidates_token_count or 0) if usage else 0
        logger.debug("Gemini response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((self.model, input_tokens, output_tokens))
        return GeminiResponse(
            text=response.text or "",
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
