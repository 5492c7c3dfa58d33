"""Pick a generation backend from configuration."""

from __future__ import annotations

from resume_analyzer.clients.gemini_client import GeminiClient
from resume_analyzer.clients.llm_client import LLMClient
from resume_analyzer.config import LLMConfig


def create_client(cfg: LLMConfig) -> GeminiClient | LLMClient:
    """Build the configured client; API keys come from the environment."""
    if cfg.provider == "gemini":
        return GeminiClient(
            timeout=cfg.timeout,
            model=cfg.gemini_model,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
        )

    if cfg.provider == "anthropic":
        return LLMClient(
            timeout=cfg.timeout,
            model=cfg.anthropic_model,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
        )

    raise ValueError(f"Unsupported provider={cfg.provider!r}")
