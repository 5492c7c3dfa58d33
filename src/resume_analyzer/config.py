"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

PROVIDERS = ("gemini", "anthropic")


@dataclass(frozen=True)
class LLMConfig:
    provider: str = "gemini"
    gemini_model: str = "gemini-3-flash-preview"
    anthropic_model: str = "claude-haiku-4-5-20251001"
    timeout: int = 120
    temperature: float = 0.0
    max_tokens: int = 8192

    def __post_init__(self) -> None:
        if self.provider not in PROVIDERS:
            raise ValueError(f"provider must be one of {PROVIDERS}, got {self.provider!r}")
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"timeout must be between 1 and 600 seconds, got {self.timeout}")
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError(f"temperature must be between 0.0 and 2.0, got {self.temperature}")
        if not 1 <= self.max_tokens <= 65536:
            raise ValueError(f"max_tokens must be between 1 and 65536, got {self.max_tokens}")

    @property
    def model(self) -> str:
        """Model id for the selected provider."""
        if self.provider == "anthropic":
            return self.anthropic_model
        return self.gemini_model


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ValueError(f"level must be a logging level name, got {self.level!r}")


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
    )
