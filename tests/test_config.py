"""Tests for config loading."""

import pytest

from resume_analyzer.config import AppConfig, LLMConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.provider == "gemini"
        assert config.llm.gemini_model == "gemini-3-flash-preview"
        assert config.logging.level == "WARNING"

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.llm.anthropic_model == "claude-haiku-4-5-20251001"
        assert config.llm.timeout == 120

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "llm:\n  provider: anthropic\n  anthropic_model: test-model\nlogging:\n  level: DEBUG\n"
        )
        config = load_config(yaml_path)
        assert config.llm.provider == "anthropic"
        assert config.llm.model == "test-model"
        assert config.logging.level == "DEBUG"
        # Defaults for unspecified
        assert config.llm.max_tokens == 8192

    def test_empty_yaml_gives_defaults(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == AppConfig()

    def test_model_follows_provider(self):
        assert LLMConfig().model == "gemini-3-flash-preview"
        assert LLMConfig(provider="anthropic").model == "claude-haiku-4-5-20251001"

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.provider = "changed"
