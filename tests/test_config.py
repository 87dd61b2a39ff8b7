"""Tests for settings, the phrase table and logging setup."""

from types import MappingProxyType

import pytest
import structlog

import tagcheck.logging_config
from tagcheck.config import IncorrectTagCheckConfig, Settings
from tagcheck.logging_config import configure_logging
from tagcheck.schemas import InstructionPhrases, OffendingCount
from tagcheck.services.tags import DEFAULT_EXCEPTIONS, DEFAULT_TAGS_TO_CHECK


class TestSettings:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("TAGCHECK_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TAGCHECK_LOG_JSON", "false")
        loaded = Settings()
        assert loaded.log_level == "DEBUG"
        assert loaded.log_json is False


class TestPhrases:
    def test_count_categories(self):
        assert OffendingCount.of(1) is OffendingCount.SINGLE
        assert OffendingCount.of(2) is OffendingCount.MULTIPLE
        assert OffendingCount.of(70) is OffendingCount.MULTIPLE

    def test_phrase_by_category(self):
        phrases = InstructionPhrases("Fix tag ", "Fix tags ")
        assert phrases.for_count(OffendingCount.SINGLE) == "Fix tag "
        assert phrases.for_count(OffendingCount.MULTIPLE) == "Fix tags "


class TestIncorrectTagCheckConfig:
    def test_defaults(self):
        """No phrases configured means the check falls back to its own."""
        config = IncorrectTagCheckConfig()
        assert config.tags_to_check == DEFAULT_TAGS_TO_CHECK
        assert "concrete:plates" in config.exceptions["surface"]
        assert config.fallback_instructions is None

    def test_camel_case_options(self):
        config = IncorrectTagCheckConfig.model_validate(
            {"tagsToCheck": ["highway"], "fallbackInstructions": ["Tag: ", "Tags: "]}
        )
        assert config.tags_to_check == frozenset({"highway"})
        assert config.fallback_instructions == InstructionPhrases("Tag: ", "Tags: ")

    def test_configured_exceptions_are_read_only(self):
        config = IncorrectTagCheckConfig.model_validate({"exceptions": {"highway": ["Primary"]}})
        assert isinstance(config.exceptions, MappingProxyType)
        assert config.exceptions["highway"] == frozenset({"Primary"})
        with pytest.raises(TypeError):
            config.exceptions["surface"] = frozenset({"Mud"})

    def test_default_exceptions_are_read_only(self):
        config = IncorrectTagCheckConfig()
        assert config.exceptions == DEFAULT_EXCEPTIONS
        with pytest.raises(TypeError):
            config.exceptions["highway"] = frozenset({"Primary"})


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_json_renderer_by_default(self, monkeypatch):
        monkeypatch.setattr(tagcheck.logging_config, "settings", Settings(log_json=True))
        configure_logging()
        assert structlog.is_configured()
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_renderer_when_json_disabled(self, monkeypatch):
        monkeypatch.setattr(tagcheck.logging_config, "settings", Settings(log_json=False))
        configure_logging()
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
