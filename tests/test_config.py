"""
Tests for environment-driven settings.
"""

import os
from unittest.mock import patch

from scenario2050.config import (
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_TEMPERATURE,
    Settings,
)


class TestSettingsFromEnv:
    """Test Settings.from_env."""

    def test_empty_environment(self):
        """Test the defaults when nothing is set."""
        settings = Settings.from_env({})
        assert settings.openai_api_key is None
        assert settings.gemini_api_key is None
        assert settings.openai_model == DEFAULT_OPENAI_MODEL
        assert settings.gemini_model == DEFAULT_GEMINI_MODEL
        assert settings.temperature == DEFAULT_TEMPERATURE
        assert settings.elevenlabs_timeout is None
        assert not settings.speech_configured

    def test_values_are_read(self):
        """Test that every variable is picked up."""
        settings = Settings.from_env({
            "OPENAI_API_KEY": "sk",
            "OPENAI_MODEL": "gpt-x",
            "GEMINI_API_KEY": "g",
            "GEMINI_MODEL": "gemini-x",
            "LLM_TEMPERATURE": "0.2",
            "ELEVENLABS_API_KEY": "xi",
            "ELEVENLABS_VOICE_ID": "voice",
            "ELEVENLABS_TIMEOUT": "30",
        })
        assert settings.openai_api_key == "sk"
        assert settings.openai_model == "gpt-x"
        assert settings.gemini_model == "gemini-x"
        assert settings.temperature == 0.2
        assert settings.elevenlabs_voice_id == "voice"
        assert settings.elevenlabs_timeout == 30.0
        assert settings.speech_configured

    def test_blank_values_are_unset(self):
        """Test that blank keys count as missing."""
        settings = Settings.from_env({"OPENAI_API_KEY": "  ", "OPENAI_MODEL": ""})
        assert settings.openai_api_key is None
        assert settings.openai_model == DEFAULT_OPENAI_MODEL

    def test_invalid_temperature(self, caplog):
        """Test that an invalid temperature falls back to the default with a warning."""
        settings = Settings.from_env({"LLM_TEMPERATURE": "hot"})
        assert settings.temperature == DEFAULT_TEMPERATURE
        assert "LLM_TEMPERATURE" in caplog.text

    def test_reads_os_environ(self):
        """Test that os.environ is the default source."""
        with patch.dict(os.environ, {"GEMINI_API_KEY": "from-env"}):
            assert Settings.from_env().gemini_api_key == "from-env"


class TestProviderAvailability:
    """Test provider availability helpers."""

    def test_only_mock(self):
        """Test that only the mock is available without keys."""
        settings = Settings()
        assert settings.available_providers() == ["mock"]
        assert settings.default_provider() == "mock"

    def test_order(self):
        """Test that providers are listed in preference order."""
        settings = Settings(openai_api_key="sk", gemini_api_key="g")
        assert settings.available_providers() == ["openai", "gemini", "mock"]
        assert settings.default_provider() == "openai"

    def test_unknown_provider(self):
        """Test that unknown providers are unavailable."""
        assert not Settings(openai_api_key="sk").provider_available("other")
