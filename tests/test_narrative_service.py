"""
Tests for narrative dispatch and the mock fallback guarantee.
"""

import os
import pytest
from unittest.mock import MagicMock, patch

from scenario2050.config import Settings
from scenario2050.mock_narrative import mock_narrative
from scenario2050.normalizer import normalize_config
from scenario2050.prompts import build_prompt
from scenario2050.providers import BackendError, create_provider
from scenario2050.services import NarrativeService, generate_narrative
from scenario2050.services.narrative_service import DEFAULT_FALLBACK_WARNING, fallback_result
from tests.conftest import make_openai_completion


def backend_returning(text):
    """Provider factory whose backend returns text."""
    backend = MagicMock()
    backend.invoke.return_value = text
    factory = MagicMock(return_value=backend)
    return factory, backend


def backend_raising(error):
    """Provider factory whose backend raises error."""
    backend = MagicMock()
    backend.invoke.side_effect = error
    factory = MagicMock(return_value=backend)
    return factory, backend


class TestMockProviderPath:
    """Test generation with the mock provider."""

    def test_mock_default_has_no_warning(self, sample_config):
        """Test that the mock provider returns the mock narrative without a warning."""
        result = generate_narrative(sample_config, settings=Settings())
        assert result.text == mock_narrative(sample_config)
        assert result.warning is None
        assert result.fallback is False
        assert result.to_response() == {"text": mock_narrative(sample_config)}


class TestMissingCredential:
    """Test silent downgrade when a hosted provider has no key."""

    @pytest.mark.parametrize("provider", ["openai", "gemini"])
    def test_downgrades_to_mock_without_warning(self, sample_config, provider):
        """Test that a missing key yields the mock narrative and no warning."""
        config = normalize_config({**sample_config.to_payload(), "provider": provider})
        factory = MagicMock(side_effect=create_provider)

        result = generate_narrative(config, settings=Settings(), provider_factory=factory)

        factory.assert_called_once()
        assert factory.call_args.args[0] == "mock"
        assert result.text == mock_narrative(config)
        assert result.warning is None

    def test_reads_environment_when_no_settings(self, sample_config):
        """Test that settings are read from the environment per call."""
        config = normalize_config({**sample_config.to_payload(), "provider": "openai"})
        result = generate_narrative(config)
        assert result.text == mock_narrative(config)
        assert result.warning is None


class TestHostedProviders:
    """Test dispatch to hosted providers."""

    def test_success_returns_backend_text(self, sample_config, openai_settings):
        """Test that successful text is returned unchanged with no warning."""
        config = normalize_config({**sample_config.to_payload(), "provider": "openai"})
        factory, backend = backend_returning("A hosted narrative.")

        result = generate_narrative(config, settings=openai_settings, provider_factory=factory)

        assert result.text == "A hosted narrative."
        assert result.warning is None
        assert result.provider == "openai"
        factory.assert_called_once_with("openai", openai_settings, config)
        backend.invoke.assert_called_once_with(build_prompt(config))

    def test_uses_given_prompt(self, sample_config, openai_settings):
        """Test that a prebuilt prompt is passed through."""
        config = normalize_config({**sample_config.to_payload(), "provider": "openai"})
        prompt = build_prompt(config)
        factory, backend = backend_returning("ok")
        generate_narrative(config, prompt=prompt, settings=openai_settings, provider_factory=factory)
        assert backend.invoke.call_args.args[0] is prompt

    def test_openai_end_to_end(self, sample_config, openai_settings, mock_openai_client):
        """Test the default factory with a mocked OpenAI client."""
        config = normalize_config({**sample_config.to_payload(), "provider": "openai"})
        mock_openai_client.chat.completions.create.return_value = make_openai_completion("From OpenAI.")
        with patch('scenario2050.providers.openai_provider.OpenAI', return_value=mock_openai_client):
            result = generate_narrative(config, settings=openai_settings)
        assert result.text == "From OpenAI."
        assert result.warning is None

    def test_gemini_end_to_end(self, sample_config, gemini_settings, mock_gemini_model):
        """Test the default factory with a mocked Gemini module."""
        config = normalize_config({**sample_config.to_payload(), "provider": "gemini"})
        result = generate_narrative(config, settings=gemini_settings)
        assert result.text == "Generated narrative"
        assert result.provider == "gemini"


class TestFallback:
    """Test that backend failures become the mock narrative plus a warning."""

    @pytest.fixture
    def openai_config(self, sample_config):
        return normalize_config({**sample_config.to_payload(), "provider": "openai"})

    def test_backend_error(self, openai_config, openai_settings):
        """Test that a BackendError falls back with its message as warning."""
        factory, backend = backend_raising(BackendError("OpenAI request failed: 429", provider="openai"))

        result = generate_narrative(openai_config, settings=openai_settings, provider_factory=factory)

        assert result.text == mock_narrative(openai_config)
        assert result.warning == "OpenAI request failed: 429"
        assert result.fallback is True
        assert result.provider == "mock"
        assert backend.invoke.call_count == 1

    def test_unexpected_error(self, openai_config, openai_settings):
        """Test that any exception falls back."""
        factory, _ = backend_raising(RuntimeError("boom"))
        result = generate_narrative(openai_config, settings=openai_settings, provider_factory=factory)
        assert result.text == mock_narrative(openai_config)
        assert result.warning == "boom"

    def test_error_without_message_gets_generic_warning(self, openai_config, openai_settings):
        """Test that an empty error message still produces a warning."""
        factory, _ = backend_raising(RuntimeError())
        result = generate_narrative(openai_config, settings=openai_settings, provider_factory=factory)
        assert result.warning == DEFAULT_FALLBACK_WARNING

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_text(self, openai_config, openai_settings, text):
        """Test that empty backend text is treated as a failure."""
        factory, _ = backend_returning(text)
        result = generate_narrative(openai_config, settings=openai_settings, provider_factory=factory)
        assert result.text == mock_narrative(openai_config)
        assert result.warning

    def test_factory_error(self, openai_config, openai_settings):
        """Test that a failure while building the backend also falls back."""
        factory = MagicMock(side_effect=ValueError("bad settings"))
        result = generate_narrative(openai_config, settings=openai_settings, provider_factory=factory)
        assert result.fallback is True
        assert result.warning == "bad settings"

    def test_fallback_result(self, sample_config):
        """Test the fallback result helper."""
        result = fallback_result(sample_config, "")
        assert result.warning == DEFAULT_FALLBACK_WARNING
        assert result.to_response() == {
            "text": mock_narrative(sample_config),
            "warning": DEFAULT_FALLBACK_WARNING,
        }


class TestNarrativeService:
    """Test the service wrapper."""

    def test_reads_settings_per_call(self, sample_config):
        """Test that the settings factory is consulted for each request."""
        settings_factory = MagicMock(return_value=Settings())
        service = NarrativeService(settings_factory=settings_factory)
        service.generate(sample_config)
        service.generate(sample_config)
        assert settings_factory.call_count == 2

    def test_credentials_toggle_between_calls(self, sample_config, mock_openai_client):
        """Test that a key set after construction is picked up."""
        config = normalize_config({**sample_config.to_payload(), "provider": "openai"})
        mock_openai_client.chat.completions.create.return_value = make_openai_completion("Hosted.")
        service = NarrativeService()

        assert service.generate(config).text == mock_narrative(config)

        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test"}):
            with patch('scenario2050.providers.openai_provider.OpenAI', return_value=mock_openai_client):
                assert service.generate(config).text == "Hosted."
