"""
Narrative provider factory.

This module maps provider names to backend instances. Availability is
checked per call from a Settings snapshot; nothing is cached at module
level, so each request sees the credentials present when it runs.
"""

import logging
from typing import Optional

from .base import NarrativeBackend
from .gemini import GeminiProvider
from .mock import MockProvider
from .openai_provider import OpenAIProvider
from ..config import Settings
from ..models import ScenarioConfig

logger = logging.getLogger(__name__)


def provider_is_usable(provider_name: str, settings: Settings) -> bool:
    """
    Check whether a provider can be invoked with the given settings.

    The mock provider is always usable; hosted providers need their API key.
    """
    return settings.provider_available(provider_name)


def create_provider(
    provider_name: str,
    settings: Settings,
    config: Optional[ScenarioConfig] = None,
) -> NarrativeBackend:
    """
    Create a narrative backend.

    Args:
        provider_name: 'openai', 'gemini' or 'mock'
        settings: Settings supplying credentials, models and temperature
        config: Scenario configuration (required for the mock provider)

    Returns:
        NarrativeBackend instance

    Raises:
        ValueError: If provider_name is unknown, its credential is missing,
            or the mock provider is requested without a config
    """
    if provider_name == "openai":
        return OpenAIProvider(
            api_key=settings.openai_api_key,
            model_name=settings.openai_model,
            temperature=settings.temperature,
        )
    if provider_name == "gemini":
        return GeminiProvider(
            api_key=settings.gemini_api_key,
            model_name=settings.gemini_model,
            temperature=settings.temperature,
        )
    if provider_name == "mock":
        if config is None:
            raise ValueError("The mock provider needs a scenario configuration")
        return MockProvider(config)
    raise ValueError(
        f"Unknown narrative provider: {provider_name}. "
        f"Supported providers: openai, gemini, mock"
    )
