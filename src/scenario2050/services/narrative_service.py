"""
Narrative generation service.

Dispatches a scenario prompt to the selected backend and guarantees a
usable narrative: a missing credential silently downgrades to the mock
backend, and any backend failure is replaced by the mock narrative plus a
warning describing what went wrong.
"""

import logging
from typing import Callable, Optional

from ..config import Settings
from ..mock_narrative import mock_narrative
from ..models import NarrativeResult, Prompt, ScenarioConfig
from ..prompts import build_prompt
from ..providers import BackendError, NarrativeBackend, create_provider, provider_is_usable

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_WARNING = "Generation failed, using mock."

ProviderFactory = Callable[[str, Settings, Optional[ScenarioConfig]], NarrativeBackend]


def fallback_result(config: ScenarioConfig, warning: str) -> NarrativeResult:
    """Mock narrative carrying a warning, used whenever a backend fails."""
    return NarrativeResult(
        text=mock_narrative(config),
        warning=warning or DEFAULT_FALLBACK_WARNING,
        provider="mock",
        fallback=True,
    )


def generate_narrative(
    config: ScenarioConfig,
    prompt: Optional[Prompt] = None,
    settings: Optional[Settings] = None,
    provider_factory: Optional[ProviderFactory] = None,
) -> NarrativeResult:
    """
    Generate a narrative for a normalized configuration.

    Makes exactly one backend attempt. This function does not raise for
    backend failures; they are reported through ``NarrativeResult.warning``.

    Args:
        config: Normalized scenario configuration
        prompt: Prebuilt prompt (built from config if None)
        settings: Settings snapshot (read from the environment if None)
        provider_factory: Backend factory (defaults to ``create_provider``)

    Returns:
        NarrativeResult with non-empty text
    """
    if settings is None:
        settings = Settings.from_env()
    if prompt is None:
        prompt = build_prompt(config)
    factory = provider_factory or create_provider

    provider_name = config.provider
    if not provider_is_usable(provider_name, settings):
        logger.info(f"Provider '{provider_name}' is not configured; using mock narrative")
        provider_name = "mock"

    try:
        backend = factory(provider_name, settings, config)
        text = backend.invoke(prompt)
        if not text or not text.strip():
            raise BackendError(f"Empty response from {provider_name}.", provider=provider_name)
    except BackendError as e:
        logger.warning(f"Narrative backend '{provider_name}' failed, using mock: {e}")
        return fallback_result(config, str(e))
    except Exception as e:
        logger.error(
            f"Unexpected error from narrative backend '{provider_name}', using mock: {e}",
            exc_info=True,
        )
        return fallback_result(config, str(e))

    return NarrativeResult(text=text, provider=provider_name)


class NarrativeService:
    """Service wrapper around ``generate_narrative`` for the API and CLI layers."""

    def __init__(
        self,
        settings_factory: Optional[Callable[[], Settings]] = None,
        provider_factory: Optional[ProviderFactory] = None,
    ):
        """
        Initialize narrative service.

        Args:
            settings_factory: Callable returning a fresh Settings per request
                (defaults to ``Settings.from_env``)
            provider_factory: Backend factory (defaults to ``create_provider``)
        """
        self._settings_factory = settings_factory or Settings.from_env
        self._provider_factory = provider_factory

    def generate(self, config: ScenarioConfig) -> NarrativeResult:
        """Build the prompt for config and dispatch it."""
        return generate_narrative(
            config,
            prompt=build_prompt(config),
            settings=self._settings_factory(),
            provider_factory=self._provider_factory,
        )
