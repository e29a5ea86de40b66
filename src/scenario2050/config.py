"""
Environment-driven settings.

Credentials and model overrides come from environment variables. Settings
are read at request time rather than cached at import, so a missing key is
an ordinary condition (the narrative path downgrades to the mock backend)
and tests can toggle credentials per call.
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_TEMPERATURE = 0.7

PROVIDER_CREDENTIALS = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


def _get_float(env: Mapping[str, str], name: str, default: Optional[float]) -> Optional[float]:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={value!r}; using {default}")
        return default


@dataclass(frozen=True)
class Settings:
    """Snapshot of the environment relevant to the narrative and speech backends."""
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    elevenlabs_api_key: Optional[str] = None
    elevenlabs_voice_id: Optional[str] = None
    elevenlabs_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Settings instance; empty strings are treated as unset
        """
        if env is None:
            env = os.environ

        def optional(name: str) -> Optional[str]:
            value = env.get(name, "").strip()
            return value or None

        return cls(
            openai_api_key=optional("OPENAI_API_KEY"),
            openai_model=optional("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
            gemini_api_key=optional("GEMINI_API_KEY"),
            gemini_model=optional("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
            temperature=_get_float(env, "LLM_TEMPERATURE", DEFAULT_TEMPERATURE),
            elevenlabs_api_key=optional("ELEVENLABS_API_KEY"),
            elevenlabs_voice_id=optional("ELEVENLABS_VOICE_ID"),
            elevenlabs_timeout=_get_float(env, "ELEVENLABS_TIMEOUT", None),
        )

    def provider_available(self, provider: str) -> bool:
        """Check whether a narrative provider can be used with these settings."""
        if provider == "mock":
            return True
        if provider == "openai":
            return bool(self.openai_api_key)
        if provider == "gemini":
            return bool(self.gemini_api_key)
        return False

    def available_providers(self) -> list:
        return [name for name in ("openai", "gemini", "mock") if self.provider_available(name)]

    def default_provider(self) -> str:
        """Preferred provider for new scenarios: the first hosted backend with a key."""
        return self.available_providers()[0]

    @property
    def speech_configured(self) -> bool:
        return bool(self.elevenlabs_api_key)
