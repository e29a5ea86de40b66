"""
Narrative provider implementations.

Supports the OpenAI chat completions API, the Google Gemini API and a
local mock backend.
"""

from .base import BackendError, NarrativeBackend
from .openai_provider import OpenAIProvider
from .gemini import GeminiProvider
from .mock import MockProvider
from .factory import create_provider, provider_is_usable

__all__ = [
    "BackendError",
    "NarrativeBackend",
    "OpenAIProvider",
    "GeminiProvider",
    "MockProvider",
    "create_provider",
    "provider_is_usable",
]
