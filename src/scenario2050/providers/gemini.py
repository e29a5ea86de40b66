"""
Google Gemini provider.

Gemini has no separate system role in this protocol, so the system and user
instructions are merged into one content part of a single user turn. The
text is read from ``candidates[0].content.parts[0].text``; safety refusals
arrive as a present-but-empty response, so empty text is always a failure.
"""

import logging
import time
from typing import Any

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from google.generativeai.types import GenerationConfig

from .base import BackendError, NarrativeBackend
from ..config import DEFAULT_GEMINI_MODEL, DEFAULT_TEMPERATURE
from ..models import Prompt

logger = logging.getLogger(__name__)


def _normalize_model_name(model_name: str) -> str:
    """Ensure the model name carries the ``models/`` prefix the API expects."""
    base_name = model_name.replace("models/", "")
    return f"models/{base_name}"


class GeminiProvider(NarrativeBackend):
    """
    Narrative backend for the Google Gemini API.

    The ``google.generativeai`` module is configured per call with this
    provider's key; the key comes from the environment and is the same for
    every request in a process.
    """

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_GEMINI_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        """
        Initialize Gemini provider.

        Args:
            api_key: Gemini API key
            model_name: Model name, with or without the ``models/`` prefix
            temperature: Generation temperature (default: 0.7)

        Raises:
            ValueError: If no API key is given
        """
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable is required")
        self.api_key = api_key
        self._model_name = _normalize_model_name(model_name)
        self.temperature = temperature

    @property
    def model_name(self) -> str:
        """Get the model name being used by this provider."""
        return self._model_name

    def invoke(self, prompt: Prompt) -> str:
        start_time = time.time()
        try:
            genai.configure(api_key=self.api_key)
            model = genai.GenerativeModel(self.model_name)
            response = model.generate_content(
                [prompt.combined()],
                generation_config=GenerationConfig(temperature=self.temperature),
            )
        except (google_exceptions.GoogleAPIError, ConnectionError, TimeoutError, OSError, ValueError) as e:
            logger.error(f"Gemini request failed: {e}")
            raise BackendError(f"Gemini request failed: {e}", provider=self.name) from e

        text = extract_candidate_text(response)
        if not text:
            logger.warning(
                f"Gemini returned no text (finish_reason={_finish_reason(response)})"
            )
            raise BackendError("Empty response from Gemini.", provider=self.name)

        logger.info(
            f"Gemini generation finished in {time.time() - start_time:.2f}s "
            f"(model={self.model_name}, chars={len(text)})"
        )
        return text


def extract_candidate_text(response: Any) -> str:
    """
    Read ``candidates[0].content.parts[0].text`` from a Gemini response.

    Returns:
        The stripped text; an empty string when the text is present but empty

    Raises:
        BackendError: If the response does not have that shape
    """
    try:
        text = response.candidates[0].content.parts[0].text
    except (AttributeError, IndexError, KeyError, TypeError) as e:
        raise BackendError("Malformed response from Gemini.", provider="gemini") from e
    if not isinstance(text, str):
        raise BackendError("Malformed response from Gemini.", provider="gemini")
    return text.strip()


def _finish_reason(response: Any) -> str:
    try:
        return str(response.candidates[0].finish_reason)
    except (AttributeError, IndexError, TypeError):
        return "UNKNOWN"
