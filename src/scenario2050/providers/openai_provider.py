"""
OpenAI chat-completions provider.

Sends the system and user instructions as two chat messages and returns
the first completion's text.
"""

import logging
import time
from typing import Any, Optional

import openai
from openai import OpenAI

from .base import BackendError, NarrativeBackend
from ..config import DEFAULT_OPENAI_MODEL, DEFAULT_TEMPERATURE
from ..models import Prompt

logger = logging.getLogger(__name__)


class OpenAIProvider(NarrativeBackend):
    """Narrative backend for the OpenAI chat completions API."""

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_OPENAI_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        client: Optional[Any] = None,
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model_name: Chat model name (default: gpt-4o-mini)
            temperature: Generation temperature (default: 0.7)
            client: Pre-built OpenAI client; created from api_key if None

        Raises:
            ValueError: If no API key is given
        """
        if not api_key:
            raise ValueError("OPENAI_API_KEY environment variable is required")
        self.model_name = model_name
        self.temperature = temperature
        self._client = client if client is not None else OpenAI(api_key=api_key)

    def invoke(self, prompt: Prompt) -> str:
        start_time = time.time()
        try:
            completion = self._client.chat.completions.create(
                model=self.model_name,
                messages=[
                    {"role": "system", "content": prompt.system},
                    {"role": "user", "content": prompt.user},
                ],
                temperature=self.temperature,
            )
        except openai.OpenAIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise BackendError(f"OpenAI request failed: {e}", provider=self.name) from e

        text = _first_choice_text(completion)
        if not text:
            raise BackendError("Empty response from OpenAI.", provider=self.name)

        logger.info(
            f"OpenAI generation finished in {time.time() - start_time:.2f}s "
            f"(model={self.model_name}, chars={len(text)})"
        )
        return text


def _first_choice_text(completion: Any) -> str:
    try:
        content = completion.choices[0].message.content
    except (AttributeError, IndexError, TypeError):
        return ""
    if not isinstance(content, str):
        return ""
    return content.strip()
