"""
Narrative backend interface.

Every backend turns a Prompt into plain narrative text. Backends raise
BackendError for any failure they can recognize: transport errors,
non-success responses, malformed payloads and empty text.
"""

from abc import ABC, abstractmethod

from ..models import Prompt


class BackendError(Exception):
    """Raised when a narrative backend cannot produce usable text."""

    def __init__(self, message: str, provider: str = "unknown"):
        super().__init__(message)
        self.provider = provider


class NarrativeBackend(ABC):
    """Abstract narrative backend."""

    name: str = "unknown"

    @abstractmethod
    def invoke(self, prompt: Prompt) -> str:
        """
        Generate narrative text for a prompt.

        Args:
            prompt: System and user instructions

        Returns:
            Non-empty narrative text

        Raises:
            BackendError: If the backend fails or returns no usable text
        """
