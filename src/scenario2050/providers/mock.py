"""Local mock provider backed by the deterministic offline narrative."""

from .base import NarrativeBackend
from ..mock_narrative import mock_narrative
from ..models import Prompt, ScenarioConfig


class MockProvider(NarrativeBackend):
    """Narrative backend that ignores the prompt and renders the mock narrative."""

    name = "mock"

    def __init__(self, config: ScenarioConfig):
        self.config = config

    def invoke(self, prompt: Prompt) -> str:
        return mock_narrative(self.config)
