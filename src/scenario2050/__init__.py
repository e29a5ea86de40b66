"""
Scenario 2050

Calibrate seven scenario axes describing a year-2050 world, generate a
narrative for them through a hosted LLM (with a deterministic offline
fallback) and optionally render it as speech.
"""

from .axes import (
    AXES,
    AxisDefinition,
    DEFAULT_SCENARIO,
    LANGUAGES,
    PROVIDERS,
    get_axis,
    get_axis_ids,
)
from .models import NarrativeResult, Prompt, ScenarioConfig, SpeechResult
from .normalizer import normalize_config
from .prompts import build_prompt
from .mock_narrative import mock_narrative

__version__ = "0.1.0"

__all__ = [
    "AXES",
    "AxisDefinition",
    "DEFAULT_SCENARIO",
    "LANGUAGES",
    "PROVIDERS",
    "get_axis",
    "get_axis_ids",
    "NarrativeResult",
    "Prompt",
    "ScenarioConfig",
    "SpeechResult",
    "normalize_config",
    "build_prompt",
    "mock_narrative",
]
