"""
Scenario data models.

This module defines the value objects threaded through the narrative and
speech pipelines. ScenarioConfig is validated by Pydantic against the axis
table in ``axes.py``; use ``normalize_config()`` to build one from untrusted
input, since constructing the model directly raises on bad values.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .axes import AXES, AxisDefinition, DEFAULT_SCENARIO

Language = Literal["en", "de"]
ProviderName = Literal["openai", "gemini", "mock"]

AUDIO_MIME_TYPE = "audio/mpeg"


class ScenarioConfig(BaseModel):
    """
    Normalized scenario calibration.

    Attribute names are snake_case; the JSON wire format uses the camelCase
    axis identifiers (``climateC``, ``workforcePressure``, ...). Instances
    are frozen, so every pipeline stage works on its own value.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        validate_default=True,
    )

    climate_c: float = DEFAULT_SCENARIO["climateC"]
    workforce_pressure: float = DEFAULT_SCENARIO["workforcePressure"]
    financial_risk: float = DEFAULT_SCENARIO["financialRisk"]
    social_cohesion: float = DEFAULT_SCENARIO["socialCohesion"]
    geopolitics: float = DEFAULT_SCENARIO["geopolitics"]
    governance_info: float = DEFAULT_SCENARIO["governanceInfo"]
    tech_diffusion: float = DEFAULT_SCENARIO["techDiffusion"]
    language: Language = DEFAULT_SCENARIO["language"]
    provider: ProviderName = DEFAULT_SCENARIO["provider"]

    @model_validator(mode="after")
    def _check_axis_ranges(self) -> "ScenarioConfig":
        for axis in AXES:
            value = getattr(self, axis.field_name)
            if not math.isfinite(value):
                raise ValueError(f"{axis.id} must be a finite number, got {value!r}")
            if value < axis.min or value > axis.max:
                raise ValueError(
                    f"{axis.id} must be between {axis.min} and {axis.max}, got {value!r}"
                )
        return self

    def axis_value(self, axis: AxisDefinition) -> float:
        """Get the current value of an axis."""
        return getattr(self, axis.field_name)

    def to_payload(self) -> Dict[str, Any]:
        """Dump to the camelCase wire shape used by the HTTP API."""
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class Prompt:
    """System and user instructions for a narrative backend."""
    system: str
    user: str

    def combined(self) -> str:
        """Single instruction for backends without a system role."""
        return f"{self.system}\n\n{self.user}"


class NarrativeResult(BaseModel):
    """Outcome of a narrative request. Always carries usable text."""
    model_config = ConfigDict(frozen=True)

    text: str
    warning: Optional[str] = None
    provider: ProviderName = "mock"
    fallback: bool = False

    def to_response(self) -> Dict[str, str]:
        """Response body: ``text`` plus ``warning`` only on fallback."""
        body = {"text": self.text}
        if self.warning:
            body["warning"] = self.warning
        return body


class SpeechResult(BaseModel):
    """Base64-encoded audio returned by the speech backend."""
    model_config = ConfigDict(frozen=True)

    audio_base64: str
    mime_type: str = Field(default=AUDIO_MIME_TYPE)

    def to_response(self) -> Dict[str, str]:
        return {"audioBase64": self.audio_base64, "mimeType": self.mime_type}
