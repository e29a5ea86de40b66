"""
Configuration normalizer.

Turns an arbitrary, untrusted object (usually a decoded JSON request body)
into a valid ScenarioConfig. Normalization never fails: every axis ends up
finite and inside its declared range, and unknown enum values fall back to
their defaults.
"""

import math
from collections.abc import Mapping
from typing import Any, Optional

from .axes import AXES, DEFAULT_LANGUAGE, DEFAULT_PROVIDER, LANGUAGES, PROVIDERS
from .models import ScenarioConfig


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into the inclusive range [lo, hi]."""
    return min(max(value, lo), hi)


def coerce_number(value: Any) -> Optional[float]:
    """
    Coerce a raw field value to a float.

    Accepts ints, floats and numeric strings (surrounding whitespace is
    ignored). Booleans, None, empty strings, containers and any other type
    are not numbers. This is stricter than JavaScript's ``Number()`` on
    purpose: ``true`` and ``[5]`` from a JSON body are treated as missing
    (and so resolve to the axis minimum) rather than as 1 and 5.

    Returns:
        The float value (possibly NaN or infinite), or None if the value
        is not numeric at all
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            return float(stripped)
        except ValueError:
            return None
    return None


def normalize_config(raw: Any) -> ScenarioConfig:
    """
    Build a well-formed ScenarioConfig from untrusted input.

    Args:
        raw: Any object. Mappings are read by axis identifier (``climateC``)
            or attribute name (``climate_c``); anything else is treated as an
            empty mapping. An existing ScenarioConfig is re-normalized.

    Returns:
        ScenarioConfig with every axis clamped into range, ``language`` in
        {"en", "de"} and ``provider`` in {"openai", "gemini", "mock"}
    """
    if isinstance(raw, ScenarioConfig):
        raw = raw.to_payload()
    if not isinstance(raw, Mapping):
        raw = {}

    values = {}
    for axis in AXES:
        field_value = raw.get(axis.id, raw.get(axis.field_name))
        number = coerce_number(field_value)
        if number is None or not math.isfinite(number):
            number = axis.min
        values[axis.field_name] = float(clamp(number, axis.min, axis.max))

    language = raw.get("language")
    values["language"] = language if _is_one_of(language, LANGUAGES) else DEFAULT_LANGUAGE

    provider = raw.get("provider")
    values["provider"] = provider if _is_one_of(provider, PROVIDERS) else DEFAULT_PROVIDER

    return ScenarioConfig(**values)


def _is_one_of(value: Any, allowed) -> bool:
    return isinstance(value, str) and value in allowed
