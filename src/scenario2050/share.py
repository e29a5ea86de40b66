"""
Scenario defaults and share-link helpers.

A scenario can be passed around as a query string (``climateC=2.4&...``).
These helpers build that string and apply one on top of an existing
configuration.
"""

import math
from typing import Mapping, Optional
from urllib.parse import urlencode

from .axes import AXES, DEFAULT_SCENARIO, LANGUAGES, PROVIDERS
from .config import Settings
from .models import ScenarioConfig
from .normalizer import coerce_number, normalize_config


def default_config(settings: Optional[Settings] = None) -> ScenarioConfig:
    """
    Default scenario, with the provider picked from configured credentials.

    Args:
        settings: Settings snapshot (read from the environment if None)
    """
    if settings is None:
        settings = Settings.from_env()
    return normalize_config({**DEFAULT_SCENARIO, "provider": settings.default_provider()})


def config_to_query(config: ScenarioConfig) -> str:
    """Encode a configuration as a URL query string."""
    payload = config.to_payload()
    params = [(axis.id, _query_number(payload[axis.id])) for axis in AXES]
    params.append(("language", payload["language"]))
    params.append(("provider", payload["provider"]))
    return urlencode(params)


def apply_query_to_config(params: Mapping[str, str], current: ScenarioConfig) -> ScenarioConfig:
    """
    Overlay query parameters on a configuration.

    Axis values are applied only when they parse as finite numbers; language and
    provider only when they name a known value. The result is normalized,
    so out-of-range numbers are clamped.

    Args:
        params: Query parameters (e.g. ``request.args``)
        current: Configuration to start from

    Returns:
        New ScenarioConfig; ``current`` is not modified
    """
    merged = current.to_payload()
    for axis in AXES:
        value = params.get(axis.id)
        number = coerce_number(value)
        if number is not None and math.isfinite(number):
            merged[axis.id] = value
    language = params.get("language")
    if language in LANGUAGES:
        merged["language"] = language
    provider = params.get("provider")
    if provider in PROVIDERS:
        merged["provider"] = provider
    return normalize_config(merged)


def _query_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
