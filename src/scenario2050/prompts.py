"""
Prompt builder for narrative generation.

Builds the (system, user) instruction pair for a scenario. The output is a
pure function of the configuration and the static axis table, so the same
configuration always yields the same prompt.
"""

from .axes import AXES, format_axis_value
from .models import Prompt, ScenarioConfig

NARRATIVE_MIN_WORDS = 180
NARRATIVE_MAX_WORDS = 280
BULLET_POINT_COUNT = 5
POLE_SEPARATOR = "↔"

TAKEAWAY_HEADINGS = {
    "en": "What this means for you",
    "de": "Was das für dich bedeutet",
}

SYSTEM_PROMPTS = {
    "en": (
        "You are a grounded future analyst. Write a plausible, internally consistent "
        "2050 narrative. Use probabilistic language, no absolutes. Tone: clear, grounded, "
        f"slightly optimistic but honest. Length {NARRATIVE_MIN_WORDS}–{NARRATIVE_MAX_WORDS} words. "
        "Explicitly reflect every axis: climate, demography/workforce, financial stability, "
        "social cohesion, geopolitics, governance/info order, technology diffusion. "
        f"End with exactly {BULLET_POINT_COUNT} bullet points under the heading "
        f"'{TAKEAWAY_HEADINGS['en']}'."
    ),
    "de": (
        "Du bist eine fundierte Zukunftsanalystin. Schreibe eine plausible, intern "
        "konsistente 2050-Erzählung. Verwende probabilistische Sprache, keine Gewissheiten. "
        "Ton: klar, bodenständig, leicht optimistisch aber ehrlich. "
        f"Länge {NARRATIVE_MIN_WORDS}–{NARRATIVE_MAX_WORDS} Wörter. Beziehe jede Achse explizit ein: "
        "Klima, Demografie/Arbeitskräfte, Finanzstabilität, sozialer Zusammenhalt, "
        "Geopolitik, Regierungsfähigkeit/Informationsordnung, Technologie-Diffusion. "
        f"Ende mit genau {BULLET_POINT_COUNT} Bullet Points unter der Überschrift "
        f"'{TAKEAWAY_HEADINGS['de']}'."
    ),
}

USER_PROMPTS = {
    "en": "Here are the calibrations:\n{axis_lines}\nWrite the narrative based on these values.",
    "de": "Hier sind die Kalibrierungen:\n{axis_lines}\nSchreibe die Erzählung basierend auf diesen Werten.",
}


def build_axis_lines(config: ScenarioConfig) -> str:
    """
    Render the calibration block, one line per axis.

    Each line reads ``{title}: {label} = {value} ({low pole} ↔ {high pole})``
    in the configuration's language.
    """
    language = config.language
    lines = []
    for axis in AXES:
        value = format_axis_value(axis, config.axis_value(axis))
        lines.append(
            f"{axis.title.get(language)}: {axis.label.get(language)} = {value} "
            f"({axis.left_label.get(language)} {POLE_SEPARATOR} {axis.right_label.get(language)})"
        )
    return "\n".join(lines)


def build_prompt(config: ScenarioConfig) -> Prompt:
    """
    Build the narrative prompt for a normalized configuration.

    Args:
        config: Normalized scenario configuration

    Returns:
        Prompt with the localized system instruction and the calibration
        block wrapped in the localized user instruction
    """
    language = config.language
    user = USER_PROMPTS[language].format(axis_lines=build_axis_lines(config))
    return Prompt(system=SYSTEM_PROMPTS[language], user=user)
