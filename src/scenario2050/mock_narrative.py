"""
Deterministic offline narrative.

Used as the default provider when no hosted backend is configured and as
the fallback text whenever a hosted backend fails. It must stay free of
I/O, environment lookups and clock reads.
"""

from .axes import get_axis, format_axis_value
from .models import ScenarioConfig
from .prompts import TAKEAWAY_HEADINGS

NARRATIVE_TEMPLATES = {
    "en": (
        "2050 feels like a careful balancing act. Warming sits near {climate}°C, which raises "
        "tangible risks yet could remain manageable with continued adaptation. Workforce "
        "pressure at {workforce} suggests automation, migration, and longer careers are likely "
        "needed to keep services staffed. Financial volatility around {finance} means credit "
        "cycles stay cautious and shocks remain possible. Social cohesion at {cohesion} signals "
        "institutions are mixed but still capable of inclusion. Geopolitical fragmentation "
        "({geopolitics}) makes trade rules less predictable, while governance and information "
        "integrity ({governance}) decide whether coordination holds. Technology diffusion at "
        "{tech} will shape whether productivity gains spread broadly."
    ),
    "de": (
        "Das Jahr 2050 fühlt sich nach einem vorsichtigen Balanceakt an. Die Erwärmung liegt "
        "bei etwa {climate}°C, was spürbare Risiken bringt, aber durch fortgesetzte Anpassung "
        "in Schach gehalten werden könnte. Der Arbeitsmarkt steht unter einem Druckwert von "
        "{workforce}, sodass Automatisierung, Migration und längere Erwerbsbiografien "
        "vermutlich zusammenwirken müssen, um Lücken zu schließen. Finanzmärkte wirken mit "
        "einem Risiko von {finance} volatil genug, dass Vorsicht im Kreditzyklus angesagt "
        "bleibt. Der soziale Zusammenhalt liegt bei {cohesion}, was auf gemischte, aber noch "
        "tragfähige Institutionen hindeutet. Geopolitische Fragmentierung ({geopolitics}) "
        "lässt Handelsregeln weniger berechenbar erscheinen, während Governance und "
        "Informationsintegrität ({governance}) den Ton angeben, ob Koordination gelingt. "
        "Technologie-Diffusion ({tech}) bestimmt, ob Produktivitätsgewinne breit ankommen."
    ),
}

TAKEAWAYS = {
    "en": (
        "Invest in resilient skills and continuous learning.",
        "Plan energy and mobility choices with longer horizons.",
        "Build buffers for volatile financial periods.",
        "Engage locally to strengthen trust and cohesion.",
        "Support policies that protect digital information spaces.",
    ),
    "de": (
        "Investiere Zeit in resiliente Fähigkeiten und lebenslanges Lernen.",
        "Plane Energie- und Mobilitätsentscheidungen langfristiger.",
        "Baue finanzielle Puffer für volatile Phasen auf.",
        "Engagiere dich lokal, um Vertrauen und Zusammenhalt zu stärken.",
        "Unterstütze Politik für sichere digitale Informationsräume.",
    ),
}


def _plain_number(value: float) -> str:
    # 45.0 -> "45", 45.5 -> "45.5"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def mock_narrative(config: ScenarioConfig) -> str:
    """
    Produce the placeholder narrative for a configuration.

    Args:
        config: Normalized scenario configuration

    Returns:
        A paragraph interpolating the axis values, a blank line, the
        localized takeaway heading and exactly five bullet lines
    """
    language = config.language
    paragraph = NARRATIVE_TEMPLATES[language].format(
        climate=format_axis_value(get_axis("climateC"), config.climate_c),
        workforce=_plain_number(config.workforce_pressure),
        finance=_plain_number(config.financial_risk),
        cohesion=_plain_number(config.social_cohesion),
        geopolitics=_plain_number(config.geopolitics),
        governance=_plain_number(config.governance_info),
        tech=_plain_number(config.tech_diffusion),
    )
    bullets = "\n".join(f"- {line}" for line in TAKEAWAYS[language])
    return f"{paragraph}\n\n{TAKEAWAY_HEADINGS[language]}\n{bullets}"
