"""
Axis definitions for the 2050 scenario calibrator.

Each axis defines its numeric range, step granularity and the bilingual
strings used for prompts and for the UI. This table is the only source
of validation bounds, prompt wording and display labels; nothing else
in the package should hard-code an axis range.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

LANGUAGES = ("en", "de")
DEFAULT_LANGUAGE = "en"

PROVIDERS = ("openai", "gemini", "mock")
DEFAULT_PROVIDER = "mock"

LANGUAGE_LABELS = {
    "en": "English",
    "de": "Deutsch",
}


@dataclass(frozen=True)
class Localized:
    """A string available in every supported language."""
    en: str
    de: str

    def get(self, language: str) -> str:
        if language == "de":
            return self.de
        return self.en

    def to_dict(self) -> Dict[str, str]:
        return {"en": self.en, "de": self.de}


@dataclass(frozen=True)
class AxisDefinition:
    """Static definition of one scenario axis."""
    id: str
    field_name: str
    min: float
    max: float
    step: float
    label: Localized
    title: Localized
    description: Localized
    left_label: Localized
    right_label: Localized
    summary_label: Localized

    def to_dict(self, language: Optional[str] = None) -> Dict[str, Any]:
        """
        Serialize the axis for API responses.

        Args:
            language: If given, strings are resolved to that language.
                Otherwise each string is returned as an ``{"en", "de"}`` dict.
        """
        def text(value: Localized):
            return value.get(language) if language else value.to_dict()

        return {
            "id": self.id,
            "min": self.min,
            "max": self.max,
            "step": self.step,
            "decimals": axis_decimals(self),
            "label": text(self.label),
            "title": text(self.title),
            "description": text(self.description),
            "leftLabel": text(self.left_label),
            "rightLabel": text(self.right_label),
            "summaryLabel": text(self.summary_label),
        }


AXES = (
    AxisDefinition(
        id="climateC",
        field_name="climate_c",
        min=1.5,
        max=3.5,
        step=0.1,
        label=Localized(
            en="Global warming by 2050 (°C vs preindustrial)",
            de="Globale Erwärmung bis 2050 (°C vs. vorindustriell)",
        ),
        title=Localized(
            en="Planetary Boundaries & Material Transition",
            de="Planetare Grenzen & Materialwende",
        ),
        description=Localized(
            en="The pace of climate mitigation and material transition shapes risks and resource stress.",
            de="Tempo von Klimaschutz und Materialwende prägt Risiken und Ressourcenstress.",
        ),
        left_label=Localized(
            en="Strong mitigation & adaptation; climate risks contained",
            de="Starke Minderung & Anpassung; Klimarisiken begrenzt",
        ),
        right_label=Localized(
            en="Weak mitigation; high physical risks & resource stress",
            de="Schwache Minderung; hohe physische Risiken & Ressourcenstress",
        ),
        summary_label=Localized(en="Warming °C", de="Erwärmung °C"),
    ),
    AxisDefinition(
        id="workforcePressure",
        field_name="workforce_pressure",
        min=0,
        max=100,
        step=1,
        label=Localized(
            en="Net workforce pressure index",
            de="Netto-Arbeitskräfte-Druckindex",
        ),
        title=Localized(
            en="Population, Migration & Lifespan",
            de="Bevölkerung, Migration & Lebensspanne",
        ),
        description=Localized(
            en="Migration, participation, and healthspan influence how tight labor markets feel.",
            de="Migration, Teilhabe und gesunde Lebenszeit bestimmen die Spannung am Arbeitsmarkt.",
        ),
        left_label=Localized(
            en="Workforce stabilized (migration + participation + healthspan gains)",
            de="Arbeitskräfte stabilisiert (Migration + Teilhabe + Healthspan-Gewinne)",
        ),
        right_label=Localized(
            en="Workforce shrinks; strong aging pressure",
            de="Arbeitskräfte schrumpfen; starker Alterungsdruck",
        ),
        summary_label=Localized(en="Workforce pressure", de="Arbeitskräfte-Druck"),
    ),
    AxisDefinition(
        id="financialRisk",
        field_name="financial_risk",
        min=0,
        max=100,
        step=1,
        label=Localized(
            en="Financial volatility / crisis risk",
            de="Finanzvolatilität / Krisenrisiko",
        ),
        title=Localized(
            en="Financial Stability & Capital Markets",
            de="Finanzstabilität & Kapitalmärkte",
        ),
        description=Localized(
            en="Credit cycles and market plumbing decide how shock-prone the system is.",
            de="Kreditzyklen und Marktinfrastruktur bestimmen die Schockanfälligkeit.",
        ),
        left_label=Localized(
            en="Stable credit cycle; orderly markets",
            de="Stabiler Kreditzyklus; geordnete Märkte",
        ),
        right_label=Localized(
            en="High bubble/crash risk; repeated liquidity shocks",
            de="Hohes Blasen-/Crashrisiko; wiederholte Liquiditätsschocks",
        ),
        summary_label=Localized(en="Financial risk", de="Finanzrisiko"),
    ),
    AxisDefinition(
        id="socialCohesion",
        field_name="social_cohesion",
        min=0,
        max=100,
        step=1,
        label=Localized(
            en="Social cohesion",
            de="Sozialer Zusammenhalt",
        ),
        title=Localized(
            en="Work & Distribution Order / Social Cohesion",
            de="Arbeits- & Verteilungsordnung / Sozialer Frieden",
        ),
        description=Localized(
            en="Institutions can keep societies inclusive or slide toward polarization.",
            de="Institutionen können inklusiv bleiben oder in Polarisierung abrutschen.",
        ),
        left_label=Localized(
            en="High cohesion; inclusive institutions; mobility improves",
            de="Hoher Zusammenhalt; inklusive Institutionen; Aufstiegschancen steigen",
        ),
        right_label=Localized(
            en="Polarization; inequality rises; unrest more likely",
            de="Polarisierung; Ungleichheit steigt; Unruhen wahrscheinlicher",
        ),
        summary_label=Localized(en="Social cohesion", de="Zusammenhalt"),
    ),
    AxisDefinition(
        id="geopolitics",
        field_name="geopolitics",
        min=0,
        max=100,
        step=1,
        label=Localized(
            en="Geopolitical fragmentation",
            de="Geopolitische Fragmentierung",
        ),
        title=Localized(
            en="Geo-economics & Security",
            de="Geoökonomik & Sicherheit",
        ),
        description=Localized(
            en="Trade rules and security dynamics set the tone for supply chains.",
            de="Handelsregeln und Sicherheitslage prägen Lieferketten.",
        ),
        left_label=Localized(
            en="Cooperative blocs; predictable trade rules",
            de="Kooperative Blöcke; verlässliche Handelsregeln",
        ),
        right_label=Localized(
            en="Hard blocs; sanctions/war risk; costly supply chains",
            de="Harte Blöcke; Sanktions-/Kriegsrisiko; teure Lieferketten",
        ),
        summary_label=Localized(en="Geopolitics", de="Geopolitik"),
    ),
    AxisDefinition(
        id="governanceInfo",
        field_name="governance_info",
        min=0,
        max=100,
        step=1,
        label=Localized(
            en="Governance & information integrity",
            de="Governance & Informationsintegrität",
        ),
        title=Localized(
            en="State Capacity & Information Order",
            de="Staatsfähigkeit & Informationsordnung",
        ),
        description=Localized(
            en="Trust, cyber resilience, and policy capacity determine coordination.",
            de="Vertrauen, Cyber-Resilienz und politische Handlungsfähigkeit bestimmen Koordination.",
        ),
        left_label=Localized(
            en="High trust; effective state; resilient info ecosystem",
            de="Hohes Vertrauen; effektiver Staat; resilienter Info-Ökosystem",
        ),
        right_label=Localized(
            en="Low trust; disinfo/cyber shocks; policy paralysis",
            de="Niedriges Vertrauen; Desinfo-/Cyberschocks; politische Lähmung",
        ),
        summary_label=Localized(en="Governance/info", de="Governance/Info"),
    ),
    AxisDefinition(
        id="techDiffusion",
        field_name="tech_diffusion",
        min=0,
        max=100,
        step=1,
        label=Localized(
            en="Tech diffusion breadth",
            de="Breite der Technologie-Diffusion",
        ),
        title=Localized(
            en="Technology Diffusion & Productivity",
            de="Technologie-Diffusion & Produktivität",
        ),
        description=Localized(
            en="How broadly technology spreads shapes productivity and inclusion.",
            de="Wie breit Technologie wirkt, prägt Produktivität und Teilhabe.",
        ),
        left_label=Localized(
            en="Broad diffusion; productivity gains widely shared",
            de="Breite Diffusion; Produktivitätsgewinne breit geteilt",
        ),
        right_label=Localized(
            en="Narrow diffusion; winner-takes-most; weak spillovers",
            de="Schmale Diffusion; Winner-takes-most; schwache Spillovers",
        ),
        summary_label=Localized(en="Tech diffusion", de="Tech-Diffusion"),
    ),
)

DEFAULT_SCENARIO = {
    "climateC": 2.2,
    "workforcePressure": 45,
    "financialRisk": 40,
    "socialCohesion": 55,
    "geopolitics": 45,
    "governanceInfo": 50,
    "techDiffusion": 60,
    "language": DEFAULT_LANGUAGE,
    "provider": DEFAULT_PROVIDER,
}


def get_axis(axis_id: str) -> Optional[AxisDefinition]:
    """
    Look up an axis by wire identifier or attribute name.

    Args:
        axis_id: Axis identifier such as ``climateC`` or ``climate_c``

    Returns:
        The matching AxisDefinition, or None if there is no such axis
    """
    for axis in AXES:
        if axis_id in (axis.id, axis.field_name):
            return axis
    return None


def get_axis_ids() -> List[str]:
    """Get the wire identifiers of all axes in display order."""
    return [axis.id for axis in AXES]


def axis_decimals(axis: AxisDefinition) -> int:
    """Display precision for an axis: one decimal for fractional steps."""
    return 1 if axis.step < 1 else 0


def format_axis_value(axis: AxisDefinition, value: float) -> str:
    """
    Render an axis value at the axis' display precision.

    Rounds the exact binary value, with exact ties going up, the way
    JavaScript's ``toFixed`` does: 2.15 (stored as 2.1499...) renders as
    "2.1", while 44.5 on an integer axis renders as "45".
    """
    quantum = Decimal(1).scaleb(-axis_decimals(axis))
    return str(Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP))
