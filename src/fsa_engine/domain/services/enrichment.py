"""Narrative enrichment of computed analyses.

Each profile (ratio, vertical, horizontal) turns a value, its benchmark and
its rating into interpretation text, risks, forecasts, a SWOT fragment,
strategic recommendations and chart data. Every function here is pure: the
output depends only on its arguments and the message catalogue language.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Tuple

from fsa_engine.domain.models.results import ChartData, StrategicRecommendations, SwotAnalysis
from fsa_engine.domain.registry.base import AnalysisDefinition
from fsa_engine.domain.services import scoring
from fsa_engine.domain.services.calculations import NAN, finite
from fsa_engine.i18n.messages import MESSAGES, MessageCatalog

# Structural thresholds, in percent.
LOW_CURRENT_ASSETS_PCT = 30.0
LOW_EQUITY_PCT = 30.0
LOW_GROSS_MARGIN_PCT = 20.0


@dataclass(frozen=True)
class Enrichment:
    interpretation: str
    recommendation: str
    charts: Tuple[ChartData, ...] = ()
    risks: Tuple[str, ...] = ()
    forecasts: Tuple[str, ...] = ()
    swot: SwotAnalysis = field(default_factory=SwotAnalysis)
    strategic: StrategicRecommendations = field(default_factory=StrategicRecommendations)


def _num(value: float, digits: int = 2) -> str:
    return f"{value:.{digits}f}" if finite(value) else "N/A"


def _detail(details: Mapping[str, float], key: str) -> float:
    value = details.get(key, NAN)
    return float(value) if finite(value) else NAN


def _gt(a: float, b: float) -> bool:
    # NaN never satisfies a threshold.
    return finite(a) and finite(b) and a > b


def _lt(a: float, b: float) -> bool:
    return finite(a) and finite(b) and a < b


# ----------------------------
# Ratio profile
# ----------------------------

def _ratio_profile(
    definition: AnalysisDefinition,
    name: str,
    value: float,
    benchmark: float,
    rating: str,
    details: Mapping[str, float],
    catalog: MessageCatalog,
) -> Enrichment:
    score = scoring.performance(value, benchmark, definition.lower_is_better, definition.negative_favourable)
    difference = scoring.difference_pct(value, benchmark)
    direction = "above" if value >= benchmark else "below"
    outlook = "positive" if score >= 1 else "improve"
    interpretation = catalog.text(
        "ratio.interpretation",
        name=name,
        value=_num(value),
        direction=catalog.text(f"ratio.direction.{direction}"),
        benchmark=_num(benchmark),
        difference=_num(abs(difference), 1),
        outlook=catalog.text(f"ratio.outlook.{outlook}"),
    )

    if rating == "excellent":
        recommendation = catalog.text("ratio.recommendation.excellent", name=name)
    elif rating == "poor":
        recommendation = catalog.text("ratio.recommendation.poor", name=name)
    else:
        recommendation = catalog.text("ratio.recommendation.default", name=name)

    risks: List[str] = []
    if score < 0.8:
        key = f"risk.{definition.category}"
        risks.append(catalog.text(key if key in MESSAGES else "risk.default"))

    forecasts = [catalog.text("ratio.forecast")] if score > 1 else []

    swot = SwotAnalysis(
        strengths=(catalog.text("swot.strength"),) if score >= 1.1 else (),
        weaknesses=(catalog.text("swot.weakness"),) if score < 0.9 else (),
        opportunities=(catalog.text("swot.opportunity"),),
        threats=(catalog.text("swot.threat"),) if score < 0.8 else (),
    )

    chart = ChartData(
        type="bar",
        title=catalog.text("chart.industry_comparison"),
        data=(
            {"name": catalog.text("chart.company"), "value": value},
            {"name": catalog.text("chart.industry_average"), "value": benchmark},
        ),
        y_axis=name,
    )
    return Enrichment(
        interpretation=interpretation,
        recommendation=recommendation,
        charts=(chart,),
        risks=tuple(risks),
        forecasts=tuple(forecasts),
        swot=swot,
        strategic=StrategicRecommendations.from_mapping(catalog.strategy("ratio")),
    )


# ----------------------------
# Vertical profile
# ----------------------------

def _vertical_profile(
    definition: AnalysisDefinition,
    name: str,
    value: float,
    benchmark: float,
    rating: str,
    details: Mapping[str, float],
    catalog: MessageCatalog,
) -> Enrichment:
    gross_margin = value
    current_assets = _detail(details, "current_assets_pct")
    non_current_assets = _detail(details, "non_current_assets_pct")
    equity = _detail(details, "equity_pct")
    cogs = _detail(details, "cogs_pct")
    net_margin = _detail(details, "net_margin_pct")

    interpretation = catalog.text(
        "vertical.interpretation",
        gross_margin=_num(gross_margin),
        benchmark=_num(benchmark),
        comparison=scoring.comparison_text(catalog, value, benchmark),
        current_assets=_num(current_assets),
        equity=_num(equity),
        net_margin=_num(net_margin),
    )

    if rating in ("excellent", "poor"):
        recommendation = catalog.text(f"vertical.recommendation.{rating}")
    else:
        recommendation = catalog.text("vertical.recommendation.default")

    risks: List[str] = []
    if _lt(current_assets, LOW_CURRENT_ASSETS_PCT):
        risks.append(catalog.text("vertical.risk.current_assets"))
    if _lt(equity, LOW_EQUITY_PCT):
        risks.append(catalog.text("vertical.risk.equity"))
    if _lt(gross_margin, LOW_GROSS_MARGIN_PCT):
        risks.append(catalog.text("vertical.risk.gross_margin"))

    forecasts = [catalog.text("vertical.forecast")] if _gt(gross_margin, benchmark) else []

    swot = SwotAnalysis(
        strengths=(catalog.text("vertical.swot.strength"),) if _gt(gross_margin, benchmark) else (),
        weaknesses=(catalog.text("vertical.swot.weakness"),) if _lt(equity, LOW_EQUITY_PCT) else (),
        opportunities=(catalog.text("vertical.swot.opportunity"),),
        threats=(catalog.text("vertical.swot.threat"),) if _lt(gross_margin, LOW_GROSS_MARGIN_PCT) else (),
    )

    charts = (
        ChartData(
            type="pie",
            title=catalog.text("chart.asset_structure"),
            data=(
                {"name": catalog.text("chart.current_assets"), "value": current_assets},
                {"name": catalog.text("chart.non_current_assets"), "value": non_current_assets},
            ),
        ),
        ChartData(
            type="bar",
            title=catalog.text("chart.income_statement"),
            data=(
                {"name": catalog.text("chart.cogs"), "value": cogs},
                {"name": catalog.text("chart.gross_margin"), "value": gross_margin},
            ),
        ),
    )
    return Enrichment(
        interpretation=interpretation,
        recommendation=recommendation,
        charts=charts,
        risks=tuple(risks),
        forecasts=tuple(forecasts),
        swot=swot,
        strategic=StrategicRecommendations.from_mapping(catalog.strategy("vertical")),
    )


# ----------------------------
# Horizontal profile
# ----------------------------

def _horizontal_profile(
    definition: AnalysisDefinition,
    name: str,
    value: float,
    benchmark: float,
    rating: str,
    details: Mapping[str, float],
    catalog: MessageCatalog,
) -> Enrichment:
    revenue = value
    net_income = _detail(details, "net_income_growth")
    total_assets = _detail(details, "total_assets_growth")
    equity = _detail(details, "equity_growth")
    cash_flow = _detail(details, "operating_cash_flow_growth")

    cash_direction = "decreased" if _lt(cash_flow, 0.0) else "increased"
    interpretation = catalog.text(
        "horizontal.interpretation",
        revenue=_num(revenue),
        net_income=_num(net_income),
        total_assets=_num(total_assets),
        equity=_num(equity),
        cash_direction=catalog.text(f"horizontal.cash.{cash_direction}"),
        cash_flow=_num(abs(cash_flow)),
        comparison=scoring.comparison_text(catalog, value, benchmark),
    )

    efficient = _gt(revenue, 0.0) and _gt(net_income, revenue)
    if efficient:
        recommendation = catalog.text("horizontal.recommendation.efficient")
    elif _lt(revenue, 0.0):
        recommendation = catalog.text("horizontal.recommendation.decline")
    else:
        recommendation = catalog.text("horizontal.recommendation.default")

    risks: List[str] = []
    if _lt(revenue, 0.0):
        risks.append(catalog.text("horizontal.risk.revenue"))
    if _lt(net_income, revenue):
        risks.append(catalog.text("horizontal.risk.conversion"))
    if _lt(cash_flow, 0.0):
        risks.append(catalog.text("horizontal.risk.cash_flow"))

    forecasts = [catalog.text("horizontal.forecast")] if efficient else []

    swot = SwotAnalysis(
        strengths=(catalog.text("horizontal.swot.strength"),) if _gt(revenue, 0.0) else (),
        weaknesses=(catalog.text("horizontal.swot.weakness"),) if _lt(net_income, 0.0) else (),
        opportunities=(catalog.text("horizontal.swot.opportunity"),),
        threats=(catalog.text("horizontal.swot.threat"),) if _lt(revenue, benchmark) else (),
    )

    chart = ChartData(
        type="bar",
        title=catalog.text("chart.growth_rates"),
        data=(
            {"name": catalog.text("chart.revenue"), "value": revenue},
            {"name": catalog.text("chart.net_income"), "value": net_income},
            {"name": catalog.text("chart.total_assets"), "value": total_assets},
            {"name": catalog.text("chart.equity"), "value": equity},
        ),
    )
    return Enrichment(
        interpretation=interpretation,
        recommendation=recommendation,
        charts=(chart,),
        risks=tuple(risks),
        forecasts=tuple(forecasts),
        swot=swot,
        strategic=StrategicRecommendations.from_mapping(catalog.strategy("horizontal")),
    )


ProfileFn = Callable[
    [AnalysisDefinition, str, float, float, str, Mapping[str, float], MessageCatalog], Enrichment
]

PROFILES: Dict[str, ProfileFn] = {
    "ratio": _ratio_profile,
    "vertical": _vertical_profile,
    "horizontal": _horizontal_profile,
}


def enrich(
    definition: AnalysisDefinition,
    name: str,
    value: float,
    benchmark: float,
    rating: str,
    details: Mapping[str, float],
    catalog: MessageCatalog,
) -> Enrichment:
    """Narrative fields for a computed, finite value."""
    profile = PROFILES[definition.profile]
    return profile(definition, name, value, benchmark, rating, details, catalog)


def not_applicable(name: str, catalog: MessageCatalog) -> Enrichment:
    return Enrichment(
        interpretation=catalog.text("na.interpretation", name=name),
        recommendation=catalog.text("na.recommendation", name=name),
    )


def failure(name: str, error: str, catalog: MessageCatalog) -> Enrichment:
    return Enrichment(
        interpretation=catalog.text("error.interpretation", name=name, error=error),
        recommendation=catalog.text("na.recommendation", name=name),
    )
