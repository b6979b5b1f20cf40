"""Roll-up of per-analysis results into one executive summary."""
from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence, Tuple

from fsa_engine.domain.models.financials import CompanyInfo
from fsa_engine.domain.models.results import (
    AnalysisResult,
    ExecutiveSummary,
    OverallResults,
    StrategicRecommendations,
    SwotAnalysis,
)
from fsa_engine.i18n.messages import MessageCatalog

SWOT_CAP = 10
RISK_CAP = 15
FORECAST_CAP = 15


def _dedupe(items: Iterable[str], cap: int) -> Tuple[str, ...]:
    """Exact-text dedupe keeping first-seen order, truncated to ``cap``."""
    seen: List[str] = []
    for item in items:
        if item not in seen:
            seen.append(item)
            if len(seen) == cap:
                break
    return tuple(seen)


class SummaryAggregator:
    """Deterministic aggregation; the same inputs always produce the same summary."""

    def __init__(self, swot_cap: int = SWOT_CAP, risk_cap: int = RISK_CAP, forecast_cap: int = FORECAST_CAP) -> None:
        self.swot_cap = swot_cap
        self.risk_cap = risk_cap
        self.forecast_cap = forecast_cap

    def aggregate(
        self,
        results: Sequence[AnalysisResult],
        company_info: CompanyInfo,
        analysis_date: str,
    ) -> ExecutiveSummary:
        catalog = MessageCatalog(company_info.language)
        ratings = Counter(r.rating for r in results)
        statuses = Counter(r.status for r in results)
        overall = OverallResults(
            total_analyses=len(results),
            excellent_count=ratings["excellent"],
            very_good_count=ratings["very_good"],
            good_count=ratings["good"],
            acceptable_count=ratings["acceptable"],
            poor_count=ratings["poor"],
            not_applicable_count=statuses["not_applicable"],
            error_count=statuses["error"],
        )
        swot = SwotAnalysis(
            strengths=_dedupe((s for r in results for s in r.swot_analysis.strengths), self.swot_cap),
            weaknesses=_dedupe((s for r in results for s in r.swot_analysis.weaknesses), self.swot_cap),
            opportunities=_dedupe((s for r in results for s in r.swot_analysis.opportunities), self.swot_cap),
            threats=_dedupe((s for r in results for s in r.swot_analysis.threats), self.swot_cap),
        )
        return ExecutiveSummary(
            company_info=company_info,
            analysis_date=analysis_date,
            analysis_type=catalog.text("summary.analysis_type", count=len(results)),
            overall_results=overall,
            swot_analysis=swot,
            risks_assessment=_dedupe((risk for r in results for risk in r.risks), self.risk_cap),
            forecasts=_dedupe((f for r in results for f in r.forecasts), self.forecast_cap),
            strategic_recommendations=StrategicRecommendations.from_mapping(catalog.strategy("summary")),
        )
