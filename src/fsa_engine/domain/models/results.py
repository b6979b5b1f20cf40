"""Result records produced by the engine and the executive summary."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from fsa_engine.domain.models.financials import CompanyInfo

NOT_APPLICABLE = "N/A"

RATINGS = ("excellent", "very_good", "good", "acceptable", "poor")
STATUSES = ("ok", "not_applicable", "error")


def _float_or_none(value: float) -> Optional[float]:
    # NaN and infinities are not valid JSON.
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class ChartData:
    type: str
    title: str
    data: Tuple[Dict[str, Any], ...] = ()
    x_axis: Optional[str] = None
    y_axis: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        rows = [
            {key: _float_or_none(value) if isinstance(value, float) else value for key, value in row.items()}
            for row in self.data
        ]
        payload: Dict[str, Any] = {"type": self.type, "title": self.title, "data": rows}
        if self.x_axis is not None:
            payload["xAxis"] = self.x_axis
        if self.y_axis is not None:
            payload["yAxis"] = self.y_axis
        return payload


@dataclass(frozen=True)
class SwotAnalysis:
    strengths: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()
    opportunities: Tuple[str, ...] = ()
    threats: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "opportunities": list(self.opportunities),
            "threats": list(self.threats),
        }


@dataclass(frozen=True)
class StrategicRecommendations:
    corporate_performance: Tuple[str, ...] = ()
    financing_decisions: Tuple[str, ...] = ()
    investment_decisions: Tuple[str, ...] = ()
    valuation: Tuple[str, ...] = ()
    general: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, sections: Mapping[str, Union[str, Sequence[str]]]) -> "StrategicRecommendations":
        def _items(value: Union[str, Sequence[str], None]) -> Tuple[str, ...]:
            if value is None:
                return ()
            return (value,) if isinstance(value, str) else tuple(value)

        return cls(
            corporate_performance=_items(sections.get("corporate_performance")),
            financing_decisions=_items(sections.get("financing_decisions")),
            investment_decisions=_items(sections.get("investment_decisions")),
            valuation=_items(sections.get("valuation")),
            general=_items(sections.get("general")),
        )

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "corporatePerformance": list(self.corporate_performance),
            "financingDecisions": list(self.financing_decisions),
            "investmentDecisions": list(self.investment_decisions),
            "valuation": list(self.valuation),
            "general": list(self.general),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """One annotated analysis outcome."""

    id: str
    name: str
    tier: str
    category: str
    subcategory: str
    definition: str
    what_it_measures: str
    meaning: str
    benefits: str
    calculation_method: str
    result: Union[float, str]
    display_value: str
    unit: str
    interpretation: str
    industry_average: float
    comparison_with_industry: str
    competitive_position: str
    rating: str
    recommendation: str
    charts: Tuple[ChartData, ...] = ()
    risks: Tuple[str, ...] = ()
    forecasts: Tuple[str, ...] = ()
    swot_analysis: SwotAnalysis = field(default_factory=SwotAnalysis)
    strategic_recommendations: StrategicRecommendations = field(default_factory=StrategicRecommendations)
    status: str = "ok"
    benchmark_source: str = "static"
    benchmark_fallback: bool = False
    reference: bool = False
    error: Optional[str] = None
    details: Mapping[str, float] = field(default_factory=dict)

    @property
    def is_applicable(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "tier": self.tier,
            "category": self.category,
            "subcategory": self.subcategory,
            "definition": self.definition,
            "whatItMeasures": self.what_it_measures,
            "meaning": self.meaning,
            "benefits": self.benefits,
            "calculationMethod": self.calculation_method,
            "result": self.result,
            "displayValue": self.display_value,
            "unit": self.unit,
            "interpretation": self.interpretation,
            "industryAverage": _float_or_none(self.industry_average),
            "comparisonWithIndustry": self.comparison_with_industry,
            "competitivePosition": self.competitive_position,
            "rating": self.rating,
            "recommendation": self.recommendation,
            "charts": [chart.to_dict() for chart in self.charts],
            "risks": list(self.risks),
            "forecasts": list(self.forecasts),
            "swotAnalysis": self.swot_analysis.to_dict(),
            "strategicRecommendations": self.strategic_recommendations.to_dict(),
            "status": self.status,
            "benchmarkSource": self.benchmark_source,
            "benchmarkFallback": self.benchmark_fallback,
            "reference": self.reference,
            "error": self.error,
            "details": {key: _float_or_none(float(value)) for key, value in self.details.items()},
        }


@dataclass(frozen=True)
class OverallResults:
    total_analyses: int = 0
    excellent_count: int = 0
    very_good_count: int = 0
    good_count: int = 0
    acceptable_count: int = 0
    poor_count: int = 0
    not_applicable_count: int = 0
    error_count: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalAnalyses": self.total_analyses,
            "excellentCount": self.excellent_count,
            "veryGoodCount": self.very_good_count,
            "goodCount": self.good_count,
            "acceptableCount": self.acceptable_count,
            "poorCount": self.poor_count,
            "notApplicableCount": self.not_applicable_count,
            "errorCount": self.error_count,
        }


@dataclass(frozen=True)
class ExecutiveSummary:
    company_info: CompanyInfo
    analysis_date: str
    analysis_type: str
    overall_results: OverallResults
    swot_analysis: SwotAnalysis
    risks_assessment: Tuple[str, ...]
    forecasts: Tuple[str, ...]
    strategic_recommendations: StrategicRecommendations

    def to_dict(self) -> Dict[str, Any]:
        return {
            "companyInfo": self.company_info.to_dict(),
            "analysisDate": self.analysis_date,
            "analysisType": self.analysis_type,
            "overallResults": self.overall_results.to_dict(),
            "swotAnalysis": self.swot_analysis.to_dict(),
            "risksAssessment": list(self.risks_assessment),
            "forecasts": list(self.forecasts),
            "strategicRecommendations": self.strategic_recommendations.to_dict(),
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Output of one engine run."""

    executive_summary: ExecutiveSummary
    analyses: Tuple[AnalysisResult, ...]

    def __len__(self) -> int:
        return len(self.analyses)

    def get(self, analysis_id: str) -> Optional[AnalysisResult]:
        for result in self.analyses:
            if result.id == analysis_id:
                return result
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "executiveSummary": self.executive_summary.to_dict(),
            "analyses": [result.to_dict() for result in self.analyses],
        }
