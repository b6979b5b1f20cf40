from __future__ import annotations

from typing import Sequence

from fsa_engine.domain.models.financials import CompanyInfo
from fsa_engine.domain.models.results import AnalysisResult, SwotAnalysis
from fsa_engine.domain.services.summary import FORECAST_CAP, RISK_CAP, SWOT_CAP, SummaryAggregator


def make_result(
    analysis_id: str,
    *,
    rating: str = "good",
    status: str = "ok",
    strengths: Sequence[str] = (),
    weaknesses: Sequence[str] = (),
    risks: Sequence[str] = (),
    forecasts: Sequence[str] = (),
) -> AnalysisResult:
    return AnalysisResult(
        id=analysis_id,
        name=analysis_id.replace("_", " ").title(),
        tier="classical",
        category="liquidity",
        subcategory="Liquidity Ratios",
        definition="",
        what_it_measures="",
        meaning="",
        benefits="",
        calculation_method="",
        result=1.0 if status == "ok" else "N/A",
        display_value="1.00" if status == "ok" else "N/A",
        unit="ratio",
        interpretation="",
        industry_average=1.0,
        comparison_with_industry="Similar to industry average",
        competitive_position="Average - Second Quartile",
        rating=rating,
        recommendation="",
        risks=tuple(risks),
        forecasts=tuple(forecasts),
        swot_analysis=SwotAnalysis(strengths=tuple(strengths), weaknesses=tuple(weaknesses)),
        status=status,
    )


def make_company() -> CompanyInfo:
    return CompanyInfo(name="Test Co", sector="retail")


def test_rating_and_status_tally():
    results = [
        make_result("a", rating="excellent"),
        make_result("b", rating="excellent"),
        make_result("c", rating="very_good"),
        make_result("d", rating="poor"),
        make_result("e", rating="acceptable", status="not_applicable"),
        make_result("f", rating="acceptable", status="error"),
    ]
    summary = SummaryAggregator().aggregate(results, make_company(), "2024-01-01")
    totals = summary.overall_results

    assert totals.total_analyses == 6
    assert totals.excellent_count == 2
    assert totals.very_good_count == 1
    assert totals.good_count == 0
    assert totals.acceptable_count == 2
    assert totals.poor_count == 1
    assert totals.not_applicable_count == 1
    assert totals.error_count == 1
    assert summary.analysis_type == "Comprehensive analysis - 6 financial analysis types"


def test_duplicates_collapse_in_first_seen_order():
    results = [
        make_result("a", weaknesses=["Low equity ratio"]),
        make_result("b", weaknesses=["Margin pressures", "Low equity ratio"]),
        make_result("c", weaknesses=["Low equity ratio"]),
    ]
    summary = SummaryAggregator().aggregate(results, make_company(), "2024-01-01")

    assert summary.swot_analysis.weaknesses == ("Low equity ratio", "Margin pressures")


def test_lists_are_capped():
    results = [
        make_result(
            f"analysis_{i}",
            strengths=[f"strength {i}"],
            risks=[f"risk {i}"],
            forecasts=[f"forecast {i}"],
        )
        for i in range(30)
    ]
    summary = SummaryAggregator().aggregate(results, make_company(), "2024-01-01")

    assert len(summary.swot_analysis.strengths) == SWOT_CAP
    assert summary.swot_analysis.strengths[0] == "strength 0"
    assert len(summary.risks_assessment) == RISK_CAP
    assert len(summary.forecasts) == FORECAST_CAP
    assert summary.forecasts[-1] == f"forecast {FORECAST_CAP - 1}"


def test_custom_caps():
    results = [make_result(f"analysis_{i}", risks=[f"risk {i}"]) for i in range(5)]
    summary = SummaryAggregator(risk_cap=2).aggregate(results, make_company(), "2024-01-01")

    assert summary.risks_assessment == ("risk 0", "risk 1")


def test_aggregation_is_idempotent_and_order_insensitive():
    results = [
        make_result("a", rating="excellent", strengths=["Strong gross profit margin"], risks=["Competitive risks"]),
        make_result("b", rating="poor", weaknesses=["Low equity ratio"], risks=["Competitive risks"]),
        make_result("c", weaknesses=["Low equity ratio"], forecasts=["Expected continued growth"]),
    ]
    aggregator = SummaryAggregator()

    first = aggregator.aggregate(results, make_company(), "2024-01-01")
    second = aggregator.aggregate(results, make_company(), "2024-01-01")
    reordered = aggregator.aggregate(list(reversed(results)), make_company(), "2024-01-01")

    assert first == second
    assert first.to_dict() == second.to_dict()
    assert first.overall_results == reordered.overall_results
    assert set(first.swot_analysis.weaknesses) == set(reordered.swot_analysis.weaknesses)
    assert set(first.risks_assessment) == set(reordered.risks_assessment)


def test_summary_serializes_with_camel_case_keys():
    summary = SummaryAggregator().aggregate([make_result("a")], make_company(), "2024-01-01")
    payload = summary.to_dict()

    assert payload["companyInfo"]["name"] == "Test Co"
    assert payload["analysisDate"] == "2024-01-01"
    assert payload["overallResults"]["totalAnalyses"] == 1
    assert set(payload["strategicRecommendations"]) == {
        "corporatePerformance",
        "financingDecisions",
        "investmentDecisions",
        "valuation",
        "general",
    }
    assert all(payload["strategicRecommendations"].values())
