from __future__ import annotations

import threading
from typing import Any, Dict

import pytest

from fsa_engine.domain.errors import (
    AnalysisCancelled,
    BenchmarkUnavailableError,
    EmptyStatementsError,
    UnknownAnalysisError,
)
from fsa_engine.domain.models.financials import CompanyInfo, FinancialStatement
from fsa_engine.domain.registry.base import AnalysisRegistry, Tier, define
from fsa_engine.domain.registry.catalogue import build_default_registry
from fsa_engine.domain.services.engine import AnalysisEngine
from fsa_engine.i18n.analysis_text import analysis_text
from fsa_engine.infrastructure.benchmarks import StaticBenchmarkProvider

BASE_FIGURES: Dict[str, Dict[str, float]] = {
    "balanceSheet": {
        "cash": 200_000_000,
        "accountsReceivable": 300_000_000,
        "inventory": 350_000_000,
        "shortTermInvestments": 45_000_000,
        "totalCurrentAssets": 895_000_000,
        "propertyPlantEquipment": 1_105_000_000,
        "totalNonCurrentAssets": 1_105_000_000,
        "totalAssets": 2_000_000_000,
        "accountsPayable": 150_000_000,
        "shortTermDebt": 100_000_000,
        "accruedLiabilities": 75_000_000,
        "totalCurrentLiabilities": 325_000_000,
        "longTermDebt": 475_000_000,
        "totalNonCurrentLiabilities": 475_000_000,
        "totalLiabilities": 800_000_000,
        "shareCapital": 500_000_000,
        "retainedEarnings": 700_000_000,
        "totalEquity": 1_200_000_000,
    },
    "incomeStatement": {
        "revenue": 1_800_000_000,
        "costOfGoodsSold": 1_080_000_000,
        "grossProfit": 720_000_000,
        "sellingGeneralAdministrative": 300_000_000,
        "depreciationAmortization": 60_000_000,
        "totalOperatingExpenses": 360_000_000,
        "operatingIncome": 360_000_000,
        "interestExpense": 30_000_000,
        "ebit": 360_000_000,
        "ebitda": 420_000_000,
        "earningsBeforeTax": 330_000_000,
        "incomeTaxExpense": 82_500_000,
        "netIncome": 247_500_000,
        "sharesOutstanding": 100_000_000,
        "earningsPerShare": 2.475,
        "dividendsPerShare": 1.0,
    },
    "cashFlowStatement": {
        "netIncome": 247_500_000,
        "depreciationAmortization": 60_000_000,
        "netCashFromOperations": 300_000_000,
        "capitalExpenditures": -90_000_000,
        "netCashFromInvesting": -90_000_000,
        "dividendsPaid": -100_000_000,
        "netCashFromFinancing": -100_000_000,
        "netCashFlow": 110_000_000,
        "freeCashFlow": 210_000_000,
    },
}


def make_statement_dict(year: int = 2023, factor: float = 1.0, **overrides: float) -> Dict[str, Any]:
    document: Dict[str, Any] = {"year": year, "companyName": "Test Co"}
    for section, items in BASE_FIGURES.items():
        values = {key: value * factor for key, value in items.items()}
        for key, value in overrides.items():
            if key in values:
                values[key] = value
        document[section] = values
    return document


def make_statement(year: int = 2023, factor: float = 1.0, **overrides: float) -> FinancialStatement:
    return FinancialStatement.from_dict(make_statement_dict(year, factor, **overrides))


def make_history(periods: int = 3):
    return [make_statement(2023 - offset, factor=1.0 - 0.1 * offset) for offset in reversed(range(periods))]


def make_company(**overrides: Any) -> CompanyInfo:
    values: Dict[str, Any] = {"name": "Test Co", "sector": "", "years_analyzed": 1}
    values.update(overrides)
    return CompanyInfo(**values)


def test_current_ratio_scenario():
    engine = AnalysisEngine()
    report = engine.run([make_statement()], make_company(), ids=["current_ratio"], analysis_date="2024-01-01")

    result = report.get("current_ratio")
    assert result is not None
    assert abs(result.result - 2.7538) < 1e-4
    assert result.display_value == "2.75"
    assert result.industry_average == 2.0
    assert result.comparison_with_industry == "Above industry average by 37.7%"
    assert result.rating == "excellent"
    assert result.competitive_position == "Superior - First Quartile"
    assert result.benchmark_source == "static"
    assert not result.benchmark_fallback
    assert result.charts and result.charts[0].data[0]["value"] == result.result


def test_single_period_skips_multi_period_analyses():
    engine = AnalysisEngine()
    report = engine.run([make_statement()], make_company(), analysis_date="2024-01-01")

    ids = [result.id for result in report.analyses]
    expected = [d.id for d in engine.registry if d.min_history <= 1]
    assert ids == expected
    assert "horizontal_analysis" not in ids
    assert "vertical_analysis" in ids
    assert report.executive_summary.overall_results.total_analyses == len(expected)


def test_every_eligible_definition_appears_once_with_history():
    engine = AnalysisEngine()
    statements = make_history(3)
    report = engine.run(statements, make_company(years_analyzed=3), analysis_date="2024-01-01")

    ids = [result.id for result in report.analyses]
    assert len(ids) == len(set(ids))
    assert ids == [d.id for d in engine.registry if d.min_history <= 3]
    assert "horizontal_analysis" in ids


def test_zero_receivables_yield_not_applicable():
    engine = AnalysisEngine()
    statement = make_statement(accountsReceivable=0)
    report = engine.run(
        [statement], make_company(), ids=["receivables_turnover", "days_in_receivables"], analysis_date="2024-01-01"
    )

    for analysis_id in ("receivables_turnover", "days_in_receivables"):
        result = report.get(analysis_id)
        assert result is not None
        assert result.result == "N/A"
        assert result.display_value == "N/A"
        assert result.status == "not_applicable"
        assert result.rating == "acceptable"
        assert result.comparison_with_industry == "Not applicable"
        assert result.error is None
    assert report.executive_summary.overall_results.not_applicable_count == 2


def test_zero_denominators_never_raise():
    engine = AnalysisEngine()
    empty = FinancialStatement.from_dict({"year": 2023})
    report = engine.run([empty], make_company(), analysis_date="2024-01-01")

    assert len(report) == len([d for d in engine.registry if d.min_history <= 1])
    for result in report.analyses:
        assert result.status in ("ok", "not_applicable", "error")
        if result.status != "ok":
            assert result.result == "N/A"


def test_category_subset_matches_full_run():
    engine = AnalysisEngine()
    statements = make_history(2)
    company = make_company(years_analyzed=2)

    full = engine.run(statements, company, analysis_date="2024-01-01")
    subset = engine.run(statements, company, categories=["liquidity"], analysis_date="2024-01-01")

    assert len(subset) > 0
    assert len(subset) < len(full)
    for result in subset.analyses:
        assert result.category == "liquidity"
        counterpart = full.get(result.id)
        assert counterpart is not None
        assert result.to_dict() == counterpart.to_dict()


def test_runs_are_deterministic():
    engine = AnalysisEngine()
    statements = make_history(3)
    company = make_company(years_analyzed=3)

    first = engine.run(statements, company, analysis_date="2024-01-01").to_dict()
    second = engine.run(statements, company, analysis_date="2024-01-01").to_dict()

    assert first == second


def test_thread_pool_matches_serial_run():
    statements = make_history(3)
    company = make_company(years_analyzed=3)

    serial = AnalysisEngine(max_workers=1).run(statements, company, analysis_date="2024-01-01")
    pooled = AnalysisEngine(max_workers=4).run(statements, company, analysis_date="2024-01-01")

    assert serial.to_dict() == pooled.to_dict()


def test_failing_analysis_is_isolated():
    registry = build_default_registry()

    def explode(_history):
        raise ZeroDivisionError("boom")

    custom = AnalysisRegistry(
        [
            registry.get("current_ratio"),
            define("exploding_ratio", Tier.CLASSICAL, "liquidity", explode, 1.0),
            registry.get("quick_ratio"),
        ]
    )
    provider = StaticBenchmarkProvider(table={"current_ratio": 2.0, "quick_ratio": 1.0, "exploding_ratio": 1.0})
    engine = AnalysisEngine(registry=custom, benchmark_provider=provider)

    report = engine.run([make_statement()], make_company(), analysis_date="2024-01-01")

    assert [r.id for r in report.analyses] == ["current_ratio", "exploding_ratio", "quick_ratio"]
    failed = report.get("exploding_ratio")
    assert failed.status == "error"
    assert failed.result == "N/A"
    assert failed.error.startswith("ZeroDivisionError")
    assert report.get("current_ratio").status == "ok"
    assert report.get("quick_ratio").status == "ok"
    assert report.executive_summary.overall_results.error_count == 1


def test_benchmark_provider_failure_falls_back():
    class FailingProvider:
        def get_benchmark(self, analysis_id: str, sector: str) -> float:
            raise BenchmarkUnavailableError("offline")

    engine = AnalysisEngine(benchmark_provider=FailingProvider())
    report = engine.run([make_statement()], make_company(), ids=["current_ratio"], analysis_date="2024-01-01")

    result = report.get("current_ratio")
    assert result.benchmark_fallback
    assert result.benchmark_source == "category_default"
    assert result.industry_average == 1.5
    assert result.rating == "excellent"


def test_empty_statements_rejected_before_running():
    engine = AnalysisEngine()

    with pytest.raises(EmptyStatementsError):
        engine.run([], make_company())


def test_unknown_selection_rejected():
    engine = AnalysisEngine()

    with pytest.raises(UnknownAnalysisError):
        engine.run([make_statement()], make_company(), ids=["no_such_analysis"])
    with pytest.raises(UnknownAnalysisError):
        engine.run([make_statement()], make_company(), categories=["astrology"])


def test_cancelled_run_raises():
    engine = AnalysisEngine()
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(AnalysisCancelled):
        engine.run([make_statement()], make_company(), ids=["current_ratio"], cancel_event=cancel)


def test_arabic_output():
    engine = AnalysisEngine()
    report = engine.run(
        [make_statement()], make_company(language="ar"), ids=["current_ratio"], analysis_date="2024-01-01"
    )

    result = report.get("current_ratio")
    assert result.name == analysis_text("current_ratio", "ar").name
    assert result.comparison_with_industry == "أعلى من متوسط الصناعة بـ 37.7%"
    assert result.competitive_position == "متفوق - الربع الأول"
    assert report.executive_summary.analysis_type == "تحليل شامل - 1 نوع تحليل مالي"


def test_low_equity_weakness_reported_once():
    engine = AnalysisEngine()
    statements = [
        make_statement(2022, totalEquity=500_000_000, totalLiabilities=1_500_000_000),
        make_statement(2023, totalEquity=500_000_000, totalLiabilities=1_500_000_000),
    ]
    report = engine.run(statements, make_company(years_analyzed=2), analysis_date="2024-01-01")

    weaknesses = report.executive_summary.swot_analysis.weaknesses
    assert weaknesses.count("Low equity ratio") == 1
    assert "Low equity ratio indicates high dependence on debt" in report.executive_summary.risks_assessment


def test_negative_equity_rates_leverage_poor():
    engine = AnalysisEngine()
    statement = make_statement(totalEquity=-200_000_000, totalLiabilities=2_200_000_000)

    report = engine.run(
        [statement], make_company(), ids=["debt_to_equity", "equity_multiplier"], analysis_date="2024-01-01"
    )

    for analysis_id in ("debt_to_equity", "equity_multiplier"):
        result = report.get(analysis_id)
        assert result.result < 0
        assert result.rating == "poor"
        assert result.competitive_position == "Very Weak - Fourth Quartile"


def test_negative_cash_cycle_stays_favourable():
    engine = AnalysisEngine()
    report = engine.run(
        [make_statement(accountsPayable=2_000_000_000)],
        make_company(),
        ids=["cash_conversion_cycle"],
        analysis_date="2024-01-01",
    )

    result = report.get("cash_conversion_cycle")
    assert result.result < 0
    assert result.rating == "excellent"


def test_health_score_survives_extreme_ratios():
    engine = AnalysisEngine()
    statement = make_statement(revenue=1.0, netIncome=-1_000_000_000_000)

    report = engine.run([statement], make_company(), ids=["ai_model"], analysis_date="2024-01-01")

    result = report.get("ai_model")
    assert result.status == "ok"
    assert 0.0 <= result.result < 1.0


def test_regression_model_needs_more_periods_than_coefficients():
    engine = AnalysisEngine()

    short = engine.run(make_history(3), make_company(years_analyzed=3), analysis_date="2024-01-01")
    assert short.get("regression_model") is None

    long = engine.run(
        make_history(5), make_company(years_analyzed=5), ids=["regression_model"], analysis_date="2024-01-01"
    )
    result = long.get("regression_model")
    # Every line item scales with the same factor, so the fit is exact.
    assert result.status == "ok"
    assert abs(result.result - 1.0) < 1e-6
