from __future__ import annotations

import json

from config import Config
from fsa_engine.domain.models.financials import CompanyInfo, FinancialStatement
from fsa_engine.domain.registry.base import Tier
from fsa_engine.workflows.graph import AnalysisWorkflow


def make_config(tmp_path, **overrides) -> Config:
    values = {
        "database_path": tmp_path / "fsa.db",
        "output_dir": tmp_path / "reports",
        "use_benchmark_cache": False,
    }
    values.update(overrides)
    return Config(**values)


def make_statement(year: int, scale: float = 1.0) -> FinancialStatement:
    return FinancialStatement.from_dict(
        {
            "year": year,
            "balanceSheet": {
                "cash": 200.0 * scale,
                "accountsReceivable": 300.0 * scale,
                "inventory": 350.0 * scale,
                "shortTermInvestments": 45.0 * scale,
                "totalCurrentAssets": 895.0 * scale,
                "propertyPlantEquipment": 1105.0 * scale,
                "totalNonCurrentAssets": 1105.0 * scale,
                "totalAssets": 2000.0 * scale,
                "accountsPayable": 150.0 * scale,
                "shortTermDebt": 100.0 * scale,
                "totalCurrentLiabilities": 325.0 * scale,
                "longTermDebt": 475.0 * scale,
                "totalLiabilities": 800.0 * scale,
                "retainedEarnings": 700.0 * scale,
                "totalEquity": 1200.0 * scale,
            },
            "incomeStatement": {
                "revenue": 1800.0 * scale,
                "costOfGoodsSold": 1080.0 * scale,
                "grossProfit": 720.0 * scale,
                "operatingIncome": 360.0 * scale,
                "interestExpense": 30.0 * scale,
                "netIncome": 247.5 * scale,
                "sharesOutstanding": 100.0,
            },
            "cashFlowStatement": {
                "netCashFromOperations": 300.0 * scale,
                "capitalExpenditures": -90.0 * scale,
            },
        }
    )


def make_company(**overrides) -> CompanyInfo:
    values = {"name": "Test Co", "sector": "retail", "years_analyzed": 2}
    values.update(overrides)
    return CompanyInfo(**values)


def test_stage_order():
    workflow = AnalysisWorkflow(config=Config(use_benchmark_cache=False))

    keys = [line.split(":", 1)[0] for line in workflow.describe_stages()]
    assert keys == [
        "validate_input",
        "resolve_benchmarks",
        "classical",
        "intermediate",
        "advanced",
        "executive_summary",
        "persist_run",
    ]
    assert workflow.context.repository is None
    assert workflow.context.http_provider is None
    workflow.close()


def test_workflow_produces_report(tmp_path):
    workflow = AnalysisWorkflow(config=make_config(tmp_path))
    statements = [make_statement(2023), make_statement(2022, 0.9)]

    state = workflow.run(statements, make_company(), categories=["liquidity", "structural"], analysis_date="2024-01-01")

    report = state["report"]
    assert report is not None
    assert [s.year for s in state["statements"]] == [2022, 2023]
    assert state["stage_order"][0] == "validate_input"
    assert set(state["results"]) == {tier.value for tier in Tier}
    assert state["results"]["intermediate"] == []
    assert report.get("horizontal_analysis") is not None
    assert report.get("current_ratio").rating == "excellent"
    assert report.executive_summary.analysis_date == "2024-01-01"
    assert state.get("run_id") is None

    direct = workflow.context.engine.run(
        statements, make_company(), categories=["liquidity", "structural"], analysis_date="2024-01-01"
    )
    assert report.to_dict() == direct.to_dict()
    workflow.close()


def test_workflow_records_run_when_enabled(tmp_path):
    workflow = AnalysisWorkflow(config=make_config(tmp_path, persist_runs=True))

    state = workflow.run([make_statement(2023)], make_company(years_analyzed=1), ids=["current_ratio"])

    assert isinstance(state["run_id"], int)
    runs = workflow.context.repository.fetch_runs()
    assert runs[0]["company"] == "Test Co"
    assert runs[0]["total_analyses"] == 1
    workflow.close()


def test_workflow_reports_input_problems(tmp_path):
    workflow = AnalysisWorkflow(config=make_config(tmp_path))

    empty = workflow.run([], make_company())
    assert empty.get("report") is None
    assert any("at least one financial statement" in issue for issue in empty["errors"])

    unknown = workflow.run([make_statement(2023)], make_company(), ids=["no_such_analysis"])
    assert unknown.get("report") is None
    assert any("no_such_analysis" in issue for issue in unknown["errors"])

    duplicated = workflow.run([make_statement(2023), make_statement(2023)], make_company(), ids=["current_ratio"])
    assert any("duplicate statement years" in issue for issue in duplicated["errors"])
    workflow.close()


def test_cancelled_workflow_has_no_report(tmp_path):
    workflow = AnalysisWorkflow(config=make_config(tmp_path))
    workflow.cancel()

    state = workflow.run([make_statement(2023)], make_company(), ids=["current_ratio"])

    assert state.get("report") is None
    assert any("cancelled" in issue for issue in state["errors"])
    workflow.close()


def test_persist_state_writes_json(tmp_path):
    workflow = AnalysisWorkflow(config=make_config(tmp_path))
    state = workflow.run([make_statement(2023)], make_company(), ids=["current_ratio"], analysis_date="2024-01-01")
    target = tmp_path / "state" / "snapshot.json"

    workflow.persist_state(state, target)

    snapshot = json.loads(target.read_text(encoding="utf-8"))
    assert "history" not in snapshot
    assert snapshot["definitions"] == ["current_ratio"]
    assert snapshot["report"]["executiveSummary"]["analysisDate"] == "2024-01-01"
    workflow.close()


def test_cancellation_does_not_outlive_its_run(tmp_path):
    workflow = AnalysisWorkflow(config=make_config(tmp_path))
    workflow.cancel()
    cancelled = workflow.run([make_statement(2023)], make_company(), ids=["current_ratio"])

    state = workflow.run([make_statement(2023)], make_company(), ids=["current_ratio"])

    assert cancelled.get("report") is None
    assert not workflow.context.cancel_event.is_set()
    assert state["report"] is not None
    assert [item.id for item in state["report"].analyses] == ["current_ratio"]
    workflow.close()
