from __future__ import annotations

from fsa_engine.domain.models.financials import CompanyInfo, FinancialStatement
from fsa_engine.domain.services.engine import AnalysisEngine
from fsa_engine.infrastructure.db.sqlite import SQLiteRepository


def make_repository(tmp_path) -> SQLiteRepository:
    return SQLiteRepository(database_uri=f"sqlite:///{tmp_path / 'fsa.db'}")


def make_report(name: str = "Test Co"):
    statement = FinancialStatement.from_dict(
        {
            "year": 2023,
            "balanceSheet": {"totalCurrentAssets": 895.0, "totalCurrentLiabilities": 325.0, "cash": 100.0},
        }
    )
    company = CompanyInfo(name=name, sector="retail")
    return AnalysisEngine().run(
        [statement], company, ids=["current_ratio", "cash_ratio"], analysis_date="2024-01-01"
    )


def test_benchmark_upsert_round_trip(tmp_path):
    repo = make_repository(tmp_path)

    assert repo.fetch_benchmarks("retail") == {}
    assert repo.upsert_benchmarks("retail", {"current_ratio": 1.7, "quick_ratio": 0.8}) == 2
    assert repo.upsert_benchmarks("retail", {"current_ratio": 1.9}, source="survey") == 1
    assert repo.upsert_benchmarks("retail", {}) == 0

    assert repo.fetch_benchmarks("retail") == {"current_ratio": 1.9, "quick_ratio": 0.8}
    assert repo.fetch_benchmarks("energy") == {}


def test_record_and_list_runs(tmp_path):
    repo = make_repository(tmp_path)
    first = repo.record_run(make_report("Alpha"))
    second = repo.record_run(make_report("Beta"))

    assert second > first
    runs = repo.fetch_runs()
    assert [run["company"] for run in runs] == ["Beta", "Alpha"]
    assert runs[0]["total_analyses"] == 2
    assert runs[0]["sector"] == "retail"
    assert "payload" not in runs[0]

    assert [run["id"] for run in repo.fetch_runs(company="Alpha")] == [first]
    assert len(repo.fetch_runs(limit=1)) == 1


def test_run_payload_is_the_report_json(tmp_path):
    repo = make_repository(tmp_path)
    report = make_report()
    run_id = repo.record_run(report)

    payload = repo.fetch_run_payload(run_id)
    assert payload["executiveSummary"]["companyInfo"]["name"] == "Test Co"
    assert [item["id"] for item in payload["analyses"]] == ["current_ratio", "cash_ratio"]
    assert repo.fetch_run_payload(run_id + 100) is None
