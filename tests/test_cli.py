from __future__ import annotations

import json

from typer.testing import CliRunner

from fsa_engine.cli.commands import _slug, app
from fsa_engine.infrastructure.db.sqlite import SQLiteRepository

runner = CliRunner()


def make_env(monkeypatch, tmp_path, **extra):
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "fsa.db"))
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "reports"))
    monkeypatch.setenv("BENCHMARK_CACHE", "0")
    monkeypatch.setenv("PERSIST_RUNS", "0")
    monkeypatch.delenv("BENCHMARK_URL", raising=False)
    monkeypatch.delenv("ANALYSIS_LANGUAGE", raising=False)
    for key, value in extra.items():
        monkeypatch.setenv(key, value)


def make_input(tmp_path, name: str = "Test Co"):
    document = {
        "company": {"name": name, "sector": "retail"},
        "statements": [
            {
                "year": 2023,
                "balanceSheet": {
                    "cash": 200.0,
                    "accountsReceivable": 300.0,
                    "inventory": 350.0,
                    "totalCurrentAssets": 895.0,
                    "totalAssets": 2000.0,
                    "totalCurrentLiabilities": 325.0,
                    "totalLiabilities": 800.0,
                    "totalEquity": 1200.0,
                },
                "incomeStatement": {"revenue": 1800.0, "costOfGoodsSold": 1080.0, "netIncome": 247.5},
                "cashFlowStatement": {"netCashFromOperations": 300.0},
            }
        ],
    }
    path = tmp_path / "input.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_analyze_writes_report(monkeypatch, tmp_path):
    make_env(monkeypatch, tmp_path)
    source = make_input(tmp_path)
    target = tmp_path / "out" / "report.json"

    result = runner.invoke(app, ["analyze", str(source), "--category", "liquidity", "--output", str(target)])

    assert result.exit_code == 0, result.output
    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["executiveSummary"]["companyInfo"]["name"] == "Test Co"
    assert all(item["category"] == "liquidity" for item in payload["analyses"])
    current = next(item for item in payload["analyses"] if item["id"] == "current_ratio")
    assert current["rating"] == "excellent"


def test_analyze_defaults_to_output_dir_and_language(monkeypatch, tmp_path):
    make_env(monkeypatch, tmp_path)
    source = make_input(tmp_path, name="Acme Trading")

    result = runner.invoke(app, ["analyze", str(source), "--id", "current_ratio", "--language", "ar", "--top", "0"])

    assert result.exit_code == 0, result.output
    target = tmp_path / "reports" / "acme_trading_analysis.json"
    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["executiveSummary"]["companyInfo"]["analysisLanguage"] == "ar"
    assert payload["analyses"][0]["comparisonWithIndustry"] == "أعلى من متوسط الصناعة بـ 37.7%"


def test_analyze_rejects_bad_input(monkeypatch, tmp_path):
    make_env(monkeypatch, tmp_path)
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    assert runner.invoke(app, ["analyze", str(broken)]).exit_code == 2
    assert runner.invoke(app, ["analyze", str(make_input(tmp_path)), "--language", "fr"]).exit_code == 2


def test_seed_benchmarks_and_history(monkeypatch, tmp_path):
    make_env(monkeypatch, tmp_path)
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({"retail": {"current_ratio": 1.4, "made_up_metric": 3.0}}), encoding="utf-8")

    result = runner.invoke(app, ["seed-benchmarks", str(seed), "--source", "survey"])

    assert result.exit_code == 0, result.output
    repository = SQLiteRepository(database_uri=f"sqlite:///{tmp_path / 'fsa.db'}")
    assert repository.fetch_benchmarks("retail") == {"current_ratio": 1.4}

    history = runner.invoke(app, ["history"])
    assert history.exit_code == 0
    assert "No recorded runs." in history.output


def test_seed_benchmarks_rejects_wrong_shape(monkeypatch, tmp_path):
    make_env(monkeypatch, tmp_path)
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({"retail": 1.4}), encoding="utf-8")

    assert runner.invoke(app, ["seed-benchmarks", str(seed)]).exit_code == 2


def test_catalogue_and_plan(monkeypatch, tmp_path):
    make_env(monkeypatch, tmp_path)

    assert runner.invoke(app, ["catalogue", "--tier", "classical", "--category", "liquidity"]).exit_code == 0
    assert runner.invoke(app, ["catalogue", "--category", "astrology"]).exit_code == 2
    assert runner.invoke(app, ["plan"]).exit_code == 0


def test_slug():
    assert _slug("Acme Trading Co.") == "acme_trading_co"
    assert _slug("  ") == "company"
