from __future__ import annotations

from config import Config
from fsa_engine.settings.loader import load_settings

ENV_KEYS = (
    "APP_DEBUG",
    "DATABASE_PATH",
    "SQLITE_ECHO",
    "ANALYSIS_LANGUAGE",
    "ANALYSIS_MAX_WORKERS",
    "BENCHMARK_URL",
    "BENCHMARK_TIMEOUT",
    "BENCHMARK_CACHE",
    "PERSIST_RUNS",
    "OUTPUT_DIR",
    "ASSUMED_SHARE_PRICE",
    "RISK_FREE_RATE",
    "TAX_RATE",
    "COST_OF_CAPITAL",
)


def make_env(monkeypatch, tmp_path, **values):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "db" / "fsa.db"))
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "out"))
    for key, value in values.items():
        monkeypatch.setenv(key, value)


def test_defaults_from_empty_environment(monkeypatch, tmp_path):
    make_env(monkeypatch, tmp_path)
    config = Config.from_env()

    assert config.debug is False
    assert config.language == "en"
    assert config.max_workers == 1
    assert config.benchmark_url is None
    assert config.use_benchmark_cache is True
    assert config.persist_runs is False
    assert config.database_path.parent.is_dir()
    assert config.output_dir.is_dir()


def test_environment_overrides(monkeypatch, tmp_path):
    make_env(
        monkeypatch,
        tmp_path,
        APP_DEBUG="true",
        ANALYSIS_LANGUAGE="AR",
        ANALYSIS_MAX_WORKERS="4",
        BENCHMARK_URL="https://benchmarks.example.com",
        BENCHMARK_TIMEOUT="2.5",
        BENCHMARK_CACHE="0",
        PERSIST_RUNS="yes",
        ASSUMED_SHARE_PRICE="75",
        RISK_FREE_RATE="0",
        TAX_RATE="0.2",
    )
    config = Config.from_env()

    assert config.debug is True
    assert config.language == "ar"
    assert config.max_workers == 4
    assert config.benchmark_url == "https://benchmarks.example.com"
    assert config.benchmark_timeout == 2.5
    assert config.use_benchmark_cache is False
    assert config.persist_runs is True

    assumptions = config.market_assumptions()
    assert assumptions.share_price == 75.0
    assert assumptions.risk_free_rate == 0.0
    assert assumptions.tax_rate == 0.2


def test_invalid_numbers_fall_back(monkeypatch, tmp_path):
    make_env(monkeypatch, tmp_path, ANALYSIS_MAX_WORKERS="many", BENCHMARK_TIMEOUT="soon", ANALYSIS_LANGUAGE="")
    config = Config.from_env()

    assert config.max_workers == 1
    assert config.benchmark_timeout == 10.0
    assert config.language == "en"


def test_load_settings_overrides(monkeypatch, tmp_path):
    make_env(monkeypatch, tmp_path, APP_DEBUG="1")
    config = load_settings(False, language="AR", max_workers=0)

    assert config.debug is False
    assert config.language == "ar"
    assert config.max_workers == 1
