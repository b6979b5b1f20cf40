from __future__ import annotations

import math
from typing import List

import httpx
import pytest
from sqlalchemy.exc import OperationalError

from fsa_engine.domain.errors import BenchmarkUnavailableError
from fsa_engine.domain.models.financials import CompanyInfo, FinancialStatement
from fsa_engine.domain.registry.base import Tier, define
from fsa_engine.domain.registry.catalogue import build_default_registry
from fsa_engine.domain.services.calculations import StatementHistory
from fsa_engine.domain.services.engine import AnalysisEngine
from fsa_engine.infrastructure.benchmarks import (
    BenchmarkResolver,
    ChainedBenchmarkProvider,
    HttpBenchmarkProvider,
    RepositoryBenchmarkProvider,
    ResolvedBenchmark,
    StaticBenchmarkProvider,
    apply_benchmark_type,
    build_provider,
    lookup,
)
from fsa_engine.infrastructure.db.sqlite import SQLiteRepository


def make_http_provider(payload, status_code: int = 200, calls: List[str] = None) -> HttpBenchmarkProvider:
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request.url.path)
        return httpx.Response(status_code, json=payload)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpBenchmarkProvider("https://benchmarks.example.com/api/", client=client)


def make_repository(tmp_path) -> SQLiteRepository:
    return SQLiteRepository(database_uri=f"sqlite:///{tmp_path / 'benchmarks.db'}")


class FailingProvider:
    name = "failing"

    def get_benchmark(self, analysis_id: str, sector: str) -> float:
        raise BenchmarkUnavailableError("offline")


class BrokenStoreProvider:
    name = "broken-store"

    def get_benchmark(self, analysis_id: str, sector: str) -> float:
        raise OperationalError("SELECT", {}, Exception("database is locked"))


class MalformedProvider:
    name = "malformed"

    def get_benchmark(self, analysis_id: str, sector: str) -> float:
        return float("not-a-number")


def test_static_provider_applies_sector_adjustments():
    provider = StaticBenchmarkProvider()

    assert provider.get_benchmark("current_ratio", "") == 2.0
    assert provider.get_benchmark("current_ratio", "banking") == 1.0
    assert provider.get_benchmark("current_ratio", "unknown-sector") == 2.0
    with pytest.raises(BenchmarkUnavailableError):
        provider.get_benchmark("no_such_analysis", "")


def test_http_provider_fetches_each_sector_once():
    calls: List[str] = []
    provider = make_http_provider({"current_ratio": 1.8, "quick_ratio": "0.9", "notes": "n/a"}, calls=calls)

    assert provider.get_benchmark("current_ratio", "retail") == 1.8
    assert provider.get_benchmark("quick_ratio", "retail") == 0.9
    assert calls == ["/api/benchmarks/retail"]

    with pytest.raises(BenchmarkUnavailableError):
        provider.get_benchmark("notes", "retail")

    provider.get_benchmark("current_ratio", "")
    assert calls[-1] == "/api/benchmarks/general"
    provider.close()


def test_http_provider_surfaces_transport_errors():
    provider = make_http_provider({"detail": "down"}, status_code=503)

    with pytest.raises(httpx.HTTPStatusError):
        provider.get_benchmark("current_ratio", "retail")

    listing = make_http_provider([1, 2, 3])
    with pytest.raises(BenchmarkUnavailableError):
        listing.get_benchmark("current_ratio", "retail")


def test_http_provider_requires_url():
    with pytest.raises(ValueError):
        HttpBenchmarkProvider("")


def test_chain_reports_the_supplying_provider(tmp_path):
    repository = make_repository(tmp_path)
    repository.upsert_benchmarks("retail", {"current_ratio": 1.6})
    http = make_http_provider({"detail": "down"}, status_code=500)
    chain = build_provider(repository=repository, http_provider=http)

    assert isinstance(chain, ChainedBenchmarkProvider)
    assert lookup(chain, "current_ratio", "retail") == (1.6, "repository")
    assert lookup(chain, "quick_ratio", "retail") == (1.0, "static")


def test_chain_raises_when_every_provider_fails():
    chain = ChainedBenchmarkProvider([FailingProvider(), FailingProvider()])

    with pytest.raises(BenchmarkUnavailableError) as excinfo:
        chain.get_benchmark("current_ratio", "")
    assert "failing" in str(excinfo.value)


def test_build_provider_without_collaborators_is_static():
    assert isinstance(build_provider(), StaticBenchmarkProvider)


def test_repository_provider_sees_new_overrides(tmp_path):
    repository = make_repository(tmp_path)
    provider = RepositoryBenchmarkProvider(repository)

    with pytest.raises(BenchmarkUnavailableError):
        provider.get_benchmark("current_ratio", "energy")

    repository.upsert_benchmarks("energy", {"current_ratio": 1.3})
    assert provider.get_benchmark("current_ratio", "energy") == 1.3


def test_resolver_falls_back_to_category_defaults():
    registry = build_default_registry()
    definitions = [registry.get("current_ratio"), registry.get("receivables_turnover")]

    resolved = BenchmarkResolver(FailingProvider()).resolve(definitions, CompanyInfo(name="Test Co"))

    assert resolved["current_ratio"] == ResolvedBenchmark(1.5, "category_default", True)
    assert resolved["receivables_turnover"] == ResolvedBenchmark(5.0, "category_default", True)


def test_resolver_applies_benchmark_type_in_favourable_direction():
    registry = build_default_registry()
    definitions = [registry.get("current_ratio"), registry.get("days_in_receivables")]
    company = CompanyInfo(name="Test Co", benchmark_type="best-in-class")

    resolved = BenchmarkResolver(StaticBenchmarkProvider()).resolve(definitions, company)

    assert math.isclose(resolved["current_ratio"].value, 2.4)
    assert math.isclose(resolved["days_in_receivables"].value, 37.5)
    assert apply_benchmark_type(2.0, registry.get("current_ratio"), "industry") == 2.0


def test_resolver_keeps_reference_levels():
    registry = build_default_registry()
    references = [d for d in registry if d.reference]
    assert references

    resolved = BenchmarkResolver(FailingProvider()).resolve(references, CompanyInfo(name="Test Co"))

    for definition in references:
        assert resolved[definition.id].source == "reference"
        assert resolved[definition.id].value == definition.benchmark
        assert not resolved[definition.id].fallback


def test_scaled_benchmark_is_a_share_of_the_scale():
    history = StatementHistory.from_statements(
        [FinancialStatement.from_dict({"year": 2023, "incomeStatement": {"revenue": 2000.0}})]
    )
    scaled = define(
        "scaled_metric",
        Tier.ADVANCED,
        "forecasting",
        lambda h: h.inc.revenue,
        100.0,
        unit="currency",
        scale=lambda h: h.inc.revenue,
    )
    zero_scale = define(
        "zero_scaled_metric", Tier.ADVANCED, "forecasting", lambda h: 1.0, 100.0, scale=lambda h: 0.0
    )

    assert ResolvedBenchmark(110.0, "static").effective(scaled, history) == 2200.0
    assert math.isnan(ResolvedBenchmark(110.0, "static").effective(zero_scale, history))


def test_non_json_benchmark_service_falls_back_to_static():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    client = httpx.Client(transport=httpx.MockTransport(handler))
    http = HttpBenchmarkProvider("https://benchmarks.example.com/api/", client=client)
    with pytest.raises(BenchmarkUnavailableError):
        http.get_benchmark("current_ratio", "retail")

    engine = AnalysisEngine(benchmark_provider=build_provider(http_provider=http))
    statement = FinancialStatement.from_dict(
        {
            "year": 2023,
            "balanceSheet": {"totalCurrentAssets": 895.0, "totalCurrentLiabilities": 325.0},
            "incomeStatement": {"revenue": 1800.0},
        }
    )
    report = engine.run([statement], CompanyInfo(name="Test Co", sector="retail"), ids=["current_ratio"])

    assert report.get("current_ratio").benchmark_source == "static"
    http.close()


def test_resolver_survives_store_and_parse_errors():
    registry = build_default_registry()
    definitions = [registry.get("current_ratio")]

    for provider in (BrokenStoreProvider(), MalformedProvider()):
        resolved = BenchmarkResolver(provider).resolve(definitions, CompanyInfo(name="Test Co"))
        assert resolved["current_ratio"] == ResolvedBenchmark(1.5, "category_default", True)

    chain = ChainedBenchmarkProvider([BrokenStoreProvider(), StaticBenchmarkProvider()])
    assert lookup(chain, "current_ratio", "") == (2.0, "static")


def test_each_resolution_refetches_remote_benchmarks():
    calls: List[str] = []
    http = make_http_provider({"current_ratio": 1.8}, calls=calls)
    resolver = BenchmarkResolver(build_provider(http_provider=http))
    definitions = [build_default_registry().get("current_ratio")]
    company = CompanyInfo(name="Test Co", sector="retail")

    first = resolver.resolve(definitions, company)
    second = resolver.resolve(definitions, company)

    assert first["current_ratio"].value == second["current_ratio"].value == 1.8
    assert calls == ["/api/benchmarks/retail", "/api/benchmarks/retail"]
    http.close()
