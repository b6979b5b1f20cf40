"""Industry benchmark providers and the per-run benchmark resolver.

Providers answer ``get_benchmark(analysis_id, sector)``. The resolver asks a
provider once per definition before any comparison happens, applies the
benchmark-type factor, and falls back to a per-category default whenever a
provider cannot supply a finite value.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple

import httpx
from sqlalchemy.exc import SQLAlchemyError

from fsa_engine.domain.errors import BenchmarkUnavailableError
from fsa_engine.domain.models.financials import CompanyInfo
from fsa_engine.domain.registry.base import AnalysisDefinition
from fsa_engine.domain.registry.catalogue import build_default_registry
from fsa_engine.domain.services.calculations import NAN, StatementHistory, finite, safe_div
from fsa_engine.infrastructure.db.sqlite import SQLiteRepository

logger = logging.getLogger(__name__)

# Anything a provider may raise for one lookup; none of these abort a run.
PROVIDER_ERRORS = (BenchmarkUnavailableError, KeyError, ValueError, TypeError, httpx.HTTPError, SQLAlchemyError)

CATEGORY_DEFAULTS: Dict[str, float] = {
    "structural": 10.0,
    "liquidity": 1.5,
    "activity": 5.0,
    "profitability": 10.0,
    "leverage": 1.0,
    "market": 10.0,
    "cash_flow": 1.0,
    "comparison": 100.0,
    "valuation": 100.0,
    "performance": 100.0,
    "modeling": 1.0,
    "statistical": 1.0,
    "forecasting": 100.0,
    "risk": 1.0,
    "portfolio": 1.0,
    "mergers": 1.0,
    "detection": 1.0,
    "time_series": 1.0,
}
DEFAULT_FALLBACK = 1.0

# Tightening applied in the favourable direction of each analysis.
BENCHMARK_TYPE_FACTORS: Dict[str, float] = {
    "best-in-class": 1.2,
    "market-leaders": 1.15,
}

# Multipliers on the built-in benchmark, keyed by sector then benchmark key.
SECTOR_ADJUSTMENTS: Dict[str, Dict[str, float]] = {
    "banking": {
        "current_ratio": 0.5,
        "quick_ratio": 0.5,
        "debt_to_equity": 10.0,
        "debt_to_assets": 2.25,
        "equity_multiplier": 6.0,
        "roa": 0.15,
        "total_assets_turnover": 0.1,
    },
    "insurance": {"debt_to_equity": 5.0, "debt_to_assets": 2.0, "roa": 0.3, "total_assets_turnover": 0.3},
    "real-estate": {"total_assets_turnover": 0.25, "debt_to_equity": 2.0, "gross_profit_margin": 1.6},
    "retail": {
        "inventory_turnover": 1.5,
        "gross_profit_margin": 1.2,
        "net_profit_margin": 0.5,
        "total_assets_turnover": 1.8,
    },
    "telecommunications": {"ebitda_margin": 1.8, "fixed_assets_turnover": 0.5, "debt_to_equity": 1.8},
    "energy": {"fixed_assets_turnover": 0.6, "debt_to_equity": 1.4, "ebitda_margin": 1.5},
    "healthcare": {"gross_profit_margin": 1.8, "net_profit_margin": 1.3},
    "manufacturing": {"inventory_turnover": 0.8, "fixed_assets_turnover": 0.9},
    "mining": {"fixed_assets_turnover": 0.5, "ebitda_margin": 1.6},
    "hospitality": {"fixed_assets_turnover": 0.6, "debt_to_equity": 1.5},
}


class BenchmarkProvider(Protocol):
    def get_benchmark(self, analysis_id: str, sector: str) -> float:
        ...


@dataclass(frozen=True)
class ResolvedBenchmark:
    """Benchmark resolved for one definition, before any scale is applied."""

    value: float
    source: str
    fallback: bool = False

    def effective(self, definition: AnalysisDefinition, history: StatementHistory) -> float:
        """Benchmark in the analysis' own unit."""
        if definition.scale is None or definition.reference:
            return self.value
        scale = definition.scale(history)
        if not finite(scale) or scale == 0:
            return NAN
        return self.value * abs(scale) / 100.0


ResolvedBenchmarks = Dict[str, ResolvedBenchmark]


# ----------------------------
# Providers
# ----------------------------

class StaticBenchmarkProvider:
    """Built-in benchmark table with optional sector multipliers."""

    name = "static"

    def __init__(
        self,
        table: Optional[Mapping[str, float]] = None,
        sector_adjustments: Optional[Mapping[str, Mapping[str, float]]] = None,
    ) -> None:
        if table is None:
            table = {d.benchmark_key: d.benchmark for d in build_default_registry()}
        self._table = dict(table)
        self._adjustments = SECTOR_ADJUSTMENTS if sector_adjustments is None else sector_adjustments

    def get_benchmark(self, analysis_id: str, sector: str) -> float:
        try:
            base = self._table[analysis_id]
        except KeyError:
            raise BenchmarkUnavailableError(f"No built-in benchmark for '{analysis_id}'.") from None
        multiplier = self._adjustments.get(sector, {}).get(analysis_id, 1.0)
        return base * multiplier


class HttpBenchmarkProvider:
    """Fetches ``{analysis_id: value}`` maps per sector from a benchmark service."""

    name = "http"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
        default_sector: str = "general",
    ) -> None:
        if not base_url:
            raise ValueError("BENCHMARK_URL is required for the HTTP benchmark provider.")
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout, connect=10.0))
        self._default_sector = default_sector
        self._cache: Dict[str, Dict[str, float]] = {}

    def _fetch(self, sector: str) -> Dict[str, float]:
        if sector not in self._cache:
            url = f"{self._base_url}/benchmarks/{sector}"
            logger.debug("Fetching benchmarks from %s", url)
            response = self._client.get(url)
            response.raise_for_status()
            try:
                payload = response.json()
            except ValueError as exc:
                raise BenchmarkUnavailableError(f"Benchmark service returned invalid JSON for '{sector}'.") from exc
            if not isinstance(payload, dict):
                raise BenchmarkUnavailableError(f"Benchmark service returned {type(payload).__name__} for '{sector}'.")
            values: Dict[str, float] = {}
            for key, raw in payload.items():
                try:
                    values[str(key)] = float(raw)
                except (TypeError, ValueError):
                    logger.debug("Ignoring non-numeric benchmark %s=%r", key, raw)
            self._cache[sector] = values
        return self._cache[sector]

    def get_benchmark(self, analysis_id: str, sector: str) -> float:
        values = self._fetch(sector or self._default_sector)
        if analysis_id not in values:
            raise BenchmarkUnavailableError(f"Benchmark service has no value for '{analysis_id}'.")
        return values[analysis_id]

    def reset(self) -> None:
        """Forget fetched sectors so the next run sees fresh values."""
        self._cache.clear()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpBenchmarkProvider":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class RepositoryBenchmarkProvider:
    """Sector overrides persisted in SQLite."""

    name = "repository"

    def __init__(self, repository: SQLiteRepository) -> None:
        self._repo = repository

    def get_benchmark(self, analysis_id: str, sector: str) -> float:
        values = self._repo.fetch_benchmarks(sector)
        if analysis_id not in values:
            raise BenchmarkUnavailableError(f"No stored benchmark for '{analysis_id}' in sector '{sector}'.")
        return values[analysis_id]


class ChainedBenchmarkProvider:
    """Asks each provider in turn; the first finite value wins."""

    name = "chain"

    def __init__(self, providers: Sequence[BenchmarkProvider]) -> None:
        if not providers:
            raise ValueError("ChainedBenchmarkProvider needs at least one provider.")
        self.providers: List[BenchmarkProvider] = list(providers)

    def lookup(self, analysis_id: str, sector: str) -> Tuple[float, str]:
        failures: List[str] = []
        for provider in self.providers:
            try:
                value, source = lookup(provider, analysis_id, sector)
            except PROVIDER_ERRORS as exc:
                failures.append(f"{_provider_name(provider)}: {exc}")
                continue
            if finite(value):
                return value, source
            failures.append(f"{_provider_name(provider)}: non-finite value")
        raise BenchmarkUnavailableError(f"No provider could supply '{analysis_id}' ({'; '.join(failures)}).")

    def get_benchmark(self, analysis_id: str, sector: str) -> float:
        return self.lookup(analysis_id, sector)[0]

    def reset(self) -> None:
        for provider in self.providers:
            _reset(provider)


def _provider_name(provider: BenchmarkProvider) -> str:
    return getattr(provider, "name", type(provider).__name__)


def _reset(provider: BenchmarkProvider) -> None:
    reset = getattr(provider, "reset", None)
    if reset is not None:
        reset()


def lookup(provider: BenchmarkProvider, analysis_id: str, sector: str) -> Tuple[float, str]:
    """Value plus the name of the provider that supplied it."""
    if isinstance(provider, ChainedBenchmarkProvider):
        return provider.lookup(analysis_id, sector)
    return float(provider.get_benchmark(analysis_id, sector)), _provider_name(provider)


# ----------------------------
# Resolution
# ----------------------------

def apply_benchmark_type(value: float, definition: AnalysisDefinition, benchmark_type: str) -> float:
    factor = BENCHMARK_TYPE_FACTORS.get(benchmark_type)
    if factor is None:
        return value
    if definition.lower_is_better:
        return safe_div(value, factor)
    return value * factor


class BenchmarkResolver:
    """Resolves every benchmark of a run up front; create one per run."""

    def __init__(self, provider: BenchmarkProvider) -> None:
        self._provider = provider

    def resolve(self, definitions: Iterable[AnalysisDefinition], company_info: CompanyInfo) -> ResolvedBenchmarks:
        _reset(self._provider)
        sector = company_info.sector
        memo: Dict[str, Tuple[float, str, bool]] = {}
        resolved: ResolvedBenchmarks = {}
        fallbacks = 0
        for definition in definitions:
            if definition.reference:
                resolved[definition.id] = ResolvedBenchmark(definition.benchmark, "reference")
                continue
            key = definition.benchmark_key or definition.id
            if key not in memo:
                memo[key] = self._lookup(key, sector)
            value, source, fallback = memo[key]
            if fallback:
                value = CATEGORY_DEFAULTS.get(definition.category, DEFAULT_FALLBACK)
                fallbacks += 1
            value = apply_benchmark_type(value, definition, company_info.benchmark_type)
            resolved[definition.id] = ResolvedBenchmark(value, source, fallback)
        if fallbacks:
            logger.warning("%d benchmark(s) fell back to category defaults for sector '%s'", fallbacks, sector)
        return resolved

    def _lookup(self, key: str, sector: str) -> Tuple[float, str, bool]:
        try:
            value, source = lookup(self._provider, key, sector)
        except PROVIDER_ERRORS as exc:
            logger.warning("Benchmark for '%s' unavailable: %s", key, exc)
            return NAN, "category_default", True
        if not finite(value):
            logger.warning("Benchmark for '%s' is not finite (%r)", key, value)
            return NAN, "category_default", True
        return value, source, False


def build_provider(
    *,
    repository: Optional[SQLiteRepository] = None,
    http_provider: Optional[HttpBenchmarkProvider] = None,
) -> BenchmarkProvider:
    """Chain of configured providers ending with the built-in table."""
    providers: List[BenchmarkProvider] = []
    if repository is not None:
        providers.append(RepositoryBenchmarkProvider(repository))
    if http_provider is not None:
        providers.append(http_provider)
    providers.append(StaticBenchmarkProvider())
    if len(providers) == 1:
        return providers[0]
    return ChainedBenchmarkProvider(providers)
