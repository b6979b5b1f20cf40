"""Application-wide configuration defaults and helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fsa_engine.domain.models.financials import MarketAssumptions

# Base directory for resolving relative paths.
BASE_DIR = Path(__file__).resolve().parent


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse truthy environment values like '1' or 'true'."""
    if value is None:
        return default
    # Normalize non-string inputs (e.g., int defaults) before parsing.
    if not isinstance(value, str):
        value = str(value)
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_int(value: Optional[str]) -> Optional[int]:
    """Safely parse an integer env var, returning None on failure."""
    if value is None:
        return None
    try:
        parsed = int(str(value).strip())
        return parsed
    except (TypeError, ValueError):
        return None


def _to_float(value: Optional[str]) -> Optional[float]:
    """Safely parse a float env var, returning None on failure."""
    if value is None:
        return None
    try:
        return float(str(value).strip())
    except (TypeError, ValueError):
        return None


@dataclass
class Config:
    """Runtime configuration loaded from environment variables."""

    debug: bool = False
    database_path: Path = BASE_DIR / "data" / "benchmarks.db"
    sqlite_echo: bool = False
    language: str = "en"
    max_workers: int = 1
    benchmark_url: Optional[str] = None
    benchmark_timeout: float = 10.0
    use_benchmark_cache: bool = True
    persist_runs: bool = False
    output_dir: Path = BASE_DIR / "reports"
    share_price: float = 50.0
    risk_free_rate: float = 0.03
    tax_rate: float = 0.25
    cost_of_capital: float = 0.10

    @classmethod
    def from_env(cls) -> "Config":
        """Build a configuration instance using environment overrides."""
        base = BASE_DIR
        db_path = Path(os.getenv("DATABASE_PATH", base / "data" / "benchmarks.db"))
        output_dir = Path(os.getenv("OUTPUT_DIR", base / "reports"))
        defaults = cls()

        config = cls(
            debug=_to_bool(os.getenv("APP_DEBUG")),
            database_path=db_path,
            sqlite_echo=_to_bool(os.getenv("SQLITE_ECHO")),
            language=(os.getenv("ANALYSIS_LANGUAGE") or "en").strip().lower(),
            max_workers=max(_to_int(os.getenv("ANALYSIS_MAX_WORKERS")) or 1, 1),
            benchmark_url=os.getenv("BENCHMARK_URL") or None,
            benchmark_timeout=_to_float(os.getenv("BENCHMARK_TIMEOUT")) or defaults.benchmark_timeout,
            use_benchmark_cache=_to_bool(os.getenv("BENCHMARK_CACHE"), default=True),
            persist_runs=_to_bool(os.getenv("PERSIST_RUNS")),
            output_dir=output_dir,
            share_price=_to_float(os.getenv("ASSUMED_SHARE_PRICE")) or defaults.share_price,
            risk_free_rate=_fallback(_to_float(os.getenv("RISK_FREE_RATE")), defaults.risk_free_rate),
            tax_rate=_fallback(_to_float(os.getenv("TAX_RATE")), defaults.tax_rate),
            cost_of_capital=_to_float(os.getenv("COST_OF_CAPITAL")) or defaults.cost_of_capital,
        )
        config.ensure_directories()
        return config

    def ensure_directories(self) -> None:
        """Create directories needed for runtime artifacts."""
        self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def market_assumptions(self) -> MarketAssumptions:
        """Market inputs used by the valuation and market-ratio analyses."""
        return MarketAssumptions(
            share_price=self.share_price,
            risk_free_rate=self.risk_free_rate,
            tax_rate=self.tax_rate,
            cost_of_capital=self.cost_of_capital,
        )


def _fallback(value: Optional[float], default: float) -> float:
    # Zero is a legitimate rate, so only None falls back.
    return default if value is None else value
