"""SQLite persistence layer for benchmark overrides and analysis run history."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from fsa_engine.domain.models.results import AnalysisReport


class SQLiteRepository:
    """Lightweight gateway for reading and writing benchmark and run data."""

    def __init__(self, database_uri: str, *, echo: bool = False) -> None:
        self._engine: Engine = create_engine(database_uri, echo=echo, future=True)
        self._ensure_schema()

    @property
    def engine(self) -> Engine:
        return self._engine

    # -----------------
    # Schema management
    # -----------------
    def _ensure_schema(self) -> None:
        """Create core tables if they do not already exist."""
        ddl = [
            # Sector-level benchmark overrides
            """
            CREATE TABLE IF NOT EXISTS benchmarks (
              sector TEXT NOT NULL,
              analysis_id TEXT NOT NULL,
              value REAL NOT NULL,
              source TEXT,
              updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
              PRIMARY KEY (sector, analysis_id)
            );
            """,
            # One row per completed engine run
            """
            CREATE TABLE IF NOT EXISTS analysis_runs (
              id INTEGER PRIMARY KEY AUTOINCREMENT,
              company TEXT NOT NULL,
              sector TEXT,
              analysis_date TEXT NOT NULL,
              total_analyses INTEGER,
              excellent_count INTEGER,
              very_good_count INTEGER,
              good_count INTEGER,
              acceptable_count INTEGER,
              poor_count INTEGER,
              not_applicable_count INTEGER,
              error_count INTEGER,
              payload TEXT,
              created_at DATETIME DEFAULT CURRENT_TIMESTAMP
            );
            """,
            """CREATE INDEX IF NOT EXISTS idx_runs_company ON analysis_runs(company);""",
        ]
        with self._engine.begin() as conn:
            for statement in ddl:
                conn.execute(text(statement))

    # ----------
    # Benchmarks
    # ----------
    def fetch_benchmarks(self, sector: str) -> Dict[str, float]:
        """Stored overrides for ``sector`` keyed by analysis id."""
        query = text(
            """
            SELECT analysis_id, value
            FROM benchmarks
            WHERE sector = :sector
            """
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query, {"sector": sector or ""})
            return {row["analysis_id"]: float(row["value"]) for row in rows.mappings()}

    def upsert_benchmarks(self, sector: str, values: Mapping[str, float], source: str = "manual") -> int:
        """Persist benchmark overrides using UPSERT; returns the number of rows written."""
        now = datetime.now(timezone.utc).isoformat(timespec="seconds")
        rows = [
            {"sector": sector or "", "analysis_id": key, "value": float(value), "source": source, "updated_at": now}
            for key, value in values.items()
            if key and value is not None
        ]
        if not rows:
            return 0

        stmt = text(
            """
            INSERT INTO benchmarks (sector, analysis_id, value, source, updated_at)
            VALUES (:sector, :analysis_id, :value, :source, :updated_at)
            ON CONFLICT(sector, analysis_id) DO UPDATE SET
                value=excluded.value,
                source=excluded.source,
                updated_at=excluded.updated_at
            """
        )
        with self._engine.begin() as conn:
            conn.execute(stmt, rows)
        return len(rows)

    # ------------
    # Run history
    # ------------
    def record_run(self, report: AnalysisReport) -> int:
        """Store a finished run and return its row id."""
        summary = report.executive_summary
        totals = summary.overall_results
        params: Dict[str, Any] = {
            "company": summary.company_info.name,
            "sector": summary.company_info.sector,
            "analysis_date": summary.analysis_date,
            "total_analyses": totals.total_analyses,
            "excellent_count": totals.excellent_count,
            "very_good_count": totals.very_good_count,
            "good_count": totals.good_count,
            "acceptable_count": totals.acceptable_count,
            "poor_count": totals.poor_count,
            "not_applicable_count": totals.not_applicable_count,
            "error_count": totals.error_count,
            "payload": json.dumps(report.to_dict(), ensure_ascii=False),
        }
        stmt = text(
            """
            INSERT INTO analysis_runs (
              company, sector, analysis_date, total_analyses, excellent_count, very_good_count,
              good_count, acceptable_count, poor_count, not_applicable_count, error_count, payload
            )
            VALUES (
              :company, :sector, :analysis_date, :total_analyses, :excellent_count, :very_good_count,
              :good_count, :acceptable_count, :poor_count, :not_applicable_count, :error_count, :payload
            )
            """
        )
        with self._engine.begin() as conn:
            result = conn.execute(stmt, params)
            return int(result.lastrowid)

    def fetch_runs(self, company: Optional[str] = None, limit: int = 20) -> List[Dict[str, Any]]:
        """Most recent runs first, without the JSON payload."""
        clause = "WHERE company = :company" if company else ""
        query = text(
            f"""
            SELECT id, company, sector, analysis_date, total_analyses, excellent_count, very_good_count,
                   good_count, acceptable_count, poor_count, not_applicable_count, error_count, created_at
            FROM analysis_runs
            {clause}
            ORDER BY id DESC
            LIMIT :limit
            """
        )
        params: Dict[str, Any] = {"limit": int(limit)}
        if company:
            params["company"] = company
        with self._engine.connect() as conn:
            rows = conn.execute(query, params)
            return [dict(row) for row in rows.mappings()]

    def fetch_run_payload(self, run_id: int) -> Optional[Dict[str, Any]]:
        query = text("SELECT payload FROM analysis_runs WHERE id = :id")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": run_id}).mappings().first()
        if row is None or row["payload"] is None:
            return None
        return json.loads(row["payload"])
