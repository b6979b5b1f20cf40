"""LangGraph workflow assembly for the end-to-end analysis pipeline."""
from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import httpx
from langgraph.graph import END, StateGraph

from config import Config
from fsa_engine.domain.models.financials import CompanyInfo, FinancialStatement
from fsa_engine.domain.services.engine import AnalysisEngine
from fsa_engine.infrastructure.benchmarks import HttpBenchmarkProvider, build_provider
from fsa_engine.infrastructure.db.sqlite import SQLiteRepository
from fsa_engine.workflows import context as context_module
from fsa_engine.workflows.blueprint import StageSpec, build_default_stages
from fsa_engine.workflows.state import AnalysisState


class AnalysisWorkflow:
    """Compose LangGraph nodes into a runnable workflow."""

    def __init__(
        self,
        config: Config,
        *,
        repository: Optional[SQLiteRepository] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config
        self._context = self._build_context(repository, http_client)
        self._stages: List[StageSpec] = build_default_stages()
        self._graph = self._build_graph()

    @property
    def context(self) -> context_module.WorkflowContext:
        return self._context

    def _build_context(
        self,
        repository: Optional[SQLiteRepository],
        http_client: Optional[httpx.Client],
    ) -> context_module.WorkflowContext:
        if repository is None and (self._config.use_benchmark_cache or self._config.persist_runs):
            repository = SQLiteRepository(
                database_uri=f"sqlite:///{self._config.database_path}",
                echo=self._config.sqlite_echo,
            )

        http_provider: Optional[HttpBenchmarkProvider] = None
        if self._config.benchmark_url:
            http_provider = HttpBenchmarkProvider(
                self._config.benchmark_url,
                timeout=self._config.benchmark_timeout,
                client=http_client,
            )

        provider = build_provider(
            repository=repository if self._config.use_benchmark_cache else None,
            http_provider=http_provider,
        )
        engine = AnalysisEngine(
            benchmark_provider=provider,
            assumptions=self._config.market_assumptions(),
            max_workers=self._config.max_workers,
        )
        return context_module.WorkflowContext(
            config=self._config,
            engine=engine,
            repository=repository,
            http_provider=http_provider,
        )

    def _build_graph(self):
        builder = StateGraph(dict)

        if not self._stages:
            raise RuntimeError("Workflow blueprint is empty; cannot build LangGraph.")

        for stage in self._stages:
            builder.add_node(stage.key, self._wrap(stage.handler))

        # Serialize execution in declared stage order to avoid concurrent state writes.
        builder.set_entry_point(self._stages[0].key)
        for current, nxt in zip(self._stages, self._stages[1:]):
            builder.add_edge(current.key, nxt.key)
        builder.add_edge(self._stages[-1].key, END)

        return builder.compile(checkpointer=None)

    def _wrap(self, func: Callable[[AnalysisState, context_module.WorkflowContext], AnalysisState]):
        def wrapper(state: Dict[str, Any]) -> Dict[str, Any]:
            return func(state, self._context)  # type: ignore[arg-type]

        return wrapper

    def run(
        self,
        statements: Sequence[FinancialStatement],
        company_info: CompanyInfo,
        *,
        ids: Optional[Sequence[str]] = None,
        categories: Optional[Sequence[str]] = None,
        analysis_date: Optional[str] = None,
    ) -> AnalysisState:
        """Execute the workflow for one company."""
        initial_state: AnalysisState = {
            "company_info": company_info,
            "statements": list(statements),
            "analysis_date": analysis_date or date.today().isoformat(),
            "selected_ids": list(ids) if ids else None,
            "selected_categories": list(categories) if categories else None,
            "results": {},
            "logs": [],
            "errors": [],
            "extras": {},
            "stage_order": [stage.key for stage in self._stages],
        }
        try:
            result: AnalysisState = self._graph.invoke(initial_state)
        finally:
            # A cancellation only ever stops the run it was aimed at.
            self._context.cancel_event.clear()
        return result

    def cancel(self) -> None:
        """Ask the current (or next) run to stop between analyses."""
        self._context.cancel_event.set()

    def persist_state(self, state: AnalysisState, path: Path) -> None:
        """Serialize the workflow state to disk for debugging or auditing."""
        path.parent.mkdir(parents=True, exist_ok=True)
        snapshot = {key: value for key, value in state.items() if key != "history"}
        snapshot["definitions"] = [d.id for d in state.get("definitions") or []]
        payload = json.dumps(snapshot, default=_json_serializer, indent=2, ensure_ascii=False)
        path.write_text(payload, encoding="utf-8")

    def describe_stages(self) -> List[str]:
        """Return human-readable workflow stage descriptions."""
        return [f"{stage.key}: {stage.description}" for stage in self._stages]

    def close(self) -> None:
        self._context.close()


def _json_serializer(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if hasattr(value, "tolist"):
        return value.tolist()
    return str(value)
