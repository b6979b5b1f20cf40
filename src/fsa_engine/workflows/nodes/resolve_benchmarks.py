"""LangGraph node resolving every benchmark before any comparison."""
from __future__ import annotations

from fsa_engine.workflows.context import WorkflowContext
from fsa_engine.workflows.state import AnalysisState


def run(state: AnalysisState, context: WorkflowContext) -> AnalysisState:
    logs = state.setdefault("logs", [])
    errors = state.setdefault("errors", [])
    definitions = state.get("definitions")
    company = state.get("company_info")

    if not definitions or company is None:
        errors.append("BenchmarkResolver skipped because no analyses were selected.")
        return state

    logs.append(f"BenchmarkResolver -> sector '{company.sector or 'general'}', type '{company.benchmark_type}'")
    try:
        benchmarks = context.engine.resolve_benchmarks(definitions, company)
        state["benchmarks"] = benchmarks
        fallbacks = sum(1 for item in benchmarks.values() if item.fallback)
        if fallbacks:
            logs.append(f"BenchmarkResolver -> {fallbacks} category default(s) used")
    except Exception as exc:  # pylint: disable=broad-except
        errors.append(f"Benchmark resolution failed: {exc}")
    return state
