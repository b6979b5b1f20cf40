"""LangGraph node rolling tier results into the executive summary and report."""
from __future__ import annotations

from fsa_engine.domain.models.results import AnalysisReport
from fsa_engine.domain.registry.base import Tier
from fsa_engine.workflows.context import WorkflowContext
from fsa_engine.workflows.state import AnalysisState


def run(state: AnalysisState, context: WorkflowContext) -> AnalysisState:
    logs = state.setdefault("logs", [])
    errors = state.setdefault("errors", [])
    results = state.get("results") or {}
    company = state.get("company_info")

    if context.cancel_event.is_set():
        errors.append("SummaryAggregator skipped because the run was cancelled.")
        return state
    if not results or company is None:
        errors.append("SummaryAggregator skipped because no tier produced results.")
        return state

    # Tier order matches registry order.
    analyses = [result for tier in Tier for result in results.get(tier.value, [])]
    logs.append(f"SummaryAggregator -> {len(analyses)} results")
    try:
        summary = context.engine.summarize(analyses, company, state.get("analysis_date"))
        state["summary"] = summary
        state["report"] = AnalysisReport(executive_summary=summary, analyses=tuple(analyses))
    except Exception as exc:  # pylint: disable=broad-except
        errors.append(f"Executive summary failed: {exc}")
    return state
