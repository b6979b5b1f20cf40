"""LangGraph node storing the finished run in SQLite."""
from __future__ import annotations

from fsa_engine.workflows.context import WorkflowContext
from fsa_engine.workflows.state import AnalysisState


def run(state: AnalysisState, context: WorkflowContext) -> AnalysisState:
    logs = state.setdefault("logs", [])
    errors = state.setdefault("errors", [])
    report = state.get("report")

    if not context.config.persist_runs or context.repository is None:
        return state
    if report is None:
        errors.append("RunRecorder skipped because no report was produced.")
        return state

    try:
        state["run_id"] = context.repository.record_run(report)
        logs.append(f"RunRecorder -> stored run #{state['run_id']}")
    except Exception as exc:  # pylint: disable=broad-except
        errors.append(f"Persisting run failed: {exc}")
    return state
