"""LangGraph node validating the statements and selecting definitions."""
from __future__ import annotations

from fsa_engine.domain.errors import AnalysisError
from fsa_engine.workflows.context import WorkflowContext
from fsa_engine.workflows.state import AnalysisState


def run(state: AnalysisState, context: WorkflowContext) -> AnalysisState:
    logs = state.setdefault("logs", [])
    errors = state.setdefault("errors", [])
    statements = state.get("statements") or []

    if not statements:
        errors.append("InputValidator skipped the run: at least one financial statement is required.")
        return state

    years = sorted(statement.year for statement in statements)
    if len(set(years)) != len(years):
        errors.append(f"InputValidator -> duplicate statement years in {years}.")
    state["statements"] = sorted(statements, key=lambda statement: statement.year)

    logs.append(f"InputValidator -> {len(statements)} period(s) {years[0]}..{years[-1]}")
    try:
        state["history"] = context.engine.history(state["statements"])
        selection = context.engine.select(
            ids=state.get("selected_ids") or None,
            categories=state.get("selected_categories") or None,
        )
        state["definitions"] = list(selection)
        logs.append(f"InputValidator -> {len(selection)} analyses selected")
    except (AnalysisError, ValueError) as exc:
        errors.append(f"Input validation failed: {exc}")
    return state
