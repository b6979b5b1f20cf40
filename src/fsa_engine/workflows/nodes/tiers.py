"""LangGraph nodes evaluating one analysis tier each."""
from __future__ import annotations

from fsa_engine.domain.errors import AnalysisCancelled
from fsa_engine.domain.registry.base import Tier
from fsa_engine.workflows.context import WorkflowContext
from fsa_engine.workflows.state import AnalysisState


def _run_tier(state: AnalysisState, context: WorkflowContext, tier: Tier) -> AnalysisState:
    logs = state.setdefault("logs", [])
    errors = state.setdefault("errors", [])
    results = state.setdefault("results", {})
    history = state.get("history")
    benchmarks = state.get("benchmarks")
    company = state.get("company_info")

    if history is None or benchmarks is None or company is None:
        errors.append(f"TierEvaluator[{tier.value}] skipped because inputs or benchmarks are missing.")
        return state

    definitions = [d for d in state.get("definitions") or [] if d.tier is tier]
    if not definitions:
        results[tier.value] = []
        return state

    logs.append(f"TierEvaluator[{tier.value}] -> {len(definitions)} analyses")
    try:
        evaluated = context.engine.evaluate(
            definitions, history, company, benchmarks, cancel_event=context.cancel_event
        )
        results[tier.value] = evaluated
        failed = [r.id for r in evaluated if r.status == "error"]
        if failed:
            errors.append(f"TierEvaluator[{tier.value}] -> failed analyses: {', '.join(failed)}")
    except AnalysisCancelled as exc:
        errors.append(f"TierEvaluator[{tier.value}] cancelled: {exc}")
    except Exception as exc:  # pylint: disable=broad-except
        errors.append(f"TierEvaluator[{tier.value}] failed: {exc}")
    return state


def run_classical(state: AnalysisState, context: WorkflowContext) -> AnalysisState:
    return _run_tier(state, context, Tier.CLASSICAL)


def run_intermediate(state: AnalysisState, context: WorkflowContext) -> AnalysisState:
    return _run_tier(state, context, Tier.INTERMEDIATE)


def run_advanced(state: AnalysisState, context: WorkflowContext) -> AnalysisState:
    return _run_tier(state, context, Tier.ADVANCED)
