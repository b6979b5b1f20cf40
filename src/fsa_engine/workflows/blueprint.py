"""Workflow blueprint describing analysis stages and their handlers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, TYPE_CHECKING

from fsa_engine.workflows.nodes import (
    executive_summary,
    persist_run,
    resolve_benchmarks,
    tiers,
    validate_input,
)

if TYPE_CHECKING:
    from fsa_engine.workflows.context import WorkflowContext
    from fsa_engine.workflows.state import AnalysisState


@dataclass
class StageSpec:
    """Single LangGraph stage definition."""

    key: str
    description: str
    handler: Callable[["AnalysisState", "WorkflowContext"], "AnalysisState"]
    depends_on: List[str] = field(default_factory=list)


def build_default_stages() -> List[StageSpec]:
    """Return the ordered stages for the analysis workflow."""
    return [
        StageSpec(
            key="validate_input",
            description="Sort statements, build the period history and select analyses.",
            handler=validate_input.run,
        ),
        StageSpec(
            key="resolve_benchmarks",
            description="Resolve every selected benchmark once, falling back to category defaults.",
            handler=resolve_benchmarks.run,
            depends_on=["validate_input"],
        ),
        StageSpec(
            key="classical",
            description="Structural, ratio and cash-flow analyses.",
            handler=tiers.run_classical,
            depends_on=["resolve_benchmarks"],
        ),
        StageSpec(
            key="intermediate",
            description="Comparisons, valuation models and performance indices.",
            handler=tiers.run_intermediate,
            depends_on=["resolve_benchmarks"],
        ),
        StageSpec(
            key="advanced",
            description="Modeling, statistics, forecasting, risk, portfolio, M&A, detection and time series.",
            handler=tiers.run_advanced,
            depends_on=["resolve_benchmarks"],
        ),
        StageSpec(
            key="executive_summary",
            description="Aggregate ratings, SWOT, risks and forecasts into the executive summary.",
            handler=executive_summary.run,
            depends_on=["classical", "intermediate", "advanced"],
        ),
        StageSpec(
            key="persist_run",
            description="Record the run in SQLite when run persistence is enabled.",
            handler=persist_run.run,
            depends_on=["executive_summary"],
        ),
    ]
