"""Workflow state definitions shared by LangGraph nodes."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, TypedDict

from fsa_engine.domain.models.financials import CompanyInfo, FinancialStatement
from fsa_engine.domain.models.results import AnalysisReport, AnalysisResult, ExecutiveSummary
from fsa_engine.domain.registry.base import AnalysisDefinition
from fsa_engine.domain.services.calculations import StatementHistory
from fsa_engine.infrastructure.benchmarks import ResolvedBenchmark


class AnalysisState(TypedDict, total=False):
    company_info: CompanyInfo
    statements: List[FinancialStatement]
    analysis_date: str
    selected_ids: Optional[List[str]]
    selected_categories: Optional[List[str]]

    history: Optional[StatementHistory]
    definitions: List[AnalysisDefinition]
    benchmarks: Dict[str, ResolvedBenchmark]
    results: Dict[str, List[AnalysisResult]]

    summary: Optional[ExecutiveSummary]
    report: Optional[AnalysisReport]
    run_id: Optional[int]
    stage_order: List[str]

    logs: List[str]
    errors: List[str]

    extras: Dict[str, Any]
