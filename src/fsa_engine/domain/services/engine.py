"""Analysis engine: runs registry definitions over a statement history.

The engine is computation only. Benchmarks are resolved for the whole
selection before any comparison; each definition is then computed, scored
and enriched independently so one failing analysis never aborts the run.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence

from fsa_engine.domain.errors import AnalysisCancelled, EmptyStatementsError
from fsa_engine.domain.models.financials import CompanyInfo, FinancialStatement, MarketAssumptions
from fsa_engine.domain.models.results import NOT_APPLICABLE, AnalysisReport, AnalysisResult, ExecutiveSummary
from fsa_engine.domain.registry.base import AnalysisDefinition, AnalysisRegistry, Measurement
from fsa_engine.domain.registry.catalogue import build_default_registry
from fsa_engine.domain.services import enrichment, scoring
from fsa_engine.domain.services.calculations import NAN, StatementHistory, finite
from fsa_engine.domain.services.summary import SummaryAggregator
from fsa_engine.i18n.analysis_text import analysis_text
from fsa_engine.i18n.messages import MessageCatalog
from fsa_engine.infrastructure.benchmarks import (
    BenchmarkProvider,
    BenchmarkResolver,
    ResolvedBenchmark,
    ResolvedBenchmarks,
    StaticBenchmarkProvider,
)

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Computes, scores and enriches every selected analysis for one company."""

    def __init__(
        self,
        registry: Optional[AnalysisRegistry] = None,
        benchmark_provider: Optional[BenchmarkProvider] = None,
        *,
        assumptions: Optional[MarketAssumptions] = None,
        max_workers: int = 1,
        aggregator: Optional[SummaryAggregator] = None,
    ) -> None:
        self.registry = registry if registry is not None else build_default_registry()
        self.benchmark_provider = benchmark_provider if benchmark_provider is not None else StaticBenchmarkProvider()
        self.assumptions = assumptions or MarketAssumptions()
        self.max_workers = max(int(max_workers), 1)
        self.aggregator = aggregator or SummaryAggregator()

    # ----------------------------
    # Pipeline steps
    # ----------------------------

    def select(
        self,
        ids: Optional[Sequence[str]] = None,
        categories: Optional[Sequence[str]] = None,
    ) -> AnalysisRegistry:
        return self.registry.select(ids=ids, categories=categories)

    def history(self, statements: Sequence[FinancialStatement]) -> StatementHistory:
        if not statements:
            raise EmptyStatementsError()
        return StatementHistory.from_statements(statements, self.assumptions)

    def resolve_benchmarks(
        self,
        definitions: Sequence[AnalysisDefinition],
        company_info: CompanyInfo,
    ) -> ResolvedBenchmarks:
        return BenchmarkResolver(self.benchmark_provider).resolve(definitions, company_info)

    def evaluate(
        self,
        definitions: Sequence[AnalysisDefinition],
        history: StatementHistory,
        company_info: CompanyInfo,
        benchmarks: Mapping[str, ResolvedBenchmark],
        cancel_event: Optional[threading.Event] = None,
    ) -> List[AnalysisResult]:
        """One result per eligible definition, in the order given."""
        eligible: List[AnalysisDefinition] = []
        for definition in definitions:
            if len(history) < definition.min_history:
                logger.debug(
                    "Skipping %s: needs %d period(s), have %d", definition.id, definition.min_history, len(history)
                )
                continue
            eligible.append(definition)

        catalog = MessageCatalog(company_info.language)

        def _task(definition: AnalysisDefinition) -> AnalysisResult:
            if cancel_event is not None and cancel_event.is_set():
                raise AnalysisCancelled(f"Run cancelled before '{definition.id}'.")
            return self._evaluate_one(definition, history, catalog, benchmarks.get(definition.id))

        if self.max_workers == 1 or len(eligible) < 2:
            return [_task(definition) for definition in eligible]

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [pool.submit(_task, definition) for definition in eligible]
            try:
                return [future.result() for future in futures]
            except AnalysisCancelled:
                for future in futures:
                    future.cancel()
                raise

    def summarize(
        self,
        results: Sequence[AnalysisResult],
        company_info: CompanyInfo,
        analysis_date: Optional[str] = None,
    ) -> ExecutiveSummary:
        return self.aggregator.aggregate(results, company_info, analysis_date or date.today().isoformat())

    def run(
        self,
        statements: Sequence[FinancialStatement],
        company_info: CompanyInfo,
        *,
        ids: Optional[Sequence[str]] = None,
        categories: Optional[Sequence[str]] = None,
        analysis_date: Optional[str] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> AnalysisReport:
        history = self.history(statements)
        selected = list(self.select(ids=ids, categories=categories))
        benchmarks = self.resolve_benchmarks(selected, company_info)
        results = self.evaluate(selected, history, company_info, benchmarks, cancel_event=cancel_event)
        logger.info(
            "Evaluated %d of %d selected analyses for %s (%d period(s))",
            len(results),
            len(selected),
            company_info.name,
            len(history),
        )
        summary = self.summarize(results, company_info, analysis_date)
        return AnalysisReport(executive_summary=summary, analyses=tuple(results))

    # ----------------------------
    # Single definition
    # ----------------------------

    def _evaluate_one(
        self,
        definition: AnalysisDefinition,
        history: StatementHistory,
        catalog: MessageCatalog,
        resolved: Optional[ResolvedBenchmark],
    ) -> AnalysisResult:
        text = analysis_text(definition.id, catalog.language)
        what_it_measures, meaning, benefits = catalog.context(definition.category, definition.profile)
        if resolved is None:
            resolved = ResolvedBenchmark(definition.benchmark, "static")
        common: Dict[str, Any] = {
            "id": definition.id,
            "name": text.name,
            "tier": definition.tier.value,
            "category": definition.category,
            "subcategory": catalog.category_title(definition.category),
            "definition": text.summary,
            "what_it_measures": what_it_measures,
            "meaning": meaning,
            "benefits": benefits,
            "calculation_method": text.method,
            "unit": definition.unit,
            "benchmark_source": resolved.source,
            "benchmark_fallback": resolved.fallback,
            "reference": definition.reference,
        }

        try:
            outcome = definition.compute(history)
            if isinstance(outcome, Measurement):
                value, details = float(outcome.value), dict(outcome.details)
            else:
                value, details = float(outcome), {}
            benchmark = resolved.effective(definition, history)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Analysis %s failed", definition.id)
            narrative = enrichment.failure(text.name, str(exc), catalog)
            return AnalysisResult(
                **common,
                result=NOT_APPLICABLE,
                display_value=NOT_APPLICABLE,
                interpretation=narrative.interpretation,
                industry_average=NAN,
                comparison_with_industry=catalog.text("na.comparison"),
                competitive_position=catalog.text("na.position"),
                rating=scoring.UNDETERMINED_RATING,
                recommendation=narrative.recommendation,
                status="error",
                error=f"{type(exc).__name__}: {exc}",
            )

        if not finite(value):
            narrative = enrichment.not_applicable(text.name, catalog)
            return AnalysisResult(
                **common,
                result=NOT_APPLICABLE,
                display_value=NOT_APPLICABLE,
                interpretation=narrative.interpretation,
                industry_average=benchmark,
                comparison_with_industry=catalog.text("na.comparison"),
                competitive_position=catalog.text("na.position"),
                rating=scoring.UNDETERMINED_RATING,
                recommendation=narrative.recommendation,
                status="not_applicable",
                details=details,
            )

        score = scoring.performance(value, benchmark, definition.lower_is_better, definition.negative_favourable)
        rating = scoring.rate(score)
        narrative = enrichment.enrich(definition, text.name, value, benchmark, rating, details, catalog)
        return AnalysisResult(
            **common,
            result=value,
            display_value=scoring.format_value(catalog, value, definition.unit),
            interpretation=narrative.interpretation,
            industry_average=benchmark,
            comparison_with_industry=scoring.comparison_text(catalog, value, benchmark),
            competitive_position=scoring.position_text(catalog, score),
            rating=rating,
            recommendation=narrative.recommendation,
            charts=narrative.charts,
            risks=narrative.risks,
            forecasts=narrative.forecasts,
            swot_analysis=narrative.swot,
            strategic_recommendations=narrative.strategic,
            details=details,
        )
