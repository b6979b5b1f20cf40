"""CLI command definitions for the financial statement analysis engine."""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import typer
from rich.console import Console
from rich.table import Table

from config import Config
from fsa_engine.domain.errors import AnalysisError
from fsa_engine.domain.models.results import RATINGS, AnalysisReport, AnalysisResult
from fsa_engine.domain.registry.catalogue import build_default_registry
from fsa_engine.i18n.analysis_text import analysis_text
from fsa_engine.infrastructure.db.sqlite import SQLiteRepository
from fsa_engine.infrastructure.loader import load_input
from fsa_engine.settings.loader import load_settings
from fsa_engine.utils.logging import configure_logging
from fsa_engine.workflows.graph import AnalysisWorkflow
from fsa_engine.workflows.state import AnalysisState

console = Console()
app = typer.Typer(help="Run the financial statement analysis catalogue from the terminal.")

_RATING_STYLES = {
    "excellent": "bold green",
    "very_good": "green",
    "good": "cyan",
    "acceptable": "yellow",
    "poor": "red",
}


@dataclass
class AppContext:
    """Holds reusable process-wide objects for CLI commands."""

    config: Config
    workflow: Optional[AnalysisWorkflow] = None

    def get_workflow(self) -> AnalysisWorkflow:
        if self.workflow is None:
            self.workflow = AnalysisWorkflow(config=self.config)
        return self.workflow

    def repository(self) -> SQLiteRepository:
        if self.workflow is not None and self.workflow.context.repository is not None:
            return self.workflow.context.repository
        return SQLiteRepository(
            database_uri=f"sqlite:///{self.config.database_path}",
            echo=self.config.sqlite_echo,
        )


def _init_context(debug_override: Optional[bool] = None) -> AppContext:
    """Create a context with configuration and logging; the workflow is built on first use."""
    config = load_settings(debug_override)
    configure_logging(debug=config.debug)
    return AppContext(config=config)


@app.callback()
def main_callback(
    ctx: typer.Context,
    debug: Optional[bool] = typer.Option(
        None,
        "--debug/--no-debug",
        help="Temporarily toggle verbose logging without touching environment variables.",
    ),
) -> None:
    """Attach the lazily constructed application context to Typer."""
    ctx.obj = _init_context(debug_override=debug)


@app.command()
def analyze(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with company and statements."),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Output language: en or ar."),
    categories: Optional[List[str]] = typer.Option(None, "--category", "-c", help="Restrict to a category."),
    ids: Optional[List[str]] = typer.Option(None, "--id", help="Restrict to an analysis id."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Where to write the JSON report."),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Evaluate analyses on a thread pool."),
    top: int = typer.Option(10, "--top", min=0, help="Number of best-rated analyses to print."),
) -> None:
    """Run the analysis workflow for one company and write the JSON report."""
    if ctx.obj is None:
        raise typer.Exit(code=1)

    context: AppContext = ctx.obj
    if workers is not None:
        context.config.max_workers = workers
    if language:
        context.config.language = language.lower()

    try:
        loaded = load_input(input_path, language=language, default_language=context.config.language)
    except (ValueError, OSError) as exc:
        console.print(f"[bold red]Could not load {input_path}: {exc}[/bold red]")
        raise typer.Exit(code=2)

    company = loaded.company
    console.rule(f"Analyzing {company.name} ({len(loaded.statements)} period(s))")
    workflow = context.get_workflow()
    with console.status("[bold cyan]Running analyses..."):
        result: AnalysisState = workflow.run(loaded.statements, company, ids=ids or None, categories=categories or None)

    if result.get("errors"):
        console.print("[bold red]Workflow completed with errors:[/bold red]")
        for issue in result["errors"]:
            console.print(f"- {issue}")
    else:
        console.print("[bold green]Workflow completed successfully.[/bold green]")

    report: Optional[AnalysisReport] = result.get("report")
    if report is None:
        raise typer.Exit(code=1)

    _print_overall(report)
    if top:
        _print_top(report.analyses, top)

    target = output or context.config.output_dir / f"{_slug(company.name)}_analysis.json"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(report.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(f"Report written to {target}")
    if result.get("run_id") is not None:
        console.print(f"Run recorded as #{result['run_id']}")


@app.command()
def catalogue(
    ctx: typer.Context,
    tier: Optional[str] = typer.Option(None, "--tier", help="classical, intermediate or advanced."),
    category: Optional[str] = typer.Option(None, "--category", help="Only list one category."),
) -> None:
    """List the registered analyses."""
    context: Optional[AppContext] = ctx.obj
    language = context.config.language if context is not None else "en"
    registry = build_default_registry()
    try:
        selection = registry.select(
            categories=[category] if category else None,
            tiers=[tier] if tier else None,
        )
    except (AnalysisError, ValueError) as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=2)

    table = Table(title=f"Analyses ({len(selection)})")
    table.add_column("Id", style="cyan")
    table.add_column("Name")
    table.add_column("Tier")
    table.add_column("Category")
    table.add_column("Unit")
    table.add_column("Better")
    table.add_column("Min periods", justify="right")
    table.add_column("Benchmark", justify="right")
    for definition in selection:
        table.add_row(
            definition.id,
            analysis_text(definition.id, language).name,
            definition.tier.value,
            definition.category,
            definition.unit,
            definition.polarity.value,
            str(definition.min_history),
            "reference" if definition.reference else f"{definition.benchmark:g}",
        )
    console.print(table)


@app.command()
def plan(ctx: typer.Context) -> None:
    """Display the high-level workflow path for quick operator reference."""
    if ctx.obj is None:
        raise typer.Exit(code=1)

    context: AppContext = ctx.obj
    table = Table(title="Workflow Stages")
    table.add_column("Step", style="cyan")
    table.add_column("Description")

    for idx, step in enumerate(context.get_workflow().describe_stages(), start=1):
        table.add_row(str(idx), step)

    console.print(table)


@app.command("seed-benchmarks")
def seed_benchmarks(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON mapping sector -> {analysis_id: value}."),
    source: str = typer.Option("manual", "--source", help="Label stored with every row."),
) -> None:
    """Store sector benchmark overrides in SQLite."""
    if ctx.obj is None:
        raise typer.Exit(code=1)

    context: AppContext = ctx.obj
    try:
        payload = json.loads(file.read_text(encoding="utf-8"))
    except (ValueError, OSError) as exc:
        console.print(f"[bold red]Could not read {file}: {exc}[/bold red]")
        raise typer.Exit(code=2)
    if not isinstance(payload, dict) or not all(isinstance(v, dict) for v in payload.values()):
        console.print("[bold red]Expected a JSON object of sector -> {analysis_id: value}.[/bold red]")
        raise typer.Exit(code=2)

    registry = build_default_registry()
    repository = context.repository()
    total = 0
    for sector, values in payload.items():
        unknown = sorted(key for key in values if key not in registry)
        if unknown:
            console.print(f"[yellow]{sector}: ignoring unknown ids {', '.join(unknown)}[/yellow]")
        known: Dict[str, float] = {key: float(value) for key, value in values.items() if key in registry}
        written = repository.upsert_benchmarks(sector, known, source=source)
        console.print(f"{sector}: {written} benchmark(s) stored")
        total += written
    console.print(f"[bold green]{total} benchmark override(s) stored.[/bold green]")


@app.command()
def history(
    ctx: typer.Context,
    company: Optional[str] = typer.Option(None, "--company", help="Only show runs for this company."),
    limit: int = typer.Option(20, "--limit", min=1, help="Maximum number of runs."),
) -> None:
    """Show previously recorded runs."""
    if ctx.obj is None:
        raise typer.Exit(code=1)

    context: AppContext = ctx.obj
    runs = context.repository().fetch_runs(company=company, limit=limit)
    if not runs:
        console.print("No recorded runs.")
        return

    table = Table(title="Recorded Runs")
    table.add_column("Id", style="cyan", justify="right")
    table.add_column("Company")
    table.add_column("Sector")
    table.add_column("Date")
    table.add_column("Total", justify="right")
    for rating in RATINGS:
        table.add_column(rating.replace("_", " ").title(), justify="right")
    table.add_column("N/A", justify="right")
    table.add_column("Errors", justify="right")
    for run in runs:
        table.add_row(
            str(run["id"]),
            run["company"],
            run["sector"] or "",
            run["analysis_date"],
            str(run["total_analyses"]),
            *(str(run[f"{rating}_count"]) for rating in RATINGS),
            str(run["not_applicable_count"]),
            str(run["error_count"]),
        )
    console.print(table)


def _print_overall(report: AnalysisReport) -> None:
    """Pretty-print the rating tally for operators."""
    summary = report.executive_summary
    totals = summary.overall_results
    table = Table(show_header=True, header_style="bold magenta", title=summary.analysis_type)
    table.add_column("Key")
    table.add_column("Value")

    table.add_row("Company", summary.company_info.name)
    table.add_row("Analysis Date", summary.analysis_date)
    table.add_row("Total", str(totals.total_analyses))
    table.add_row("Excellent", str(totals.excellent_count))
    table.add_row("Very Good", str(totals.very_good_count))
    table.add_row("Good", str(totals.good_count))
    table.add_row("Acceptable", str(totals.acceptable_count))
    table.add_row("Poor", str(totals.poor_count))
    table.add_row("Not Applicable", str(totals.not_applicable_count))
    table.add_row("Errors", str(totals.error_count))

    console.print(table)


def _print_top(results: Sequence[AnalysisResult], limit: int) -> None:
    ranked = sorted(
        (r for r in results if r.is_applicable and not r.reference),
        key=lambda r: RATINGS.index(r.rating),
    )[:limit]
    if not ranked:
        return
    table = Table(title=f"Top {len(ranked)} analyses")
    table.add_column("Id", style="cyan")
    table.add_column("Name")
    table.add_column("Value", justify="right")
    table.add_column("Comparison")
    table.add_column("Rating")
    for result in ranked:
        style = _RATING_STYLES.get(result.rating, "")
        table.add_row(
            result.id,
            result.name,
            result.display_value,
            result.comparison_with_industry,
            f"[{style}]{result.rating}[/{style}]" if style else result.rating,
        )
    console.print(table)


def _slug(name: str) -> str:
    return re.sub(r"[^\w-]+", "_", name.strip()).strip("_").lower() or "company"
