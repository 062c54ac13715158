from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from playwright_perf.analysis.engine import analyze
from playwright_perf.artifacts.report import write_html_report
from playwright_perf.artifacts.summary import write_summary
from playwright_perf.config.loader import load_config
from playwright_perf.config.models import AnalysisConfig
from playwright_perf.errors import MalformedReportError, MissingReportError
from playwright_perf.logging import get_logger, set_log_level
from playwright_perf.printer import render_report
from playwright_perf.report.loader import load

app = typer.Typer(add_completion=False)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
logger = get_logger(__name__)


@app.command()
def analyze_command(
    results: Optional[str] = typer.Option(
        None,
        "--results",
        help="Path to the Playwright JSON report (default: test-results/test-results.json)",
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="YAML file overriding thresholds and the report path",
    ),
    json_out: Optional[str] = typer.Option(
        None,
        "--json-out",
        help="Also write the analysis as JSON to this path",
    ),
    html_out: Optional[str] = typer.Option(
        None,
        "--html-out",
        help="Also write the analysis as an HTML page to this path",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Summarize test timing from a Playwright JSON report."""
    set_log_level(logging.DEBUG if verbose else logging.WARNING)

    try:
        settings = load_config(Path(config)) if config else AnalysisConfig()
    except Exception as exc:
        err_console.print(f"[red]Failed to load config:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    report_path = Path(results) if results else Path(settings.results_path)

    try:
        records = load(report_path)
    except MissingReportError as exc:
        err_console.print(f"❌ [red]No test results found at:[/red] {escape(str(exc.path))}")
        err_console.print(f"Run: {exc.hint}")
        raise typer.Exit(code=1)
    except MalformedReportError as exc:
        err_console.print(f"[red]Failed to read test results:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    summary = analyze(records, settings)
    render_report(summary, console)

    if json_out:
        summary_path = write_summary(Path(json_out), summary, report_path=report_path)
        logger.debug("Wrote JSON summary to %s", summary_path)
        console.print(f"Summary written to: {summary_path}")
    if html_out:
        html_path = write_html_report(Path(html_out), summary, report_path=report_path)
        logger.debug("Wrote HTML report to %s", html_path)
        console.print(f"HTML report written to: {html_path}")
