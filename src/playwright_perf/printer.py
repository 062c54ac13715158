from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from playwright_perf.analysis.models import ExecutionRecord, PerformanceSummary

RULE_WIDTH = 80


def _seconds(duration_ms: float) -> str:
    return f"{duration_ms / 1000:.2f}s"


def _threshold(duration_ms: int) -> str:
    seconds = f"{duration_ms / 1000:g}"
    return f"{seconds} second" if seconds == "1" else f"{seconds} seconds"


def _record_line(index: int, record: ExecutionRecord) -> str:
    return f"{index}. [{_seconds(record.duration)}] {escape(record.suite)} › {escape(record.name)}"


def render_report(summary: PerformanceSummary, console: Console) -> None:
    totals = summary.totals
    average = "n/a" if summary.average_duration is None else _seconds(summary.average_duration)

    console.print("📊 [bold]TEST PERFORMANCE ANALYSIS[/bold]")
    console.print("=" * RULE_WIDTH)
    console.print(f"Total Tests: {totals.count}")
    console.print(f"✅ Passed: [green]{totals.passed}[/green]")
    console.print(f"❌ Failed: [red]{totals.failed}[/red]")
    console.print(f"⏱️  Total Duration: {_seconds(totals.total_duration)}")
    console.print(f"📈 Average Duration: {average}")
    console.print("")

    if summary.is_empty:
        console.print("[yellow]No tests found in report.[/yellow]")
        return

    console.print(f"🐌 SLOWEST TESTS (> {_threshold(summary.slow_threshold_ms)}):")
    console.print("-" * RULE_WIDTH)
    for index, record in enumerate(summary.slow, start=1):
        console.print(_record_line(index, record), soft_wrap=True)
        console.print(f"   File: {escape(record.file)}", soft_wrap=True)
    console.print("")

    console.print(f"⚡ FASTEST TESTS (< {_threshold(summary.fast_threshold_ms)}):")
    console.print("-" * RULE_WIDTH)
    for index, record in enumerate(summary.fast, start=1):
        console.print(_record_line(index, record), soft_wrap=True)
    console.print("")

    console.print("📂 PERFORMANCE BY TEST FILE:")
    console.print("-" * RULE_WIDTH)
    for aggregate in summary.by_file:
        console.print(
            f"{escape(aggregate.file)}: {aggregate.count} tests, "
            f"{_seconds(aggregate.total_duration)} total, {_seconds(aggregate.average_duration)} avg",
            soft_wrap=True,
        )
