from __future__ import annotations

import io

from rich.console import Console

from playwright_perf.analysis.engine import analyze
from playwright_perf.analysis.models import ExecutionRecord
from playwright_perf.printer import render_report


def _render(records: list[ExecutionRecord], width: int = 200) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, color_system=None, highlight=False)
    render_report(analyze(records), console)
    return buffer.getvalue()


def test_render_report_sections_in_order() -> None:
    output = _render(
        [
            ExecutionRecord(file="tests/a.spec.ts", suite="Filters", name="shows active", duration=6000, status="passed"),
            ExecutionRecord(file="tests/a.spec.ts", suite="Filters", name="shows all", duration=500, status="passed"),
            ExecutionRecord(file="tests/b.spec.ts", suite="Editing", name="saves on blur", duration=9000, status="failed"),
        ]
    )

    assert "Total Tests: 3" in output
    assert "Passed: 2" in output
    assert "Failed: 1" in output
    assert "Total Duration: 15.50s" in output
    assert "Average Duration: 5.17s" in output
    assert "1. [9.00s] Editing › saves on blur" in output
    assert "2. [6.00s] Filters › shows active" in output
    assert "File: tests/b.spec.ts" in output
    assert "1. [0.50s] Filters › shows all" in output
    assert "tests/b.spec.ts" in output.split("PERFORMANCE BY TEST FILE")[1]

    positions = [
        output.index("TEST PERFORMANCE ANALYSIS"),
        output.index("SLOWEST TESTS (> 5 seconds)"),
        output.index("FASTEST TESTS (< 1 second)"),
        output.index("PERFORMANCE BY TEST FILE"),
    ]
    assert positions == sorted(positions)


def test_render_report_prints_titles_literally() -> None:
    output = _render(
        [ExecutionRecord(file="a.spec.ts", suite="[bold]Suite", name="handles [red]tags", duration=7000, status="passed")]
    )

    assert "[bold]Suite › handles [red]tags" in output


def test_render_report_empty_dataset() -> None:
    output = _render([])

    assert "Total Tests: 0" in output
    assert "Average Duration: n/a" in output
    assert "No tests found in report." in output
    assert "SLOWEST TESTS" not in output


def test_render_report_keeps_long_file_paths_whole() -> None:
    long_file = "tests/" + "deeply/nested/" * 8 + "todomvc_performance.spec.ts"
    output = _render(
        [ExecutionRecord(file=long_file, suite="Perf", name="renders", duration=100, status="passed")],
        width=80,
    )

    by_file = output.split("PERFORMANCE BY TEST FILE")[1]
    assert f"{long_file}: 1 tests, 0.10s total, 0.10s avg" in by_file
    assert "…" not in output
