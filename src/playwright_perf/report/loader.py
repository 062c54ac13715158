from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from playwright_perf.analysis.models import ExecutionRecord
from playwright_perf.errors import MalformedReportError, MissingReportError
from playwright_perf.logging import get_logger

from .models import ReportSuite, RunReport

logger = get_logger(__name__)


def load_report(path: Path) -> RunReport:
    if not path.is_file():
        raise MissingReportError(path)
    logger.debug("Reading run report from %s", path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise MissingReportError(path) from exc
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise MalformedReportError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedReportError(f"Expected a JSON object at the top level of {path}")
    try:
        return RunReport.model_validate(data)
    except (ValidationError, RecursionError) as exc:
        raise MalformedReportError(f"Unexpected report shape in {path}: {exc}") from exc


def _walk(suite: ReportSuite, file: str) -> Iterator[ExecutionRecord]:
    for spec in suite.specs:
        for test in spec.tests:
            for result in test.results:
                yield ExecutionRecord(
                    file=file,
                    suite=suite.title,
                    name=spec.title,
                    duration=result.duration,
                    status=result.status,
                )
    for child in suite.suites:
        yield from _walk(child, file)


def flatten(report: RunReport) -> list[ExecutionRecord]:
    """Project the suite tree onto one record per (spec, result) pair.

    Suites are walked depth-first; at each suite its own specs come before its
    child suites, and every list keeps its source order. ``file`` always comes
    from the top-level suite.
    """
    records: list[ExecutionRecord] = []
    for file_suite in report.suites:
        records.extend(_walk(file_suite, file_suite.file))
    return records


def load(path: Path) -> list[ExecutionRecord]:
    records = flatten(load_report(path))
    logger.debug("Flattened %d execution records from %s", len(records), path)
    return records
