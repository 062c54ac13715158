from __future__ import annotations

from typing import Sequence

from playwright_perf.config.models import (
    FAST_SAMPLE_LIMIT,
    FAST_THRESHOLD_MS,
    SLOW_THRESHOLD_MS,
    AnalysisConfig,
)
from playwright_perf.errors import EmptyDatasetError

from .models import ExecutionRecord, FileAggregate, PerformanceSummary, RunTotals


def compute_totals(records: Sequence[ExecutionRecord]) -> RunTotals:
    return RunTotals(
        count=len(records),
        total_duration=sum(record.duration for record in records),
        passed=sum(1 for record in records if record.status == "passed"),
        failed=sum(1 for record in records if record.status == "failed"),
    )


def average_duration(records: Sequence[ExecutionRecord]) -> float:
    if not records:
        raise EmptyDatasetError("No execution records to average")
    return sum(record.duration for record in records) / len(records)


def sort_by_duration(records: Sequence[ExecutionRecord]) -> list[ExecutionRecord]:
    # sorted() is stable, so equal durations keep flattened order
    return sorted(records, key=lambda record: record.duration, reverse=True)


def slow_tests(
    records: Sequence[ExecutionRecord],
    threshold_ms: int = SLOW_THRESHOLD_MS,
) -> list[ExecutionRecord]:
    return [record for record in sort_by_duration(records) if record.duration > threshold_ms]


def fast_tests(
    records: Sequence[ExecutionRecord],
    threshold_ms: int = FAST_THRESHOLD_MS,
    limit: int = FAST_SAMPLE_LIMIT,
) -> list[ExecutionRecord]:
    """Return the first ``limit`` records under the threshold in slowest-first order.

    This is the slowest end of the fast set, not the fastest tests overall.
    """
    fast = [record for record in sort_by_duration(records) if record.duration < threshold_ms]
    return fast[:limit]


def aggregate_by_file(records: Sequence[ExecutionRecord]) -> list[FileAggregate]:
    counts: dict[str, int] = {}
    totals: dict[str, int] = {}
    for record in records:
        counts[record.file] = counts.get(record.file, 0) + 1
        totals[record.file] = totals.get(record.file, 0) + record.duration
    aggregates = [
        FileAggregate(file=file, count=counts[file], total_duration=totals[file])
        for file in counts
    ]
    return sorted(aggregates, key=lambda aggregate: aggregate.total_duration, reverse=True)


def analyze(
    records: Sequence[ExecutionRecord],
    config: AnalysisConfig | None = None,
) -> PerformanceSummary:
    if config is None:
        config = AnalysisConfig()
    try:
        average: float | None = average_duration(records)
    except EmptyDatasetError:
        average = None
    return PerformanceSummary(
        totals=compute_totals(records),
        average_duration=average,
        slow=slow_tests(records, config.slow_threshold_ms),
        fast=fast_tests(records, config.fast_threshold_ms, config.fast_limit),
        by_file=aggregate_by_file(records),
        slow_threshold_ms=config.slow_threshold_ms,
        fast_threshold_ms=config.fast_threshold_ms,
        fast_limit=config.fast_limit,
    )
