from .engine import (
    aggregate_by_file,
    analyze,
    average_duration,
    compute_totals,
    fast_tests,
    slow_tests,
    sort_by_duration,
)
from .models import ExecutionRecord, FileAggregate, PerformanceSummary, RunTotals

__all__ = [
    "ExecutionRecord",
    "FileAggregate",
    "PerformanceSummary",
    "RunTotals",
    "aggregate_by_file",
    "analyze",
    "average_duration",
    "compute_totals",
    "fast_tests",
    "slow_tests",
    "sort_by_duration",
]
