from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionRecord:
    file: str
    suite: str
    name: str
    duration: int
    status: str


@dataclass(frozen=True)
class FileAggregate:
    file: str
    count: int
    total_duration: int

    @property
    def average_duration(self) -> float:
        return self.total_duration / self.count


@dataclass(frozen=True)
class RunTotals:
    count: int
    total_duration: int
    passed: int
    failed: int

    @property
    def other(self) -> int:
        return self.count - self.passed - self.failed


@dataclass(frozen=True)
class PerformanceSummary:
    totals: RunTotals
    average_duration: float | None
    slow: list[ExecutionRecord]
    fast: list[ExecutionRecord]
    by_file: list[FileAggregate]
    slow_threshold_ms: int
    fast_threshold_ms: int
    fast_limit: int

    @property
    def is_empty(self) -> bool:
        return self.totals.count == 0
