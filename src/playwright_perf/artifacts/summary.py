from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from playwright_perf import __version__ as tool_version
from playwright_perf.analysis.models import ExecutionRecord, PerformanceSummary


def _record(record: ExecutionRecord) -> dict[str, object]:
    return {
        "file": record.file,
        "suite": record.suite,
        "name": record.name,
        "duration_ms": record.duration,
        "status": record.status,
    }


def build_summary(
    summary: PerformanceSummary,
    *,
    report_path: Path,
    generated_at: datetime | None = None,
) -> dict[str, object]:
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)
    totals = summary.totals
    return {
        "schema_version": 1,
        "generated_at": generated_at.isoformat().replace("+00:00", "Z"),
        "tool_version": tool_version,
        "report_path": str(report_path),
        "thresholds": {
            "slow_ms": summary.slow_threshold_ms,
            "fast_ms": summary.fast_threshold_ms,
            "fast_limit": summary.fast_limit,
        },
        "totals": {
            "tests": totals.count,
            "passed": totals.passed,
            "failed": totals.failed,
            "other": totals.other,
            "duration_ms": totals.total_duration,
            "average_ms": summary.average_duration,
        },
        "slow": [_record(record) for record in summary.slow],
        "fast": [_record(record) for record in summary.fast],
        "by_file": [
            {
                "file": aggregate.file,
                "tests": aggregate.count,
                "duration_ms": aggregate.total_duration,
                "average_ms": aggregate.average_duration,
            }
            for aggregate in summary.by_file
        ],
    }


def write_summary(
    path: Path,
    summary: PerformanceSummary,
    *,
    report_path: Path,
    generated_at: datetime | None = None,
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = build_summary(summary, report_path=report_path, generated_at=generated_at)
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return path
