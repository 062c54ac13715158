from __future__ import annotations

from pathlib import Path

REGENERATE_HINT = "npx playwright test --project=chromium"


class PerfReportError(Exception):
    """Base class for failures while loading or analyzing a run report."""


class MissingReportError(PerfReportError, FileNotFoundError):
    def __init__(self, path: Path, hint: str = REGENERATE_HINT) -> None:
        self.path = path
        self.hint = hint
        super().__init__(f"No test results found at {path}. Run: {hint}")


class MalformedReportError(PerfReportError, ValueError):
    pass


class EmptyDatasetError(PerfReportError):
    pass
