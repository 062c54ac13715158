from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_RESULTS_PATH = "test-results/test-results.json"
SLOW_THRESHOLD_MS = 5000
FAST_THRESHOLD_MS = 1000
FAST_SAMPLE_LIMIT = 10


class AnalysisConfig(BaseModel):
    results_path: str = DEFAULT_RESULTS_PATH
    slow_threshold_ms: int = Field(default=SLOW_THRESHOLD_MS, ge=0)
    fast_threshold_ms: int = Field(default=FAST_THRESHOLD_MS, ge=0)
    fast_limit: int = Field(default=FAST_SAMPLE_LIMIT, ge=0)

    model_config = ConfigDict(extra="forbid")
