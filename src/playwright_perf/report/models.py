from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReportResult(BaseModel):
    duration: int = Field(ge=0)
    status: str

    model_config = ConfigDict(extra="allow")

    @field_validator("duration", mode="before")
    @classmethod
    def _round_duration(cls, value: object) -> object:
        # some reporters emit fractional milliseconds
        if isinstance(value, float) and math.isfinite(value):
            return round(value)
        return value


class ReportTest(BaseModel):
    results: list[ReportResult] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class ReportSpec(BaseModel):
    title: str
    tests: list[ReportTest] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class ReportSuite(BaseModel):
    title: str = ""
    file: str = ""
    specs: list[ReportSpec] = Field(default_factory=list)
    suites: list[ReportSuite] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class RunReport(BaseModel):
    suites: list[ReportSuite]

    model_config = ConfigDict(extra="allow")
