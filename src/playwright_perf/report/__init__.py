from .loader import flatten, load, load_report
from .models import ReportResult, ReportSpec, ReportSuite, ReportTest, RunReport

__all__ = [
    "ReportResult",
    "ReportSpec",
    "ReportSuite",
    "ReportTest",
    "RunReport",
    "flatten",
    "load",
    "load_report",
]
