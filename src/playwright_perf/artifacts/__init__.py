from .report import write_html_report
from .summary import build_summary, write_summary

__all__ = ["build_summary", "write_html_report", "write_summary"]
