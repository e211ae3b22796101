from .report_service import ReportService, render_report
from .formatting import (
    PLACEHOLDER,
    format_millis,
    format_score,
    format_unitless,
    millis_delta,
    score_delta,
    unitless_delta,
)

__all__ = [
    "ReportService",
    "render_report",
    "PLACEHOLDER",
    "format_score",
    "format_millis",
    "format_unitless",
    "score_delta",
    "millis_delta",
    "unitless_delta",
]
