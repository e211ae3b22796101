from .errors import DocumentUnavailable
from .models import AuditDocument, ComparisonReport, MetricRow

__all__ = [
    "AuditDocument",
    "ComparisonReport",
    "DocumentUnavailable",
    "MetricRow",
]
