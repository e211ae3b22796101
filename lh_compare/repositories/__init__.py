from .audit_repository import AuditRepository
from .report_repository import ReportRepository

__all__ = [
    "AuditRepository",
    "ReportRepository",
]
