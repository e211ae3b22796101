from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from lh_compare.domain.models import DEFAULT_URL, AuditDocument, ComparisonReport, MetricRow
from lh_compare.repositories.audit_repository import AuditRepository, PathLike
from lh_compare.repositories.report_repository import ReportRepository
from lh_compare.services.formatting import (
    format_millis,
    format_score,
    format_unitless,
    millis_delta,
    score_delta,
    unitless_delta,
)

log = logging.getLogger(__name__)

Formatter = Callable[[Optional[float]], str]
Differ = Callable[[Optional[float], Optional[float]], str]

# (label, category key)
CATEGORIES = (
    ("Performance", "performance"),
    ("Accessibility", "accessibility"),
    ("Best Practices", "best-practices"),
    ("SEO", "seo"),
)

# (label, audit id, formatter, delta)
METRICS: tuple[tuple[str, str, Formatter, Differ], ...] = (
    ("FCP", "first-contentful-paint", format_millis, millis_delta),
    ("LCP", "largest-contentful-paint", format_millis, millis_delta),
    ("TBT", "total-blocking-time", format_millis, millis_delta),
    ("Speed Index", "speed-index", format_millis, millis_delta),
    ("CLS", "cumulative-layout-shift", format_unitless, unitless_delta),
    ("TTI", "interactive", format_millis, millis_delta),
)


def _score(doc: Optional[AuditDocument], key: str) -> Optional[float]:
    return doc.score(key) if doc else None


def _metric(doc: Optional[AuditDocument], audit_id: str) -> Optional[float]:
    return doc.metric(audit_id) if doc else None


def render_report(
    current: Optional[AuditDocument],
    baseline: Optional[AuditDocument],
    *,
    default_url: str = DEFAULT_URL,
) -> ComparisonReport:
    has_baseline = baseline is not None
    url = (current.display_url if current else None) or default_url

    category_rows = []
    for label, key in CATEGORIES:
        cv = _score(current, key)
        if has_baseline:
            bv = _score(baseline, key)
            category_rows.append(MetricRow(label, format_score(cv), format_score(bv), score_delta(cv, bv)))
        else:
            category_rows.append(MetricRow(label, format_score(cv)))

    metric_rows = []
    for label, audit_id, fmt, delta in METRICS:
        cv = _metric(current, audit_id)
        if has_baseline:
            bv = _metric(baseline, audit_id)
            metric_rows.append(MetricRow(label, fmt(cv), fmt(bv), delta(cv, bv)))
        else:
            metric_rows.append(MetricRow(label, fmt(cv)))

    return ComparisonReport(
        url=url,
        has_baseline=has_baseline,
        category_rows=tuple(category_rows),
        metric_rows=tuple(metric_rows),
    )


@dataclass
class ReportService:
    """
    Service layer: load both audits, build the comparison, write it out.
    Keeps the CLI and web entry points thin.
    """
    audit_repo: AuditRepository
    report_repo: ReportRepository
    default_url: str = DEFAULT_URL

    def render(self, current: Optional[AuditDocument], baseline: Optional[AuditDocument]) -> ComparisonReport:
        return render_report(current, baseline, default_url=self.default_url)

    def compare_files(self, current_path: Optional[PathLike], baseline_path: Optional[PathLike]) -> ComparisonReport:
        current = self.audit_repo.load_optional(current_path)
        baseline = self.audit_repo.load_optional(baseline_path)

        if current is None:
            log.warning("No current audit document; report will contain placeholders only.")

        return self.render(current, baseline)

    def run(
        self,
        current_path: Optional[PathLike],
        baseline_path: Optional[PathLike],
        out_path: Path,
    ) -> Path:
        report = self.compare_files(current_path, baseline_path)
        return self.report_repo.write(out_path, report.to_markdown())
