######## models.py
########

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

DEFAULT_URL = "http://localhost:8080"

CATEGORY_KEYS = ("performance", "accessibility", "best-practices", "seo")

AUDIT_IDS = (
    "first-contentful-paint",
    "largest-contentful-paint",
    "total-blocking-time",
    "speed-index",
    "cumulative-layout-shift",
    "interactive",
)


def _as_number(raw: Any) -> Optional[float]:
    # bool is an int subclass; Lighthouse never reports scores as booleans
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    try:
        value = float(raw)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None


def _as_text(raw: Any) -> Optional[str]:
    if isinstance(raw, str) and raw.strip():
        return raw
    return None


def _child(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


@dataclass(frozen=True)
class AuditDocument:
    """
    Read-only view over one Lighthouse JSON result.
    Only the fields the report needs are kept; everything else is dropped.
    """
    final_displayed_url: Optional[str] = None
    requested_url: Optional[str] = None
    categories: Mapping[str, Optional[float]] = field(default_factory=dict)
    audits: Mapping[str, Optional[float]] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AuditDocument":
        categories_raw = _child(data, "categories")
        audits_raw = _child(data, "audits")

        categories = {
            key: _as_number(_child(_child(categories_raw, key), "score"))
            for key in CATEGORY_KEYS
        }
        audits = {
            audit_id: _as_number(_child(_child(audits_raw, audit_id), "numericValue"))
            for audit_id in AUDIT_IDS
        }

        return cls(
            final_displayed_url=_as_text(_child(data, "finalDisplayedUrl")),
            requested_url=_as_text(_child(data, "requestedUrl")),
            categories=categories,
            audits=audits,
        )

    @property
    def display_url(self) -> Optional[str]:
        return self.final_displayed_url or self.requested_url

    def score(self, category_key: str) -> Optional[float]:
        return self.categories.get(category_key)

    def metric(self, audit_id: str) -> Optional[float]:
        return self.audits.get(audit_id)


@dataclass(frozen=True)
class MetricRow:
    label: str
    current: str
    baseline: Optional[str] = None   # None in current-only mode
    delta: Optional[str] = None

    def cells(self, with_baseline: bool) -> Tuple[str, ...]:
        if not with_baseline:
            return (self.label, self.current)
        return (self.label, self.current, self.baseline or "", self.delta or "")


def markdown_table(header: Tuple[str, ...], rows: list[Tuple[str, ...]]) -> str:
    head = f"| {' | '.join(header)} |\n| {' | '.join('-' for _ in header)} |\n"
    return head + "\n".join(f"| {' | '.join(r)} |" for r in rows) + "\n"


@dataclass(frozen=True)
class ComparisonReport:
    url: str
    has_baseline: bool
    category_rows: Tuple[MetricRow, ...]
    metric_rows: Tuple[MetricRow, ...]

    NOTE = "_Note: ▲ indicates a worse value (higher time / lower score), ▼ indicates better._\n"

    def to_markdown(self) -> str:
        if self.has_baseline:
            category_header = ("Category", "Current", "Main (baseline)", "Δ (pts)")
            metric_header = ("Metric", "Current", "Main (baseline)", "Δ")
        else:
            category_header = ("Category", "Current")
            metric_header = ("Metric", "Current")

        md = f"### Lighthouse Summary for {self.url}\n\n"
        md += "**Category Scores**\n\n"
        md += markdown_table(category_header, [r.cells(self.has_baseline) for r in self.category_rows])
        md += "\n**Key Metrics**\n\n"
        md += markdown_table(metric_header, [r.cells(self.has_baseline) for r in self.metric_rows])
        if self.has_baseline:
            md += self.NOTE
        return md
