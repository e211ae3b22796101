from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import pytest


def lighthouse_json(
    *,
    url: Optional[str] = "https://example.com/",
    scores: Optional[dict] = None,
    metrics: Optional[dict] = None,
) -> dict:
    """Minimal Lighthouse result with just the fields the report reads."""
    data: dict = {
        "categories": {k: {"score": v} for k, v in (scores or {}).items()},
        "audits": {k: {"numericValue": v} for k, v in (metrics or {}).items()},
    }
    if url is not None:
        data["finalDisplayedUrl"] = url
    return data


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, payload) -> Path:
        p = tmp_path / name
        p.write_text(json.dumps(payload), encoding="utf-8")
        return p
    return _write


@pytest.fixture
def current_payload() -> dict:
    return lighthouse_json(
        url="https://shop.example.com/",
        scores={"performance": 0.95, "accessibility": 0.88, "best-practices": 1, "seo": 0.9},
        metrics={
            "first-contentful-paint": 812.4,
            "largest-contentful-paint": 2050,
            "total-blocking-time": 120,
            "speed-index": 1500.5,
            "cumulative-layout-shift": 0.0834,
            "interactive": 3100,
        },
    )


@pytest.fixture
def baseline_payload() -> dict:
    return lighthouse_json(
        url="https://shop.example.com/",
        scores={"performance": 0.90, "accessibility": 0.88, "best-practices": 0.92, "seo": 0.95},
        metrics={
            "first-contentful-paint": 900,
            "largest-contentful-paint": 2500,
            "total-blocking-time": 80,
            "speed-index": 1500.5,
            "cumulative-layout-shift": 0.1,
            "interactive": 3000,
        },
    )


@pytest.fixture
def make_lighthouse():
    return lighthouse_json
