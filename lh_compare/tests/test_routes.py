from __future__ import annotations

import io
import json
from dataclasses import replace
from pathlib import Path

import pytest

from lh_compare.app_factory import create_app
from lh_compare.config.ini_config import IniConfig


@pytest.fixture
def settings():
    return IniConfig(None).load_settings()


def _upload(payload, name: str):
    raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    return (io.BytesIO(raw), name)


def test_create_app_copies_flask_settings(settings):
    app = create_app(replace(settings, flask_port=8123, flask_debug=True))

    assert app.config["PORT"] == 8123
    assert app.config["DEBUG"] is True
    assert app.config["HOST"] == "127.0.0.1"


def test_index_renders_configured_paths(tmp_path: Path, settings, write_json, current_payload):
    cur = write_json("cur.json", current_payload)
    app = create_app(replace(settings, current_path=cur, baseline_path=tmp_path / "missing.json"))

    resp = app.test_client().get("/")

    assert resp.status_code == 200
    assert resp.mimetype == "text/markdown"
    body = resp.get_data(as_text=True)
    assert body.startswith("### Lighthouse Summary for https://shop.example.com/")
    assert "Main (baseline)" not in body


def test_compare_with_both_uploads(settings, current_payload, baseline_payload):
    client = create_app(settings).test_client()

    resp = client.post(
        "/compare",
        data={"current": _upload(current_payload, "cur.json"), "baseline": _upload(baseline_payload, "base.json")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "| Performance | 95 | 90 | ▲ 5 |" in body
    assert body.rstrip("\n").endswith("▼ indicates better._")


def test_compare_bad_baseline_upload_is_ignored(settings, current_payload):
    client = create_app(settings).test_client()

    resp = client.post(
        "/compare",
        data={"current": _upload(current_payload, "cur.json"), "baseline": _upload(b"{oops", "base.json")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "| Category | Current |" in body
    assert "Main (baseline)" not in body


def test_compare_without_uploads_returns_placeholders(settings):
    resp = create_app(settings).test_client().post("/compare", data={}, content_type="multipart/form-data")

    assert resp.status_code == 200
    assert "| SEO | — |" in resp.get_data(as_text=True)
