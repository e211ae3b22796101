import pytest

from lh_compare.domain.models import AUDIT_IDS, CATEGORY_KEYS, AuditDocument, MetricRow, markdown_table
from lh_compare.services.report_service import render_report


def test_from_json_tolerates_missing_sections():
    doc = AuditDocument.from_json({})

    assert doc.display_url is None
    assert all(doc.score(k) is None for k in CATEGORY_KEYS)
    assert all(doc.metric(a) is None for a in AUDIT_IDS)


def test_from_json_tolerates_wrong_shapes():
    doc = AuditDocument.from_json(
        {
            "categories": {"performance": None, "seo": "high", "accessibility": {"score": True}},
            "audits": ["not", "a", "dict"],
            "finalDisplayedUrl": 123,
        }
    )

    assert doc.score("performance") is None
    assert doc.score("seo") is None
    assert doc.score("accessibility") is None
    assert doc.metric("interactive") is None
    assert doc.display_url is None


def test_display_url_prefers_final_then_requested():
    assert AuditDocument.from_json({"finalDisplayedUrl": "https://a/", "requestedUrl": "https://b/"}).display_url == "https://a/"
    assert AuditDocument.from_json({"requestedUrl": "https://b/"}).display_url == "https://b/"
    assert AuditDocument.from_json({"finalDisplayedUrl": "  ", "requestedUrl": "https://b/"}).display_url == "https://b/"


def test_unknown_keys_are_ignored():
    doc = AuditDocument.from_json({"categories": {"pwa": {"score": 1}}})
    assert doc.score("pwa") is None


def test_metric_row_cells():
    row = MetricRow("LCP", "2050 ms", "2500 ms", "▼ 450 ms")
    assert row.cells(with_baseline=True) == ("LCP", "2050 ms", "2500 ms", "▼ 450 ms")
    assert row.cells(with_baseline=False) == ("LCP", "2050 ms")


def test_markdown_table_layout():
    text = markdown_table(("A", "B"), [("1", "2"), ("3", "4")])
    assert text == "| A | B |\n| - | - |\n| 1 | 2 |\n| 3 | 4 |\n"


@pytest.mark.parametrize(
    "raw",
    [
        float("nan"),
        float("inf"),
        float("-inf"),
        10 ** 401,
    ],
)
def test_from_json_drops_non_finite_numbers(raw):
    doc = AuditDocument.from_json(
        {
            "categories": {"performance": {"score": raw}},
            "audits": {"largest-contentful-paint": {"numericValue": raw}},
        }
    )

    assert doc.score("performance") is None
    assert doc.metric("largest-contentful-paint") is None
    assert render_report(doc, doc).to_markdown().count("| LCP | — | — | — |") == 1
