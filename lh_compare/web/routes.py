## routes.py
from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from lh_compare.config.ini_config import AppSettings
from lh_compare.services.report_service import ReportService

MARKDOWN_MIMETYPE = "text/markdown"


def _markdown(text: str, code: int = 200) -> Response:
    return Response(text, status=code, mimetype=MARKDOWN_MIMETYPE)


def create_blueprint(report_service: ReportService, settings: AppSettings) -> Blueprint:
    bp = Blueprint("web", __name__)

    @bp.get("/")
    def index():
        report = report_service.compare_files(settings.current_path, settings.baseline_path)
        current_app.logger.info("Rendered configured report for %s (baseline=%s)", report.url, report.has_baseline)
        return _markdown(report.to_markdown())

    @bp.post("/compare")
    def compare():
        current_file = request.files.get("current")
        baseline_file = request.files.get("baseline")

        audit_repo = report_service.audit_repo
        current = audit_repo.parse_optional(current_file.read(), source=current_file.filename) if current_file else None
        baseline = audit_repo.parse_optional(baseline_file.read(), source=baseline_file.filename) if baseline_file else None

        report = report_service.render(current, baseline)
        current_app.logger.info("Compared uploads for %s (baseline=%s)", report.url, report.has_baseline)
        return _markdown(report.to_markdown())

    return bp
