from __future__ import annotations

from typing import Optional

from flask import Flask

from lh_compare.config.ini_config import AppSettings, IniConfig
from lh_compare.repositories.audit_repository import AuditRepository
from lh_compare.repositories.report_repository import ReportRepository
from lh_compare.services.report_service import ReportService
from lh_compare.web.routes import create_blueprint


def create_report_service(settings: AppSettings) -> ReportService:
    return ReportService(
        audit_repo=AuditRepository(),
        report_repo=ReportRepository(),
        default_url=settings.default_url,
    )


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_path_or_default().load_settings()

    report_service = create_report_service(settings)

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(report_service, settings))

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug

    return app

# Composition root
#
# lh_compare/
#   __main__.py            python -m lh_compare
#   app_factory.py         wiring: settings -> repositories -> ReportService -> Flask app
#   config/ini_config.py   INI -> AppSettings
#   domain/                AuditDocument, MetricRow, ComparisonReport, DocumentUnavailable
#   repositories/          read Lighthouse JSON, write the Markdown summary
#   services/              cell formatting + ReportService
#   cli/                   argparse -> CompareArgs, controller
#   web/routes.py          GET / and POST /compare
#
# Request flow (CLI): args -> settings -> ReportService.run -> AuditRepository.load_optional (x2)
#   -> render_report -> ComparisonReport.to_markdown -> ReportRepository.write
