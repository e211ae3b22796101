## controller.py  (calls the service, handles logging + exit codes)
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from lh_compare.app_factory import create_app, create_report_service
from lh_compare.cli.args import CompareArgs, parse_args
from lh_compare.config.ini_config import DEFAULT_OUT, AppSettings, IniConfig

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level_name: str) -> None:
    level = logging.getLevelName((level_name or "WARNING").upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _pick(cli_value: Optional[Path], ini_value: Optional[Path], name: str, cleared) -> Optional[Path]:
    if cli_value is not None:
        return cli_value
    if name in cleared:
        return None
    return ini_value


def resolve_paths(args: CompareArgs, settings: AppSettings) -> tuple[Optional[Path], Optional[Path], Path]:
    current = _pick(args.current, settings.current_path, "current", args.cleared)
    baseline = _pick(args.baseline, settings.baseline_path, "baseline", args.cleared)
    # bare --out falls back to the default location
    out = args.out or settings.out_path or DEFAULT_OUT
    return current, baseline, out


def main(argv: Optional[Sequence[str]] = None) -> int:
    args, unknown = parse_args(argv)

    settings = IniConfig.from_path_or_default(args.config).load_settings()
    setup_logging(args.log_level or settings.log_level)

    if unknown:
        log.debug("Ignoring unrecognized arguments: %s", " ".join(unknown))

    if args.serve:
        app = create_app(settings)
        app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
        return 0

    current, baseline, out = resolve_paths(args, settings)
    log.info("Comparing current=%s baseline=%s -> %s", current, baseline, out)

    service = create_report_service(settings)
    written = service.run(current, baseline, out)
    log.info("Report ready: %s", written)
    return 0


def run(argv: Optional[List[str]] = None) -> None:
    raise SystemExit(main(argv))
