########## ini_config.py

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from lh_compare.domain.models import DEFAULT_URL

INI_DEFAULT_NAME = "lh_compare.ini"
DEFAULT_OUT = Path("lighthouse/report.md")


@dataclass(frozen=True)
class AppSettings:
    current_path: Optional[Path]
    baseline_path: Optional[Path]
    out_path: Path

    default_url: str
    log_level: str

    flask_host: str
    flask_port: int
    flask_debug: bool


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of your app/service code.
    """

    def __init__(self, ini_path: Optional[Path] = None, *, required: bool = True):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        if ini_path is None:
            return
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok and required:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_path_or_default(ini_raw: Optional[str] = None) -> "IniConfig":
        ini_raw = (ini_raw or "").strip()
        if ini_raw:
            return IniConfig(Path(ini_raw))
        # No explicit INI: use the repo-root one if present, built-in defaults otherwise
        return IniConfig(Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME, required=False)

    @property
    def ini_path(self) -> Optional[Path]:
        return self._ini_path

    def _cfg_path(self, section: str, key: str) -> Optional[Path]:
        """
        Reads an optional filesystem path from INI.
        Tries [paths] and [path] interchangeably for convenience.
        """
        sections_to_try = [section]
        if section == "paths":
            sections_to_try.append("path")
        if section == "path":
            sections_to_try.append("paths")

        for sec in sections_to_try:
            if not self._cfg.has_section(sec):
                continue
            raw = (self._cfg.get(sec, key, fallback="") or "").strip()
            if raw:
                raw = os.path.expandvars(os.path.expanduser(raw))
                return Path(raw)

        return None

    def load_settings(self) -> AppSettings:
        # Inputs are optional; a missing document only degrades the report
        current_path = self._cfg_path("paths", "current")
        baseline_path = self._cfg_path("paths", "baseline")
        out_path = self._cfg_path("paths", "out") or DEFAULT_OUT

        # Report
        default_url = (self._cfg.get("report", "default_url", fallback=DEFAULT_URL) or "").strip() or DEFAULT_URL

        # Logging
        log_level = (self._cfg.get("logging", "level", fallback="WARNING") or "").strip().upper() or "WARNING"

        # Flask
        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        return AppSettings(
            current_path=current_path,
            baseline_path=baseline_path,
            out_path=out_path,
            default_url=default_url,
            log_level=log_level,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
        )
