from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)


@dataclass
class ReportRepository:
    """
    Repository pattern: owns where the rendered summary lands on disk.
    Writes are plain overwrites; a failed write can leave a partial file.
    """
    encoding: str = "utf-8"

    def write(self, out_path: Path, text: str) -> Path:
        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding=self.encoding)
        log.info("Wrote report to %s (%d chars)", out_path, len(text))
        return out_path
