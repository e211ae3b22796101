from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from lh_compare.domain.errors import DocumentUnavailable
from lh_compare.domain.models import AuditDocument

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"non-standard JSON constant {name}")


@dataclass
class AuditRepository:
    """
    Repository pattern: encapsulates reading Lighthouse JSON results from disk.
    """
    encoding: str = "utf-8"

    def load(self, path: Optional[PathLike]) -> AuditDocument:
        if not path:
            raise DocumentUnavailable(path, "no path given")

        p = Path(path)
        try:
            raw = p.read_text(encoding=self.encoding)
        except OSError as e:
            raise DocumentUnavailable(p, f"unreadable ({e.strerror or e})") from e

        return self.parse(raw, source=p)

    def parse(self, raw: Union[str, bytes], source: Optional[PathLike] = None) -> AuditDocument:
        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except (ValueError, UnicodeDecodeError) as e:
            raise DocumentUnavailable(source, f"not valid JSON ({e})") from e

        if not isinstance(data, dict):
            raise DocumentUnavailable(source, "top-level JSON value is not an object")

        return AuditDocument.from_json(data)

    def load_optional(self, path: Optional[PathLike]) -> Optional[AuditDocument]:
        try:
            doc = self.load(path)
        except DocumentUnavailable as e:
            if path:
                log.warning("Treating audit document as absent: %s", e)
            return None

        log.info("Loaded audit document %s (url=%s)", path, doc.display_url)
        return doc

    def parse_optional(self, raw: Union[str, bytes], source: Optional[PathLike] = None) -> Optional[AuditDocument]:
        try:
            return self.parse(raw, source=source)
        except DocumentUnavailable as e:
            log.warning("Treating audit document as absent: %s", e)
            return None
