from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class DocumentUnavailable(Exception):
    """An audit document is missing, unreadable, or not a JSON object."""

    def __init__(self, path: Optional[Union[str, Path]], reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path or '<no path>'}: {reason}")
