"""
Cell formatting and delta indicators for the summary tables.

Every function here is total: an absent value yields PLACEHOLDER instead of raising.
Deltas are current minus baseline; a rise is always shown as UP.
"""
from __future__ import annotations

import math
from typing import Optional

PLACEHOLDER = "—"
UP = "▲"
DOWN = "▼"
NEUTRAL = "±0"


def round_half_up(x: float) -> int:
    # builtin round() rounds .5 to even; JS Math.round rounds it up
    return int(math.floor(x + 0.5))


def _indicator(d: float, magnitude: str) -> str:
    return f"{UP if d > 0 else DOWN} {magnitude}"


def format_score(x: Optional[float]) -> str:
    if x is None:
        return PLACEHOLDER
    return str(round_half_up(x * 100))


def format_millis(x: Optional[float]) -> str:
    if x is None:
        return PLACEHOLDER
    return f"{round_half_up(x)} ms"


def format_unitless(x: Optional[float]) -> str:
    if x is None:
        return PLACEHOLDER
    return f"{x:.3f}"


def score_delta(a: Optional[float], b: Optional[float]) -> str:
    """
    Difference in whole percentage points. Each side is rounded first,
    so the result can be 1 off the unrounded difference.
    """
    if a is None or b is None:
        return PLACEHOLDER
    d = round_half_up(a * 100) - round_half_up(b * 100)
    if d == 0:
        return NEUTRAL
    return _indicator(d, str(abs(d)))


def millis_delta(a: Optional[float], b: Optional[float]) -> str:
    if a is None or b is None:
        return PLACEHOLDER
    d = round_half_up(a - b)
    if d == 0:
        return f"{NEUTRAL} ms"
    return _indicator(d, f"{abs(d)} ms")


def unitless_delta(a: Optional[float], b: Optional[float]) -> str:
    if a is None or b is None:
        return PLACEHOLDER
    d = round(a - b, 3)
    if d == 0:
        return f"{NEUTRAL}.000"
    return _indicator(d, f"{abs(d):.3f}")
