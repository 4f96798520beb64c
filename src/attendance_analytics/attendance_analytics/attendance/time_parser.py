"""Clock-time parsing.

Device exports carry times as "H:MM" or "H:MM:SS" strings, with "" or "N/A"
when nothing was recorded. ``parse_clock_time`` keeps the historic numeric
contract (sentinel -> 0.0, garbage -> NaN); new code should go through
``clock_hours`` which returns ``None`` for a sentinel so that a genuine
midnight punch is never mistaken for a missing one.
"""

from __future__ import annotations

import math
from typing import Optional

from ..core.constants import MISSING_VALUES


def is_missing_time(value: Optional[str]) -> bool:
    if value is None:
        return True
    return str(value).strip() in MISSING_VALUES


def parse_clock_time(value: Optional[str]) -> float:
    """Fractional hours of a clock string: hours + minutes/60 + seconds/3600.

    Sentinel or empty input -> 0.0. Malformed components yield NaN instead
    of raising.
    """

    if is_missing_time(value):
        return 0.0

    parts = str(value).strip().split(":")
    hours = _component(parts[0])
    minutes = _component(parts[1]) if len(parts) > 1 else math.nan
    seconds = _component(parts[2]) if len(parts) > 2 else 0.0
    if math.isnan(seconds):
        seconds = 0.0
    return hours + minutes / 60 + seconds / 3600


def clock_hours(value: Optional[str]) -> Optional[float]:
    """Like ``parse_clock_time`` but ``None`` when no time was recorded."""
    if is_missing_time(value):
        return None
    return parse_clock_time(value)


def _component(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan
