from __future__ import annotations

from typing import Optional

from ..core.constants import LATE_THRESHOLD_HOURS
from .time_parser import clock_hours


def is_late(check_in: Optional[str]) -> bool:
    """Check-in strictly after 09:30. A missing check-in is never late."""
    hours = clock_hours(check_in)
    if hours is None:
        return False
    return hours > LATE_THRESHOLD_HOURS
