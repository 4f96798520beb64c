from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as decided by the upstream device export."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
