from __future__ import annotations

from .calculator.factory import compute_working_hours
from .lateness import is_late
from .model import AttendanceRecord, DerivedDayMetrics


def derive_day_metrics(record: AttendanceRecord) -> DerivedDayMetrics:
    """Per-row facts shown next to a record in the attendance table."""
    return DerivedDayMetrics(
        working_hours=compute_working_hours(record, cap_to_policy_max=True),
        working_hours_uncapped=compute_working_hours(record, cap_to_policy_max=False),
        is_late=is_late(record.check_in),
    )
