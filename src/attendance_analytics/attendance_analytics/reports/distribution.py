"""Histogram bucketing of check-in/check-out times.

Every record lands in exactly one bucket per binner. Bucket order is part of
the contract: chart colours are assigned by position.
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.lateness import is_late
from ..attendance.model import AttendanceRecord, BucketCount
from ..attendance.time_parser import clock_hours
from ..core.enums import AttendanceStatus

# (exclusive upper bound, label); values past the last bound (or NaN) go to the overflow label.
CHECK_IN_BUCKETS: tuple[tuple[float, str], ...] = (
    (8.0, "Before 8 AM"),
    (9.0, "8:00–8:59 AM"),
    (9.5, "9:00–9:29 AM"),
    (10.5, "9:30–10:29 AM (Late)"),
    (11.5, "10:30–11:29 AM (Late)"),
    (12.5, "11:30 AM–12:29 PM (Late)"),
)
CHECK_IN_OVERFLOW = "After 12:30 PM (Late)"
CHECK_IN_MISSING = "Missing Check-In"

CHECK_OUT_BUCKETS: tuple[tuple[float, str], ...] = (
    (17.0, "Before 5:00 PM (Missed)"),
    (18.0, "5:00–6:00 PM"),
    (19.0, "6:00–7:00 PM (OT)"),
    (20.0, "7:00–8:00 PM (OT)"),
)
CHECK_OUT_OVERFLOW = "After 8:00 PM (OT)"
CHECK_OUT_MISSING = "Missing Check-Out"

PRESENT_ON_TIME = "Present (On Time)"
PRESENT_LATE = "Present (Late)"
ABSENT = "Absent"


def bucket_for(
    value: Optional[str],
    buckets: Sequence[tuple[float, str]],
    *,
    overflow: str,
    missing: str,
) -> str:
    hours = clock_hours(value)
    if hours is None:
        return missing
    for upper, label in buckets:
        if hours < upper:
            return label
    return overflow


def _labels(buckets: Sequence[tuple[float, str]], overflow: str, missing: str) -> list[str]:
    return [label for _, label in buckets] + [overflow, missing]


def _distribution(values: Iterable[Optional[str]], buckets, *, overflow: str, missing: str) -> list[BucketCount]:
    counts = Counter(bucket_for(v, buckets, overflow=overflow, missing=missing) for v in values)
    return [BucketCount(name=label, count=counts.get(label, 0)) for label in _labels(buckets, overflow, missing)]


def check_in_distribution(records: Sequence[AttendanceRecord]) -> list[BucketCount]:
    return _distribution(
        (r.check_in for r in records),
        CHECK_IN_BUCKETS,
        overflow=CHECK_IN_OVERFLOW,
        missing=CHECK_IN_MISSING,
    )


def check_out_distribution(records: Sequence[AttendanceRecord]) -> list[BucketCount]:
    return _distribution(
        (r.check_out for r in records),
        CHECK_OUT_BUCKETS,
        overflow=CHECK_OUT_OVERFLOW,
        missing=CHECK_OUT_MISSING,
    )


def attendance_distribution(records: Sequence[AttendanceRecord], *, total_absent: int) -> list[BucketCount]:
    """Pie-chart split: on-time presence, late presence, absent dates."""
    present = [r for r in records if r.status == AttendanceStatus.PRESENT]
    late = sum(1 for r in present if is_late(r.check_in))
    return [
        BucketCount(name=PRESENT_ON_TIME, count=len(present) - late),
        BucketCount(name=PRESENT_LATE, count=late),
        BucketCount(name=ABSENT, count=int(total_absent)),
    ]


def daily_late_arrivals(records: Sequence[AttendanceRecord]) -> list[tuple[date, int]]:
    """Late check-ins per date, ascending, dates without late arrivals omitted."""
    counts = Counter(r.work_date for r in records if is_late(r.check_in))
    return sorted(counts.items())
