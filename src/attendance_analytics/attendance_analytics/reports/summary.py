from __future__ import annotations

import math
from typing import Optional, Sequence

from ..attendance.calculator.factory import WorkingHoursCalculatorFactory
from ..attendance.model import AttendanceRecord, AttendanceSummary, DateRange, DatedWeekday
from ..common.datetime_utils import is_weekend, iter_dates, weekday_name
from ..core.enums import AttendanceStatus
from .distribution import (
    attendance_distribution,
    check_in_distribution,
    check_out_distribution,
    daily_late_arrivals,
)


def total_attendance(records: Sequence[AttendanceRecord]) -> int:
    return sum(1 for r in records if r.status == AttendanceStatus.PRESENT)


def total_days(records: Sequence[AttendanceRecord], date_range: DateRange) -> int:
    """Inclusive day count of a bounded range, otherwise the number of records."""
    if date_range.is_bounded:
        return (date_range.to_date - date_range.from_date).days + 1
    return len(records)


def absent_dates(records: Sequence[AttendanceRecord], date_range: DateRange) -> list[DatedWeekday]:
    """Weekdays without a record, plus any day explicitly marked ABSENT.

    Weekends are never absent by omission, but an explicit ABSENT record on a
    weekend is still reported. Unbounded ranges yield an empty list.
    """

    if not date_range.is_bounded:
        return []

    recorded = {r.work_date for r in records}
    marked_absent = {r.work_date for r in records if r.status == AttendanceStatus.ABSENT}

    out: list[DatedWeekday] = []
    for day in iter_dates(date_range.from_date, date_range.to_date):
        missing_weekday = day not in recorded and not is_weekend(day)
        if missing_weekday or day in marked_absent:
            out.append(DatedWeekday(date=day, weekday_name=weekday_name(day)))
    return out


def extra_working_dates(records: Sequence[AttendanceRecord]) -> list[DatedWeekday]:
    """PRESENT records falling on a Saturday or Sunday, in record order."""
    return [
        DatedWeekday(date=r.work_date, weekday_name=weekday_name(r.work_date))
        for r in records
        if r.status == AttendanceStatus.PRESENT and is_weekend(r.work_date)
    ]


def average_working_hours(records: Sequence[AttendanceRecord]) -> float:
    """Mean capped working hours over records with a positive value, 2 decimals.

    NaN and non-positive values are left out; no qualifying record -> 0.0.
    """

    calculator = WorkingHoursCalculatorFactory().for_policy(cap_to_policy_max=True)
    hours = [h for h in (calculator.working_hours(r) for r in records) if not math.isnan(h) and h > 0]
    if not hours:
        return 0.0
    return round(sum(hours) / len(hours), 2)


def build_summary(
    records: Sequence[AttendanceRecord],
    date_range: Optional[DateRange] = None,
) -> AttendanceSummary:
    """Recompute every aggregate from scratch for one result set."""

    date_range = date_range or DateRange()
    absent = absent_dates(records, date_range)

    return AttendanceSummary(
        total_attendance=total_attendance(records),
        total_days=total_days(records, date_range),
        absent_dates=absent,
        extra_working_dates=extra_working_dates(records),
        average_working_hours=average_working_hours(records),
        attendance_distribution=attendance_distribution(records, total_absent=len(absent)),
        check_in_distribution=check_in_distribution(records),
        check_out_distribution=check_out_distribution(records),
        daily_late_arrivals=daily_late_arrivals(records),
    )
