from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.calculator.factory import WorkingHoursCalculatorFactory
from ..attendance.model import AttendanceRecord
from ..attendance.time_parser import clock_hours


@dataclass(frozen=True)
class TrendPoint:
    work_date: date
    working_hours: float
    check_in_hours: Optional[float]
    check_out_hours: Optional[float]


def build_trend(records: Sequence[AttendanceRecord]) -> list[TrendPoint]:
    """Per-record chart series in input order.

    Working hours are uncapped so that short or overlong days stay visible.
    Missing punches are None, not a placeholder hour.
    """

    calculator = WorkingHoursCalculatorFactory().for_policy(cap_to_policy_max=False)
    return [
        TrendPoint(
            work_date=r.work_date,
            working_hours=calculator.working_hours(r),
            check_in_hours=clock_hours(r.check_in),
            check_out_hours=clock_hours(r.check_out),
        )
        for r in records
    ]
