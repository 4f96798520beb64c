from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidRecordError

ReportedHours = Union[float, int, str, None]


@dataclass(frozen=True)
class Employee:
    employee_id: str
    employee_name: str


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee-day as produced by the device export.

    check_in/check_out keep the raw clock strings ("HH:MM[:SS]", "" or "N/A");
    presence is decided by attendance.time_parser, never by the parsed number.
    """

    employee_id: str
    employee_name: str
    work_date: date
    check_in: str
    check_out: str
    status: AttendanceStatus
    reported_working_hours: ReportedHours = None
    late_minutes: Any = None
    late_flag: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "AttendanceRecord":
        """Build a record from an export row (``Check_In`` style) or snake_case keys."""

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in raw and raw[key] is not None:
                    return raw[key]
            return default

        work_date = pick("Date", "work_date", "date")
        if isinstance(work_date, str):
            try:
                work_date = parse_iso_date(work_date.strip())
            except ValueError:
                raise InvalidRecordError(f"Invalid attendance date: {work_date!r}") from None
        elif isinstance(work_date, datetime):
            work_date = work_date.date()
        elif not isinstance(work_date, date):
            raise InvalidRecordError(f"Invalid attendance date: {work_date!r}")

        status = str(pick("Status", "status", default="")).strip().upper()
        try:
            status_enum = AttendanceStatus(status)
        except ValueError:
            raise InvalidRecordError(f"Invalid attendance status: {status!r}") from None

        return cls(
            employee_id=str(pick("Employee_ID", "employee_id", default="")),
            employee_name=str(pick("Employee_Name", "employee_name", default="")),
            work_date=work_date,
            check_in=str(pick("Check_In", "check_in", default="")),
            check_out=str(pick("Check_Out", "check_out", default="")),
            status=status_enum,
            reported_working_hours=pick("Working_Hours", "reported_working_hours", "working_hours"),
            late_minutes=pick("Late_Minutes", "late_minutes"),
            late_flag=_as_flag(pick("Late_Flag", "late_flag", default=False)),
        )


@dataclass(frozen=True)
class DateRange:
    """Inclusive [from_date, to_date]; either bound may be missing."""

    from_date: Optional[date] = None
    to_date: Optional[date] = None

    @property
    def is_bounded(self) -> bool:
        return self.from_date is not None and self.to_date is not None


@dataclass(frozen=True)
class DerivedDayMetrics:
    working_hours: float
    working_hours_uncapped: float
    is_late: bool


@dataclass(frozen=True)
class DatedWeekday:
    date: date
    weekday_name: str


@dataclass(frozen=True)
class BucketCount:
    name: str
    count: int


@dataclass(frozen=True)
class AttendanceSummary:
    total_attendance: int
    total_days: int
    absent_dates: list[DatedWeekday] = field(default_factory=list)
    extra_working_dates: list[DatedWeekday] = field(default_factory=list)
    average_working_hours: float = 0.0
    attendance_distribution: list[BucketCount] = field(default_factory=list)
    check_in_distribution: list[BucketCount] = field(default_factory=list)
    check_out_distribution: list[BucketCount] = field(default_factory=list)
    daily_late_arrivals: list[tuple[date, int]] = field(default_factory=list)

    @property
    def total_absent(self) -> int:
        return len(self.absent_dates)

    @property
    def total_extra_working(self) -> int:
        return len(self.extra_working_dates)

    @property
    def average_working_hours_display(self) -> str:
        return f"{self.average_working_hours:.2f}"


def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)
