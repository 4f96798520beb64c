from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

from ..common.validators import optional_iso_date, optional_text, require_ordered_range
from ..core.constants import DEFAULT_EMPLOYEE_LIMIT
from ..core.exceptions import ValidationError
from ..reports.summary import build_summary
from ..reports.trends import TrendPoint, build_trend
from .metrics import derive_day_metrics
from .model import AttendanceRecord, AttendanceSummary, DateRange, Employee
from .repository import AttendanceRecordSource

logger = logging.getLogger(__name__)

EMPTY_SEARCH_MESSAGE = "Please select an employee or a date range to search."
NO_RECORDS_MESSAGE = "No records found for the selected criteria."


@dataclass(frozen=True)
class AnalyticsReport:
    rows: list[dict]
    summary: AttendanceSummary
    trend: list[TrendPoint]
    date_range: DateRange
    message: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "records": self.rows,
            "summary": summary_to_dict(self.summary),
            "trends": trend_to_dict(self.trend),
            "date_range": {
                "from_date": _iso_or_none(self.date_range.from_date),
                "to_date": _iso_or_none(self.date_range.to_date),
            },
            "message": self.message,
        }


class AttendanceAnalyticsService:
    def __init__(self, records: AttendanceRecordSource, *, employee_limit: int = DEFAULT_EMPLOYEE_LIMIT):
        self._records = records
        self._employee_limit = int(employee_limit)

    def list_employees(self) -> Sequence[Employee]:
        return self._records.list_employees(self._employee_limit)

    def search_report(
        self,
        *,
        employee_id: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> AnalyticsReport:
        employee_id = optional_text(employee_id)
        start = optional_iso_date(from_date, "From Date")
        end = optional_iso_date(to_date, "To Date")

        if not employee_id and start is None and end is None:
            raise ValidationError(EMPTY_SEARCH_MESSAGE)
        require_ordered_range(start, end)

        logger.debug("searching attendance employee_id=%s from=%s to=%s", employee_id, start, end)
        records = list(self._records.search(employee_id=employee_id, from_date=start, to_date=end))
        logger.info("attendance search matched %d records", len(records))

        return self.build_report(records, DateRange(from_date=start, to_date=end))

    def build_report(self, records: Sequence[AttendanceRecord], date_range: DateRange) -> AnalyticsReport:
        return AnalyticsReport(
            rows=[self._to_row(r) for r in records],
            summary=build_summary(records, date_range),
            trend=build_trend(records),
            date_range=date_range,
            message=None if records else NO_RECORDS_MESSAGE,
        )

    def _to_row(self, r: AttendanceRecord) -> dict:
        metrics = derive_day_metrics(r)
        return {
            "employee_id": r.employee_id,
            "employee_name": r.employee_name,
            "date": r.work_date.isoformat(),
            "check_in": r.check_in,
            "check_out": r.check_out,
            "reported_working_hours": _json_value(r.reported_working_hours),
            "working_hours": _json_number(metrics.working_hours),
            "working_hours_uncapped": _json_number(metrics.working_hours_uncapped),
            "late_minutes": _json_value(r.late_minutes),
            "status": r.status.value,
            "late_flag": r.late_flag,
            "computed_is_late": metrics.is_late,
        }


def summary_to_dict(summary: AttendanceSummary) -> dict:
    return {
        "total_attendance": summary.total_attendance,
        "total_days": summary.total_days,
        "total_absent": summary.total_absent,
        "total_extra_working": summary.total_extra_working,
        "absent_dates": [{"date": d.date.isoformat(), "day": d.weekday_name} for d in summary.absent_dates],
        "extra_working_dates": [
            {"date": d.date.isoformat(), "day": d.weekday_name} for d in summary.extra_working_dates
        ],
        "average_working_hours": summary.average_working_hours_display,
        "attendance_distribution": [{"name": b.name, "count": b.count} for b in summary.attendance_distribution],
        "check_in_distribution": [{"name": b.name, "count": b.count} for b in summary.check_in_distribution],
        "check_out_distribution": [{"name": b.name, "count": b.count} for b in summary.check_out_distribution],
        "daily_late_arrivals": [{"date": d.isoformat(), "count": n} for d, n in summary.daily_late_arrivals],
    }


def trend_to_dict(trend: Sequence[TrendPoint]) -> dict:
    return {
        "labels": [p.work_date.isoformat() for p in trend],
        "working_hours": [_json_number(p.working_hours) for p in trend],
        "check_in": [_json_number(p.check_in_hours) for p in trend],
        "check_out": [_json_number(p.check_out_hours) for p in trend],
    }


def _json_number(value: Optional[float]) -> Optional[float]:
    # NaN/Infinity are not valid JSON.
    if value is None or math.isnan(value) or math.isinf(value):
        return None
    return round(value, 2)


def _iso_or_none(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _json_value(value: Any) -> Any:
    if isinstance(value, float):
        return _json_number(value)
    if value is None or isinstance(value, (int, str, bool)):
        return value
    return str(value)
