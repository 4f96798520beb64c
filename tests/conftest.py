from __future__ import annotations

from datetime import date

import pytest

from src.attendance_analytics.attendance_analytics.attendance.model import AttendanceRecord
from src.attendance_analytics.attendance_analytics.core.enums import AttendanceStatus


@pytest.fixture
def make_record():
    def _make(
        work_date: str = "2024-01-08",
        check_in: str = "09:00:00",
        check_out: str = "17:00:00",
        *,
        status: AttendanceStatus = AttendanceStatus.PRESENT,
        reported=None,
        employee_id: str = "1001",
    ) -> AttendanceRecord:
        return AttendanceRecord(
            employee_id=employee_id,
            employee_name="Asha",
            work_date=date.fromisoformat(work_date),
            check_in=check_in,
            check_out=check_out,
            status=status,
            reported_working_hours=reported,
        )

    return _make
