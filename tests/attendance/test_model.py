from datetime import date, datetime

import pytest

from src.attendance_analytics.attendance_analytics.attendance.model import AttendanceRecord
from src.attendance_analytics.attendance_analytics.core.enums import AttendanceStatus
from src.attendance_analytics.attendance_analytics.core.exceptions import InvalidRecordError


def test_from_export_row():
    record = AttendanceRecord.from_mapping(
        {
            "Employee_ID": 1001,
            "Employee_Name": "Asha",
            "Date": "2024-01-08",
            "Check_In": "09:15:00",
            "Check_Out": "N/A",
            "Working_Hours": "N/A",
            "Status": "present",
            "Late_Minutes": 0,
            "Late_Flag": "False",
        }
    )

    assert record.employee_id == "1001"
    assert record.work_date == date(2024, 1, 8)
    assert record.check_out == "N/A"
    assert record.status == AttendanceStatus.PRESENT
    assert record.reported_working_hours == "N/A"
    assert record.late_flag is False


def test_missing_times_become_empty_sentinel():
    record = AttendanceRecord.from_mapping({"employee_id": "1", "date": date(2024, 1, 8), "status": "ABSENT"})

    assert record.check_in == ""
    assert record.check_out == ""


@pytest.mark.parametrize("raw", [{"Date": "08/01/2024", "Status": "PRESENT"}, {"Status": "PRESENT"}])
def test_bad_date_rejected(raw):
    with pytest.raises(InvalidRecordError):
        AttendanceRecord.from_mapping(raw)


def test_unknown_status_rejected():
    with pytest.raises(InvalidRecordError):
        AttendanceRecord.from_mapping({"Date": "2024-01-08", "Status": "LEAVE"})


def test_datetime_work_date_is_reduced_to_date():
    record = AttendanceRecord.from_mapping({"work_date": datetime(2024, 1, 8, 0, 0), "status": "PRESENT"})

    assert record.work_date == date(2024, 1, 8)
    assert type(record.work_date) is date
