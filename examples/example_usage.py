"""Example: build an attendance summary straight from parsed records (no Flask, no DB).

Controllers are a thin layer; all the derivation lives in the engine.
"""

from src.attendance_analytics.attendance_analytics.attendance.model import AttendanceRecord, DateRange
from src.attendance_analytics.attendance_analytics.common.datetime_utils import parse_iso_date
from src.attendance_analytics.attendance_analytics.reports.summary import build_summary


def main():
    records = [
        AttendanceRecord.from_mapping(
            {"Employee_ID": "7", "Employee_Name": "A", "Date": "2024-01-08", "Check_In": "09:15:00",
             "Check_Out": "17:30:00", "Working_Hours": "N/A", "Status": "PRESENT"}
        ),
        AttendanceRecord.from_mapping(
            {"Employee_ID": "7", "Employee_Name": "A", "Date": "2024-01-13", "Check_In": "10:00:00",
             "Check_Out": "18:00:00", "Working_Hours": 6.5, "Status": "PRESENT"}
        ),
    ]
    summary = build_summary(
        records,
        DateRange(from_date=parse_iso_date("2024-01-08"), to_date=parse_iso_date("2024-01-14")),
    )
    print("present:", summary.total_attendance, "of", summary.total_days)
    print("absent:", [(d.date.isoformat(), d.weekday_name) for d in summary.absent_dates])
    print("extra working:", [(d.date.isoformat(), d.weekday_name) for d in summary.extra_working_dates])
    print("average hours:", summary.average_working_hours_display)


if __name__ == "__main__":
    main()
