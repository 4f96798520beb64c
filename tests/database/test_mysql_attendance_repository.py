from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal

import pytest

from src.attendance_analytics.attendance_analytics.attendance.calculator.factory import compute_working_hours
from src.attendance_analytics.attendance_analytics.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.attendance_analytics.attendance_analytics.core.enums import AttendanceStatus
from src.attendance_analytics.attendance_analytics.database.mysql_base import mysql_time_to_clock


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((sql, params))

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, rows):
        self.cursor = FakeCursor(rows)
        self.connection = FakeConnection(self.cursor)

    def connect(self):
        return self.connection


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "N/A"),
        (time(9, 5, 7), "09:05:07"),
        (timedelta(hours=17, minutes=30), "17:30:00"),
        (b"08:00:00", "08:00:00"),
        (" N/A ", "N/A"),
    ],
)
def test_mysql_time_to_clock(value, expected):
    assert mysql_time_to_clock(value) == expected


def test_mysql_time_to_clock_rejects_unknown_type():
    with pytest.raises(TypeError):
        mysql_time_to_clock(9.5)


def test_search_builds_filters_and_maps_rows():
    factory = FakeConnFactory(
        [
            {
                "employee_id": 1001,
                "employee_name": "Asha",
                "work_date": date(2024, 1, 9),
                "check_in": timedelta(hours=10),
                "check_out": None,
                "working_hours": Decimal("6.50"),
                "status": "PRESENT",
                "late_minutes": 30,
                "late_flag": 1,
            }
        ]
    )
    repo = MySQLAttendanceRepository(factory)

    records = repo.search(employee_id="1001", from_date=date(2024, 1, 1), to_date=date(2024, 1, 31))

    sql, params = factory.cursor.executed[0]
    assert "ar.employee_id=%s" in sql and "ar.work_date >= %s" in sql and "ar.work_date <= %s" in sql
    assert params == ("1001", date(2024, 1, 1), date(2024, 1, 31))
    assert factory.cursor.closed and factory.connection.closed

    record = records[0]
    assert record.employee_id == "1001"
    assert record.check_in == "10:00:00"
    assert record.check_out == "N/A"
    assert record.status == AttendanceStatus.PRESENT
    assert record.late_flag is True
    # check-out missing: SHIFT_END - check_in, reported hours are not consulted
    assert compute_working_hours(record, True) == pytest.approx(7.0)


def test_search_without_filters_selects_everything():
    factory = FakeConnFactory([])
    repo = MySQLAttendanceRepository(factory)

    assert repo.search() == []
    sql, params = factory.cursor.executed[0]
    assert "WHERE 1=1" in sql
    assert params == ()


def test_list_employees_maps_rows():
    factory = FakeConnFactory([{"employee_id": 7, "employee_name": None}])
    repo = MySQLAttendanceRepository(factory)

    employees = repo.list_employees(10)

    assert employees[0].employee_id == "7"
    assert employees[0].employee_name == ""
    assert factory.cursor.executed[0][1] == (10,)


def _row(work_date, status):
    return {
        "employee_id": 1,
        "employee_name": "Asha",
        "work_date": work_date,
        "check_in": timedelta(hours=9),
        "check_out": timedelta(hours=17),
        "working_hours": None,
        "status": status,
        "late_minutes": 0,
        "late_flag": 0,
    }


def test_search_skips_rows_with_unknown_status(caplog):
    factory = FakeConnFactory(
        [
            _row(date(2024, 1, 8), "PRESENT"),
            _row(date(2024, 1, 9), "HALF_DAY"),
            _row(date(2024, 1, 10), "ABSENT"),
        ]
    )
    repo = MySQLAttendanceRepository(factory)

    with caplog.at_level(logging.WARNING):
        records = repo.search(employee_id="1")

    assert [r.work_date for r in records] == [date(2024, 1, 8), date(2024, 1, 10)]
    assert "HALF_DAY" in caplog.text


def test_search_reduces_datetime_column_to_date():
    factory = FakeConnFactory([_row(datetime(2024, 1, 8, 0, 0), "PRESENT")])
    repo = MySQLAttendanceRepository(factory)

    (record,) = repo.search(employee_id="1")

    assert type(record.work_date) is date
    assert record.work_date == date(2024, 1, 8)
