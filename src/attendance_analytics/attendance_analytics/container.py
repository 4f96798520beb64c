from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRecordSource
from .attendance.service import AttendanceAnalyticsService
from .core.constants import DEFAULT_EMPLOYEE_LIMIT
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRecordSource

    analytics_service: AttendanceAnalyticsService


def build_container(*, db_config: dict, employee_limit: int = DEFAULT_EMPLOYEE_LIMIT) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    attendance_repo = MySQLAttendanceRepository(conn)
    analytics_service = AttendanceAnalyticsService(attendance_repo, employee_limit=employee_limit)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        analytics_service=analytics_service,
    )
