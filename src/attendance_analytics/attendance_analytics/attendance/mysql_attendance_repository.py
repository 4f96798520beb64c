from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.exceptions import InvalidRecordError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, mysql_time_to_clock
from .model import AttendanceRecord, Employee
from .repository import AttendanceRecordSource

logger = logging.getLogger(__name__)


class MySQLAttendanceRepository(AttendanceRecordSource):
    """Reads the tables filled by the upload pipeline. Never writes."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_employees(self, limit: int) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, employee_name
                FROM employees
                ORDER BY employee_name ASC, employee_id ASC
                LIMIT %s
                """,
                (int(limit),),
            )
            rows = fetchall(cur)
            return [
                Employee(employee_id=str(r["employee_id"]), employee_name=r.get("employee_name") or "")
                for r in rows
            ]

    def search(
        self,
        *,
        employee_id: Optional[str] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if employee_id:
            clauses.append("ar.employee_id=%s")
            params.append(employee_id)
        if from_date is not None:
            clauses.append("ar.work_date >= %s")
            params.append(from_date)
        if to_date is not None:
            clauses.append("ar.work_date <= %s")
            params.append(to_date)

        where = " AND ".join(clauses) or "1=1"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    ar.employee_id, e.employee_name,
                    ar.work_date, ar.check_in, ar.check_out, ar.working_hours,
                    ar.status, ar.late_minutes, ar.late_flag
                FROM attendance_records ar
                LEFT JOIN employees e ON e.employee_id = ar.employee_id
                WHERE {where}
                ORDER BY ar.work_date ASC, ar.employee_id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

        logger.debug("attendance search returned %d rows", len(rows))
        records: list[AttendanceRecord] = []
        for r in rows:
            try:
                records.append(self._to_record(r))
            except InvalidRecordError as e:
                # Rows with an unknown status or date stay out of the report.
                logger.warning("skipping attendance row employee_id=%s: %s", r.get("employee_id"), e)
        return records

    @staticmethod
    def _to_record(row: Dict[str, Any]) -> AttendanceRecord:
        return AttendanceRecord.from_mapping(
            {
                "employee_id": row["employee_id"],
                "employee_name": row.get("employee_name") or "",
                "work_date": row["work_date"],
                "check_in": mysql_time_to_clock(row.get("check_in")),
                "check_out": mysql_time_to_clock(row.get("check_out")),
                "reported_working_hours": row.get("working_hours"),
                "status": row["status"],
                "late_minutes": row.get("late_minutes"),
                "late_flag": row.get("late_flag"),
            }
        )
