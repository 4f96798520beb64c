from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, Employee


class AttendanceRecordSource(Protocol):
    """Read side of the upload pipeline: already parsed and deduplicated records."""

    def list_employees(self, limit: int) -> Sequence[Employee]:
        raise NotImplementedError

    def search(
        self,
        *,
        employee_id: Optional[str] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
