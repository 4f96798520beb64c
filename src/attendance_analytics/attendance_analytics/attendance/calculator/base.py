from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from typing import Optional

from ...core.constants import MISSING_VALUES, SHIFT_END_HOURS, SHIFT_START_HOURS
from ..model import AttendanceRecord, ReportedHours
from ..time_parser import clock_hours

# Leading decimal number, the way a spreadsheet export is read ("6.5 hrs" -> 6.5).
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class WorkingHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for working-hours policy).

    Shared decision table, first match wins:
    - no check-in, no check-out  -> 0
    - no check-in                -> check_out - SHIFT_START
    - no check-out               -> SHIFT_END - check_in
    - both                       -> reported hours if numeric, else check_out - check_in
    Subclasses decide what happens to the chosen value.
    """

    def working_hours(self, record: AttendanceRecord) -> float:
        check_in = clock_hours(record.check_in)
        check_out = clock_hours(record.check_out)

        if check_in is None and check_out is None:
            return 0.0
        if check_in is None:
            return self.apply_policy(check_out - SHIFT_START_HOURS)
        if check_out is None:
            return self.apply_policy(SHIFT_END_HOURS - check_in)

        reported = reported_hours(record.reported_working_hours)
        if reported is not None:
            return self.apply_policy(reported)
        return self.apply_policy(check_out - check_in)

    @abstractmethod
    def apply_policy(self, hours: float) -> float:
        raise NotImplementedError


def reported_hours(value: ReportedHours) -> Optional[float]:
    """Numeric device-reported duration, or None when absent or non-numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if text in MISSING_VALUES:
            return None
        match = _LEADING_NUMBER.match(text)
        if match is None:
            return None
        number = float(match.group(0))
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
    if math.isnan(number):
        return None
    return number
