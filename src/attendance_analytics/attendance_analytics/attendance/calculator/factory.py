from __future__ import annotations

from dataclasses import dataclass

from ..model import AttendanceRecord
from .base import WorkingHoursCalculator
from .capped_calculator import PolicyCappedCalculator
from .uncapped_calculator import RawDurationCalculator


@dataclass
class WorkingHoursCalculatorFactory:
    """Factory Pattern: choose the calculator for the requested policy."""

    def for_policy(self, *, cap_to_policy_max: bool) -> WorkingHoursCalculator:
        if cap_to_policy_max:
            return PolicyCappedCalculator()
        return RawDurationCalculator()


def compute_working_hours(record: AttendanceRecord, cap_to_policy_max: bool = True) -> float:
    calculator = WorkingHoursCalculatorFactory().for_policy(cap_to_policy_max=cap_to_policy_max)
    return calculator.working_hours(record)
