from __future__ import annotations

import math

from ...core.constants import POLICY_MAX_HOURS
from .base import WorkingHoursCalculator


class PolicyCappedCalculator(WorkingHoursCalculator):
    """Contractual rule: clamp into [0, POLICY_MAX_HOURS]. NaN passes through."""

    def __init__(self, max_hours: float = POLICY_MAX_HOURS):
        self._max_hours = float(max_hours)

    def apply_policy(self, hours: float) -> float:
        if math.isnan(hours):
            return hours
        return max(0.0, min(hours, self._max_hours))
