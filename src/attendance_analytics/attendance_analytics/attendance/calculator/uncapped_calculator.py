from __future__ import annotations

from .base import WorkingHoursCalculator


class RawDurationCalculator(WorkingHoursCalculator):
    """Trend-chart rule: the chosen value as-is, negative or above policy included."""

    def apply_policy(self, hours: float) -> float:
        return hours
