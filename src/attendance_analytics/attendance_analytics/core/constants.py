"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Times are fractional hours of a naive local clock (9.5 == 09:30).
"""

SHIFT_START_HOURS = 9.5
SHIFT_END_HOURS = 17.0
POLICY_MAX_HOURS = 7.5
LATE_THRESHOLD_HOURS = 9.5

MISSING_TIME_MARKER = "N/A"
MISSING_VALUES = frozenset({"", MISSING_TIME_MARKER})

WEEKEND_DAYS = frozenset({5, 6})  # date.weekday(): Saturday, Sunday

DEFAULT_EMPLOYEE_LIMIT = 1000
