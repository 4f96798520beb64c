import math

import pytest

from src.attendance_analytics.attendance_analytics.attendance.calculator.capped_calculator import PolicyCappedCalculator
from src.attendance_analytics.attendance_analytics.attendance.calculator.factory import (
    WorkingHoursCalculatorFactory,
    compute_working_hours,
)
from src.attendance_analytics.attendance_analytics.attendance.calculator.uncapped_calculator import RawDurationCalculator
from src.attendance_analytics.attendance_analytics.attendance.lateness import is_late


def test_factory_picks_calculator_for_policy():
    factory = WorkingHoursCalculatorFactory()
    assert isinstance(factory.for_policy(cap_to_policy_max=True), PolicyCappedCalculator)
    assert isinstance(factory.for_policy(cap_to_policy_max=False), RawDurationCalculator)


@pytest.mark.parametrize("cap", [True, False])
def test_both_missing_is_zero(make_record, cap):
    record = make_record(check_in="N/A", check_out="", reported=6.0)
    assert compute_working_hours(record, cap) == 0


def test_missing_check_in_counts_from_shift_start(make_record):
    record = make_record(check_in="N/A", check_out="15:30:00")
    assert compute_working_hours(record, True) == pytest.approx(6.0)
    assert compute_working_hours(record, False) == pytest.approx(6.0)


def test_missing_check_in_early_check_out_goes_negative_only_uncapped(make_record):
    record = make_record(check_in="", check_out="08:30:00")
    assert compute_working_hours(record, False) == pytest.approx(-1.0)
    assert compute_working_hours(record, True) == 0


def test_missing_check_out_counts_to_shift_end(make_record):
    record = make_record(check_in="08:00:00", check_out="N/A")
    assert compute_working_hours(record, False) == pytest.approx(9.0)
    assert compute_working_hours(record, True) == pytest.approx(7.5)


def test_raw_duration_capped_to_policy_max(make_record):
    record = make_record(check_in="09:15:00", check_out="17:30:00", reported="N/A")
    assert compute_working_hours(record, True) == pytest.approx(7.5)
    assert compute_working_hours(record, False) == pytest.approx(8.25)
    assert is_late(record.check_in) is False


def test_reported_hours_trusted_over_clock_difference(make_record):
    record = make_record(check_in="10:00:00", check_out="18:00:00", reported=6.5)
    assert compute_working_hours(record, True) == pytest.approx(6.5)
    assert is_late(record.check_in) is True


def test_reported_hours_as_numeric_string(make_record):
    record = make_record(check_in="10:00:00", check_out="18:00:00", reported="9.25")
    assert compute_working_hours(record, True) == pytest.approx(7.5)
    assert compute_working_hours(record, False) == pytest.approx(9.25)


@pytest.mark.parametrize("reported", [None, "", "N/A", "abc", float("nan")])
def test_non_numeric_reported_hours_fall_back_to_raw(make_record, reported):
    record = make_record(check_in="09:00:00", check_out="13:00:00", reported=reported)
    assert compute_working_hours(record, False) == pytest.approx(4.0)


def test_negative_reported_hours_clamped_only_when_capped(make_record):
    record = make_record(check_in="09:00:00", check_out="10:00:00", reported=-2)
    assert compute_working_hours(record, True) == 0
    assert compute_working_hours(record, False) == -2


def test_overnight_garbage_passes_through_uncapped(make_record):
    record = make_record(check_in="22:00:00", check_out="06:00:00")
    assert compute_working_hours(record, False) == pytest.approx(-16.0)
    assert compute_working_hours(record, True) == 0


def test_midnight_check_in_is_a_real_time(make_record):
    record = make_record(check_in="00:00:00", check_out="06:00:00")
    assert compute_working_hours(record, False) == pytest.approx(6.0)


def test_malformed_time_propagates_nan(make_record):
    record = make_record(check_in="ab:cd:ef", check_out="17:00:00")
    assert math.isnan(compute_working_hours(record, False))
    assert math.isnan(compute_working_hours(record, True))


@pytest.mark.parametrize(
    "check_in, check_out, reported",
    [
        ("07:00:00", "21:00:00", None),
        ("09:00:00", "09:10:00", None),
        ("N/A", "23:59:59", None),
        ("05:00:00", "N/A", None),
        ("09:00:00", "18:00:00", 30),
    ],
)
def test_capped_result_within_policy_bounds(make_record, check_in, check_out, reported):
    record = make_record(check_in=check_in, check_out=check_out, reported=reported)
    assert 0 <= compute_working_hours(record, True) <= 7.5


@pytest.mark.parametrize("reported, expected", [("6.5 hrs", 6.5), (" 5h", 5.0), ("1_0", 1.0), (".75", 0.75)])
def test_reported_hours_read_leading_number(make_record, reported, expected):
    record = make_record(check_in="09:00:00", check_out="18:00:00", reported=reported)
    assert compute_working_hours(record, False) == pytest.approx(expected)
    assert compute_working_hours(record, True) == pytest.approx(expected)
