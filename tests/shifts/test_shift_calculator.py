from datetime import date, datetime, timezone

import pytest

from shift_payroll.core.exceptions import InvalidInputError
from shift_payroll.shifts.calculator import ShiftHoursCalculator
from shift_payroll.shifts.model import ShiftInterval


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("09:00", "17:00", 8.0),
        ("08:15", "12:45", 4.5),
        ("00:00", "00:20", 0.33),
        ("07:00", "07:00", 0.0),
    ],
)
def test_same_day_shift_without_break(start, end, expected):
    assert ShiftHoursCalculator().compute_hours(start, end) == expected


def test_shift_crossing_midnight_wraps_to_next_day():
    assert ShiftHoursCalculator().compute_hours("22:00", "01:00") == 3.0


def test_unpaid_break_is_deducted():
    calc = ShiftHoursCalculator()
    hours = calc.compute_hours(
        "09:00", "17:00", datetime(2025, 1, 6, 12, 0), datetime(2025, 1, 6, 12, 30)
    )
    assert hours == 7.5


def test_paid_break_is_not_deducted():
    calc = ShiftHoursCalculator()
    hours = calc.compute_hours(
        "09:00", "17:00", datetime(2025, 1, 6, 12, 0), datetime(2025, 1, 6, 12, 30), break_paid=True
    )
    assert hours == 8.0


def test_half_break_fields_mean_no_deduction():
    calc = ShiftHoursCalculator()
    assert calc.compute_hours("09:00", "17:00", datetime(2025, 1, 6, 12, 0), None) == 8.0
    assert calc.compute_hours("09:00", "17:00", None, datetime(2025, 1, 6, 12, 30)) == 8.0


def test_break_longer_than_shift_clamps_to_zero():
    calc = ShiftHoursCalculator()
    hours = calc.compute_hours("09:00", "10:00", datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 12, 0))
    assert hours == 0


def test_negative_break_is_rejected():
    calc = ShiftHoursCalculator()
    with pytest.raises(InvalidInputError):
        calc.compute_hours("09:00", "17:00", datetime(2025, 1, 6, 12, 30), datetime(2025, 1, 6, 12, 0))


@pytest.mark.parametrize("bad", ["9am", "24:00", "12:60", "", "12-00", "1200"])
def test_malformed_time_is_rejected(bad):
    with pytest.raises(InvalidInputError):
        ShiftHoursCalculator().compute_hours(bad, "17:00")


def test_rounds_half_up_to_two_decimals():
    calc = ShiftHoursCalculator()
    assert calc.compute_hours("10:00", "10:10") == 0.17
    # 3 minutes = 0.05 h exactly
    assert calc.compute_hours("10:00", "10:03") == 0.05
    # 10 min minus a 2.5 min break is 0.125 h
    hours = calc.compute_hours("10:00", "10:10", datetime(2025, 1, 6, 10, 0, 0), datetime(2025, 1, 6, 10, 2, 30))
    assert hours == 0.13


def test_same_inputs_same_output():
    calc = ShiftHoursCalculator()
    args = ("21:45", "06:10", datetime(2025, 1, 6, 2, 0), datetime(2025, 1, 6, 2, 45))
    assert calc.compute_hours(*args) == calc.compute_hours(*args)


def test_compute_for_rejects_open_shift():
    shift = ShiftInterval(work_date=date(2025, 1, 6), start_time="09:00")
    with pytest.raises(InvalidInputError):
        ShiftHoursCalculator().compute_for(shift)


def test_shift_with_inverted_break_cannot_be_built():
    with pytest.raises(InvalidInputError):
        ShiftInterval(
            work_date=date(2025, 1, 6),
            start_time="09:00",
            end_time="17:00",
            break_start=datetime(2025, 1, 6, 13, 0),
            break_end=datetime(2025, 1, 6, 12, 0),
        )


def test_mixed_offset_break_is_rejected():
    with pytest.raises(InvalidInputError):
        ShiftInterval(
            work_date=date(2025, 1, 6),
            start_time="09:00",
            end_time="17:00",
            break_start=datetime(2025, 1, 6, 12, 0, tzinfo=timezone.utc),
            break_end=datetime(2025, 1, 6, 12, 30),
        )
    with pytest.raises(InvalidInputError):
        ShiftHoursCalculator().break_minutes(
            datetime(2025, 1, 6, 12, 0), datetime(2025, 1, 6, 12, 30, tzinfo=timezone.utc)
        )
