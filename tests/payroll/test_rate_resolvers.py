import pytest

from shift_payroll.core.enums import WageMode, WageSource
from shift_payroll.core.exceptions import InvalidInputError
from shift_payroll.payroll.model import HoursBreakdown, WageConfig
from shift_payroll.payroll.rates.shift_wage_resolver import ShiftWageRateResolver
from shift_payroll.payroll.rates.wage_config_resolver import WageRateResolver

BREAKDOWN = HoursBreakdown(total_hours=10, regular_hours=8, overtime_hours=2)


def test_hourly_mode():
    config = WageConfig(mode=WageMode.HOURLY, hourly_rate=20, overtime_multiplier=1.5)

    result = WageRateResolver().resolve(config, BREAKDOWN)

    assert result.regular_rate == 20
    assert result.overtime_rate == 30
    assert result.gross_pay == 220


def test_per_shift_mode_matches_equivalent_hourly_rate():
    config = WageConfig(mode=WageMode.PER_SHIFT, per_shift_rate=160)

    result = WageRateResolver().resolve(config, BREAKDOWN, 8)

    assert result.regular_rate == 20
    assert result.overtime_rate == 30
    assert result.gross_pay == 220


def test_custom_multiplier_and_threshold():
    config = WageConfig(mode=WageMode.PER_SHIFT, per_shift_rate=150, overtime_multiplier=2)

    regular_rate, overtime_rate = WageRateResolver().rates(config, 7.5)

    assert regular_rate == 20
    assert overtime_rate == 40


def test_gross_pay_rounds_to_cents():
    config = WageConfig(mode=WageMode.HOURLY, hourly_rate=13.37)
    breakdown = HoursBreakdown(total_hours=7.33, regular_hours=7.33, overtime_hours=0)

    assert WageRateResolver().resolve(config, breakdown).gross_pay == 98.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"hourly_rate": -1},
        {"per_shift_rate": -0.01},
        {"overtime_multiplier": 0},
    ],
)
def test_wage_config_rejects_bad_values(kwargs):
    with pytest.raises(InvalidInputError):
        WageConfig(**kwargs)


def test_breakdown_rejects_negative_or_inconsistent_hours():
    with pytest.raises(InvalidInputError):
        HoursBreakdown(total_hours=-1, regular_hours=0, overtime_hours=0)
    with pytest.raises(InvalidInputError):
        HoursBreakdown(total_hours=10, regular_hours=8, overtime_hours=1)


def test_resolver_rejects_non_positive_threshold():
    with pytest.raises(InvalidInputError):
        WageRateResolver().resolve(WageConfig(mode=WageMode.PER_SHIFT, per_shift_rate=100), BREAKDOWN, 0)


def test_shift_wages_are_averaged():
    config = WageConfig(mode=WageMode.HOURLY, hourly_rate=99)
    wages = [(18.0, WageMode.HOURLY, 8.0), (200.0, WageMode.PER_SHIFT, 10.0)]

    result, source, count = ShiftWageRateResolver().resolve(wages, config, BREAKDOWN)

    assert source == WageSource.SHIFTS
    assert count == 2
    assert result.regular_rate == 19
    assert result.overtime_rate == 28.5
    assert result.gross_pay == 8 * 19 + 2 * 28.5


def test_per_shift_wage_of_zero_length_shift_uses_threshold():
    rates = ShiftWageRateResolver().shift_rates([(160.0, WageMode.PER_SHIFT, 0.0)], 8)
    assert rates == [20]


def test_shift_without_wage_falls_back_to_config():
    config = WageConfig(mode=WageMode.PER_SHIFT, per_shift_rate=160)
    wages = [(0.0, WageMode.HOURLY, 8.0), (None, None, 4.0)]

    result, source, count = ShiftWageRateResolver().resolve(wages, config, BREAKDOWN)

    assert source == WageSource.WAGE_CONFIG
    assert count == 0
    assert (result.regular_rate, result.overtime_rate) == (20, 30)


def test_negative_shift_wage_is_rejected():
    config = WageConfig(mode=WageMode.HOURLY, hourly_rate=10)
    with pytest.raises(InvalidInputError):
        ShiftWageRateResolver().resolve([(-5.0, WageMode.HOURLY, 8.0)], config, BREAKDOWN)
