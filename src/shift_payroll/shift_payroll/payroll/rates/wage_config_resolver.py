from __future__ import annotations

from ...common.validators import require_positive
from ...core.constants import DEFAULT_REGULAR_HOURS_PER_DAY
from ...core.enums import WageMode
from ...core.exceptions import InvalidInputError
from ..model import HoursBreakdown, PayrollComputationResult, WageConfig
from .base import RateResolver


class WageRateResolver(RateResolver):
    """Standard rule: rates come from the employee's wage configuration.

    HOURLY pays the hourly rate; PER_SHIFT is turned into an hourly equivalent
    by dividing the flat rate by the regular hours of a day. Overtime is the
    regular rate times the configured multiplier.
    """

    def rates(
        self,
        wage_config: WageConfig,
        regular_hours_per_day: float = DEFAULT_REGULAR_HOURS_PER_DAY,
    ) -> tuple[float, float]:
        require_positive(regular_hours_per_day, "regular_hours_per_day")

        if wage_config.mode == WageMode.HOURLY:
            regular_rate = wage_config.hourly_rate
        elif wage_config.mode == WageMode.PER_SHIFT:
            regular_rate = wage_config.per_shift_rate / regular_hours_per_day
        else:
            raise InvalidInputError(f"Unknown wage mode: {wage_config.mode!r}")

        return regular_rate, regular_rate * wage_config.overtime_multiplier

    def resolve(
        self,
        wage_config: WageConfig,
        breakdown: HoursBreakdown,
        regular_hours_per_day: float = DEFAULT_REGULAR_HOURS_PER_DAY,
    ) -> PayrollComputationResult:
        regular_rate, overtime_rate = self.rates(wage_config, regular_hours_per_day)
        return self._result(breakdown, regular_rate, overtime_rate)
