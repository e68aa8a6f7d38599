from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...common.validators import require_non_negative, require_positive
from ...core.constants import DEFAULT_REGULAR_HOURS_PER_DAY
from ...core.enums import WageMode, WageSource
from ..model import HoursBreakdown, PayrollComputationResult, WageConfig
from .base import RateResolver
from .wage_config_resolver import WageRateResolver

logger = logging.getLogger(__name__)


class ShiftWageRateResolver(RateResolver):
    """Rates from wages recorded on the shifts themselves.

    Each shift with a positive wage contributes an hourly-equivalent rate
    (a PER_SHIFT wage is divided by that shift's hours, or by the regular hours
    of a day for a zero-length shift) and the regular rate is their average.
    Without any such shift the employee's wage configuration is used.
    """

    def __init__(self, fallback: Optional[WageRateResolver] = None):
        self._fallback = fallback or WageRateResolver()

    def shift_rates(
        self,
        wages: Sequence[tuple[float, Optional[WageMode], float]],
        regular_hours_per_day: float = DEFAULT_REGULAR_HOURS_PER_DAY,
    ) -> list[float]:
        """Hourly-equivalent rate of every (wage, wage_type, hours) that carries a wage."""
        out = []
        for wage, wage_type, hours in wages:
            if not wage or wage <= 0:
                continue
            if wage_type == WageMode.HOURLY:
                out.append(wage)
            elif wage_type == WageMode.PER_SHIFT:
                out.append(wage / (hours if hours > 0 else regular_hours_per_day))
        return out

    def rates(
        self,
        wages: Sequence[tuple[float, Optional[WageMode], float]],
        wage_config: WageConfig,
        regular_hours_per_day: float = DEFAULT_REGULAR_HOURS_PER_DAY,
    ) -> tuple[float, float]:
        regular_rate, overtime_rate, _, _ = self._rates_with_source(wages, wage_config, regular_hours_per_day)
        return regular_rate, overtime_rate

    def resolve(
        self,
        wages: Sequence[tuple[float, Optional[WageMode], float]],
        wage_config: WageConfig,
        breakdown: HoursBreakdown,
        regular_hours_per_day: float = DEFAULT_REGULAR_HOURS_PER_DAY,
    ) -> tuple[PayrollComputationResult, WageSource, int]:
        """Return the result, where the rates came from and how many shifts had a wage."""
        regular_rate, overtime_rate, source, count = self._rates_with_source(
            wages, wage_config, regular_hours_per_day
        )
        return self._result(breakdown, regular_rate, overtime_rate), source, count

    def _rates_with_source(self, wages, wage_config: WageConfig, regular_hours_per_day: float):
        require_positive(regular_hours_per_day, "regular_hours_per_day")
        for wage, _, _ in wages:
            if wage is not None:
                require_non_negative(wage, "wage")

        rates = self.shift_rates(wages, regular_hours_per_day)
        if not rates:
            regular_rate, overtime_rate = self._fallback.rates(wage_config, regular_hours_per_day)
            logger.debug("No shift wages, using wage config (%s)", wage_config.mode.value)
            return regular_rate, overtime_rate, WageSource.WAGE_CONFIG, 0

        regular_rate = sum(rates) / len(rates)
        logger.debug("Averaged %d shift wages into regular rate %.4f", len(rates), regular_rate)
        return regular_rate, regular_rate * wage_config.overtime_multiplier, WageSource.SHIFTS, len(rates)
