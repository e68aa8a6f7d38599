from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.validators import require_non_negative, require_positive
from ..core.constants import DEFAULT_REGULAR_HOURS_PER_DAY
from ..shifts.calculator import ShiftHoursCalculator
from ..shifts.model import ShiftInterval
from .aggregator import PayrollHoursAggregator
from .model import (
    PayrollAmounts,
    PayrollComputationResult,
    PayrollEntry,
    PayrollHoursReport,
    PayrollPeriod,
    WageConfig,
)
from .rates.shift_wage_resolver import ShiftWageRateResolver
from .rates.wage_config_resolver import WageRateResolver

logger = logging.getLogger(__name__)


class PayrollService:
    """Compose calculator, aggregator and rate resolvers into payroll results.

    Holds no state between calls: all data comes in as arguments.
    """

    def __init__(
        self,
        *,
        calculator: Optional[ShiftHoursCalculator] = None,
        aggregator: Optional[PayrollHoursAggregator] = None,
        rate_resolver: Optional[WageRateResolver] = None,
        shift_rate_resolver: Optional[ShiftWageRateResolver] = None,
        regular_hours_per_day: float = DEFAULT_REGULAR_HOURS_PER_DAY,
    ):
        self._calculator = calculator or ShiftHoursCalculator()
        self._aggregator = aggregator or PayrollHoursAggregator(calculator=self._calculator)
        self._rate_resolver = rate_resolver or WageRateResolver()
        self._shift_rate_resolver = shift_rate_resolver or ShiftWageRateResolver(self._rate_resolver)
        self._regular_hours_per_day = require_positive(regular_hours_per_day, "regular_hours_per_day")

    @property
    def regular_hours_per_day(self) -> float:
        return self._regular_hours_per_day

    def compute(self, shifts: Iterable[ShiftInterval], wage_config: WageConfig) -> PayrollComputationResult:
        """Hours of completed shifts priced with the wage configuration."""
        breakdown = self._aggregator.aggregate(shifts, self._regular_hours_per_day)
        return self._rate_resolver.resolve(wage_config, breakdown, self._regular_hours_per_day)

    def calculate_hours(
        self,
        *,
        shifts: Iterable[ShiftInterval],
        period: PayrollPeriod,
        wage_config: WageConfig,
    ) -> PayrollHoursReport:
        eligible = [s for s in shifts if s.approved and period.contains(s.work_date)]
        summary = self._aggregator.summarize(eligible, self._regular_hours_per_day)

        # Open shifts still count for the rate, with zero hours.
        wages = []
        for shift in eligible:
            if shift.wage is None:
                continue
            hours = 0.0 if shift.is_open else self._calculator.compute_for(shift)
            wages.append((shift.wage, shift.wage_type, hours))

        result, source, shifts_with_wage = self._shift_rate_resolver.resolve(
            wages, wage_config, summary.breakdown, self._regular_hours_per_day
        )
        logger.info(
            "Payroll hours for %s: %d shifts, %.2f h (%s rates)",
            period.name, summary.total_shifts, summary.breakdown.total_hours, source.value,
        )
        return PayrollHoursReport(
            period=period,
            summary=summary,
            result=result,
            wage_source=source,
            shifts_with_wage=shifts_with_wage,
        )

    def create_entry(
        self,
        *,
        employee_id: str,
        payroll_period_id: str,
        report: PayrollHoursReport,
        bonuses: float = 0.0,
        deductions: float = 0.0,
        notes: Optional[str] = None,
    ) -> PayrollEntry:
        require_non_negative(bonuses, "bonuses")
        require_non_negative(deductions, "deductions")
        breakdown = report.breakdown
        amounts = PayrollAmounts(
            regular_hours=breakdown.regular_hours,
            overtime_hours=breakdown.overtime_hours,
            regular_rate=report.result.regular_rate,
            overtime_rate=report.result.overtime_rate,
            bonuses=bonuses,
            deductions=deductions,
        )
        return PayrollEntry(
            employee_id=employee_id,
            payroll_period_id=payroll_period_id,
            amounts=amounts,
            notes=notes,
        )
