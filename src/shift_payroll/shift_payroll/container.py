from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Any, Mapping, Union

from .core.constants import DEFAULT_OVERTIME_MULTIPLIER, DEFAULT_REGULAR_HOURS_PER_DAY
from .payroll.aggregator import PayrollHoursAggregator
from .payroll.overtime.factory import OvertimePolicyFactory
from .payroll.rates.shift_wage_resolver import ShiftWageRateResolver
from .payroll.rates.wage_config_resolver import WageRateResolver
from .payroll.service import PayrollService
from .shifts.calculator import ShiftHoursCalculator


@dataclass(frozen=True)
class Container:
    calculator: ShiftHoursCalculator
    rate_resolver: WageRateResolver
    overtime_factory: OvertimePolicyFactory

    payroll_service: PayrollService

    regular_hours_per_day: float
    overtime_multiplier: float
    overtime_rule: str

    def payroll_service_for(self, overtime_rule: Union[str, None]) -> PayrollService:
        """Service using another overtime rule than the configured one."""
        if not overtime_rule or overtime_rule == self.overtime_rule:
            return self.payroll_service
        return _build_service(
            calculator=self.calculator,
            rate_resolver=self.rate_resolver,
            overtime_factory=self.overtime_factory,
            overtime_rule=overtime_rule,
            regular_hours_per_day=self.regular_hours_per_day,
        )


def _build_service(
    *,
    calculator: ShiftHoursCalculator,
    rate_resolver: WageRateResolver,
    overtime_factory: OvertimePolicyFactory,
    overtime_rule: str,
    regular_hours_per_day: float,
) -> PayrollService:
    aggregator = PayrollHoursAggregator(calculator=calculator, policy=overtime_factory.for_rule(overtime_rule))
    return PayrollService(
        calculator=calculator,
        aggregator=aggregator,
        rate_resolver=rate_resolver,
        shift_rate_resolver=ShiftWageRateResolver(rate_resolver),
        regular_hours_per_day=regular_hours_per_day,
    )


def build_container(*, settings: Union[ModuleType, Mapping[str, Any]]) -> Container:
    def get(name: str, default: Any) -> Any:
        if isinstance(settings, Mapping):
            return settings.get(name, default)
        return getattr(settings, name, default)

    regular_hours_per_day = float(get("REGULAR_HOURS_PER_DAY", DEFAULT_REGULAR_HOURS_PER_DAY))
    overtime_multiplier = float(get("OVERTIME_MULTIPLIER", DEFAULT_OVERTIME_MULTIPLIER))
    overtime_rule = str(get("OVERTIME_RULE", "per_shift"))

    calculator = ShiftHoursCalculator()
    rate_resolver = WageRateResolver()
    overtime_factory = OvertimePolicyFactory()

    payroll_service = _build_service(
        calculator=calculator,
        rate_resolver=rate_resolver,
        overtime_factory=overtime_factory,
        overtime_rule=overtime_rule,
        regular_hours_per_day=regular_hours_per_day,
    )

    return Container(
        calculator=calculator,
        rate_resolver=rate_resolver,
        overtime_factory=overtime_factory,
        payroll_service=payroll_service,
        regular_hours_per_day=regular_hours_per_day,
        overtime_multiplier=overtime_multiplier,
        overtime_rule=overtime_rule,
    )
