from __future__ import annotations

from abc import ABC, abstractmethod

from ...common.validators import require_non_negative, round_half_up
from ...core.constants import MONEY_DECIMALS
from ..model import HoursBreakdown, PayrollComputationResult


class RateResolver(ABC):
    """Rate resolver interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def rates(self, *args, **kwargs) -> tuple[float, float]:
        """Return (regular_rate, overtime_rate)."""
        raise NotImplementedError

    @staticmethod
    def gross_pay(breakdown: HoursBreakdown, regular_rate: float, overtime_rate: float) -> float:
        """Pay for hours only; bonuses and deductions belong to the payroll entry."""
        require_non_negative(regular_rate, "regular_rate")
        require_non_negative(overtime_rate, "overtime_rate")
        gross = breakdown.regular_hours * regular_rate + breakdown.overtime_hours * overtime_rate
        return round_half_up(gross, MONEY_DECIMALS)

    def _result(self, breakdown: HoursBreakdown, regular_rate: float, overtime_rate: float) -> PayrollComputationResult:
        return PayrollComputationResult(
            regular_rate=regular_rate,
            overtime_rate=overtime_rate,
            gross_pay=self.gross_pay(breakdown, regular_rate, overtime_rate),
        )
