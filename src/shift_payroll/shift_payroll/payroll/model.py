from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from ..common.validators import require_non_negative, require_positive, round_half_up
from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER, HOURS_TOLERANCE, MONEY_DECIMALS
from ..core.enums import PayrollStatus, WageMode, WageSource
from ..core.exceptions import DomainError, InvalidInputError
from ..shifts.model import ShiftHoursDetail


@dataclass(frozen=True)
class HoursBreakdown:
    total_hours: float = 0.0
    regular_hours: float = 0.0
    overtime_hours: float = 0.0

    def __post_init__(self) -> None:
        require_non_negative(self.total_hours, "total_hours")
        require_non_negative(self.regular_hours, "regular_hours")
        require_non_negative(self.overtime_hours, "overtime_hours")
        if abs(self.regular_hours + self.overtime_hours - self.total_hours) > HOURS_TOLERANCE:
            raise InvalidInputError("regular_hours + overtime_hours must equal total_hours")


@dataclass(frozen=True)
class WageConfig:
    """Wage settings of an employee, resolved by the caller from the wage group."""

    mode: WageMode = WageMode.HOURLY
    hourly_rate: float = 0.0
    per_shift_rate: float = 0.0
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER

    def __post_init__(self) -> None:
        if not isinstance(self.mode, WageMode):
            raise InvalidInputError(f"Unknown wage mode: {self.mode!r}")
        require_non_negative(self.hourly_rate, "hourly_rate")
        require_non_negative(self.per_shift_rate, "per_shift_rate")
        require_positive(self.overtime_multiplier, "overtime_multiplier")


@dataclass(frozen=True)
class PayrollComputationResult:
    """Derived rates and pay; recomputed whenever the inputs change."""

    regular_rate: float
    overtime_rate: float
    gross_pay: float


@dataclass(frozen=True)
class HoursSummary:
    breakdown: HoursBreakdown
    details: tuple[ShiftHoursDetail, ...] = ()

    @property
    def total_shifts(self) -> int:
        return len(self.details)


@dataclass(frozen=True)
class PayrollPeriod:
    """Date range (inclusive) aggregated into one payroll entry per employee."""

    name: str
    start_date: date
    end_date: date
    status: PayrollStatus = PayrollStatus.DRAFT
    period_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise InvalidInputError("Payroll period ends before it starts")

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class PayrollHoursReport:
    period: PayrollPeriod
    summary: HoursSummary
    result: PayrollComputationResult
    wage_source: WageSource
    shifts_with_wage: int = 0

    @property
    def breakdown(self) -> HoursBreakdown:
        return self.summary.breakdown


@dataclass(frozen=True)
class PayrollAmounts:
    """Hours, rates and adjustments of an entry. Pay totals are always derived."""

    regular_hours: float = 0.0
    overtime_hours: float = 0.0
    regular_rate: float = 0.0
    overtime_rate: float = 0.0
    bonuses: float = 0.0
    deductions: float = 0.0

    def __post_init__(self) -> None:
        for name in ("regular_hours", "overtime_hours", "regular_rate", "overtime_rate", "bonuses", "deductions"):
            require_non_negative(getattr(self, name), name)

    @property
    def gross_pay(self) -> float:
        gross = self.regular_hours * self.regular_rate + self.overtime_hours * self.overtime_rate + self.bonuses
        return round_half_up(gross, MONEY_DECIMALS)

    @property
    def net_pay(self) -> float:
        return round_half_up(self.gross_pay - self.deductions, MONEY_DECIMALS)


_AMOUNT_FIELDS = frozenset(
    {"regular_hours", "overtime_hours", "regular_rate", "overtime_rate", "bonuses", "deductions"}
)


@dataclass(frozen=True)
class PayrollEntry:
    employee_id: str
    payroll_period_id: str
    amounts: PayrollAmounts = field(default_factory=PayrollAmounts)
    status: PayrollStatus = PayrollStatus.DRAFT
    notes: Optional[str] = None

    @property
    def gross_pay(self) -> float:
        return self.amounts.gross_pay

    @property
    def net_pay(self) -> float:
        return self.amounts.net_pay

    def with_changes(self, **changes) -> "PayrollEntry":
        """Return a copy with the given fields updated; pay totals follow automatically."""
        unknown = set(changes) - _AMOUNT_FIELDS - {"status", "notes"}
        if unknown:
            raise InvalidInputError(f"Unknown payroll entry fields: {', '.join(sorted(unknown))}")

        amount_changes = {k: v for k, v in changes.items() if k in _AMOUNT_FIELDS and v is not None}
        amounts = replace(self.amounts, **amount_changes) if amount_changes else self.amounts

        status = changes.get("status")
        if status is not None and not isinstance(status, PayrollStatus):
            try:
                status = PayrollStatus(status)
            except ValueError:
                raise InvalidInputError(f"Unknown payroll status: {status!r}") from None

        return replace(
            self,
            amounts=amounts,
            status=status or self.status,
            notes=changes["notes"] if "notes" in changes else self.notes,
        )

    def ensure_deletable(self) -> None:
        if self.status != PayrollStatus.DRAFT:
            raise DomainError("Cannot delete approved or paid payroll entries")
