from __future__ import annotations

from enum import Enum


class WageMode(str, Enum):
    """How an employee or a single shift is paid."""

    HOURLY = "HOURLY"
    PER_SHIFT = "PER_SHIFT"


class WageSource(str, Enum):
    """Where the resolved rates of a payroll report came from."""

    SHIFTS = "shifts"
    WAGE_CONFIG = "employeeGroup"


class OvertimeRule(str, Enum):
    """Scope the regular-hours threshold is applied to."""

    PER_SHIFT = "per_shift"
    PER_DAY = "per_day"


class PayrollStatus(str, Enum):
    DRAFT = "DRAFT"
    APPROVED = "APPROVED"
    PAID = "PAID"
