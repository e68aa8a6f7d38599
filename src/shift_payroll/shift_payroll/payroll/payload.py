"""Mapping between JSON request bodies (camelCase) and domain objects."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..core.enums import PayrollStatus, WageMode
from ..core.exceptions import InvalidInputError
from ..shifts.model import ShiftHoursDetail, ShiftInterval
from .model import PayrollAmounts, PayrollEntry, PayrollHoursReport, PayrollPeriod, WageConfig


def _require(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        raise InvalidInputError(f"{key} is required")
    return value


def _number(data: Mapping[str, Any], key: str, default: Optional[float] = 0.0) -> Optional[float]:
    value = data.get(key)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{key} must be a number") from None


def _flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
        return value.strip().lower() == "true"
    raise InvalidInputError(f"{key} must be true or false")


def _wage_mode(value: Any, key: str) -> WageMode:
    try:
        return WageMode(str(value).upper())
    except ValueError:
        raise InvalidInputError(f"{key} must be HOURLY or PER_SHIFT") from None


def shift_from_dict(data: Mapping[str, Any]) -> ShiftInterval:
    wage_type = data.get("wageType")
    return ShiftInterval(
        work_date=parse_iso_date(str(_require(data, "date"))[:10]),
        start_time=str(_require(data, "startTime")),
        end_time=data.get("endTime") or None,
        break_start=parse_iso_datetime(data.get("breakStart")),
        break_end=parse_iso_datetime(data.get("breakEnd")),
        break_paid=_flag(data, "breakPaid", False),
        approved=_flag(data, "approved", True),
        wage=_number(data, "wage", default=None),
        wage_type=_wage_mode(wage_type, "wageType") if wage_type else None,
        shift_id=str(data["id"]) if data.get("id") is not None else None,
    )


def wage_config_from_dict(
    data: Mapping[str, Any], *, default_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER
) -> WageConfig:
    return WageConfig(
        mode=_wage_mode(data.get("mode", WageMode.HOURLY.value), "mode"),
        hourly_rate=_number(data, "hourlyRate"),
        per_shift_rate=_number(data, "perShiftRate"),
        overtime_multiplier=_number(data, "overtimeMultiplier", default=default_multiplier),
    )


def period_from_dict(data: Mapping[str, Any]) -> PayrollPeriod:
    status = data.get("status") or PayrollStatus.DRAFT.value
    try:
        status = PayrollStatus(status)
    except ValueError:
        raise InvalidInputError(f"Unknown payroll status: {status!r}") from None
    return PayrollPeriod(
        name=str(data.get("name") or ""),
        start_date=parse_iso_date(str(_require(data, "startDate"))[:10]),
        end_date=parse_iso_date(str(_require(data, "endDate"))[:10]),
        status=status,
        period_id=str(data["id"]) if data.get("id") is not None else None,
    )


def amounts_from_dict(data: Mapping[str, Any]) -> PayrollAmounts:
    return PayrollAmounts(
        regular_hours=_number(data, "regularHours"),
        overtime_hours=_number(data, "overtimeHours"),
        regular_rate=_number(data, "regularRate"),
        overtime_rate=_number(data, "overtimeRate"),
        bonuses=_number(data, "bonuses"),
        deductions=_number(data, "deductions"),
    )


def detail_to_dict(detail: ShiftHoursDetail) -> dict:
    return {
        "id": detail.shift_id,
        "date": detail.work_date.strftime("%Y-%m-%d"),
        "startTime": detail.start_time,
        "endTime": detail.end_time,
        "hours": detail.hours,
        "regularHours": detail.regular_hours,
        "overtimeHours": detail.overtime_hours,
        "breakStart": detail.break_start,
        "breakEnd": detail.break_end,
        "breakPaid": detail.break_paid,
        "breakDuration": detail.break_minutes,
    }


def report_to_dict(report: PayrollHoursReport) -> dict:
    breakdown = report.breakdown
    period = report.period
    return {
        "totalHours": breakdown.total_hours,
        "totalShifts": report.summary.total_shifts,
        "regularHours": breakdown.regular_hours,
        "overtimeHours": breakdown.overtime_hours,
        "regularRate": report.result.regular_rate,
        "overtimeRate": report.result.overtime_rate,
        "grossPay": report.result.gross_pay,
        "shiftDetails": [detail_to_dict(d) for d in report.summary.details],
        "wageCalculationMethod": report.wage_source.value,
        "shiftsWithWage": report.shifts_with_wage,
        "payrollPeriod": {
            "name": period.name,
            "startDate": period.start_date.strftime("%Y-%m-%d"),
            "endDate": period.end_date.strftime("%Y-%m-%d"),
        },
    }


def entry_to_dict(entry: PayrollEntry) -> dict:
    amounts = entry.amounts
    return {
        "employeeId": entry.employee_id,
        "payrollPeriodId": entry.payroll_period_id,
        "regularHours": amounts.regular_hours,
        "overtimeHours": amounts.overtime_hours,
        "regularRate": amounts.regular_rate,
        "overtimeRate": amounts.overtime_rate,
        "bonuses": amounts.bonuses,
        "deductions": amounts.deductions,
        "grossPay": entry.gross_pay,
        "netPay": entry.net_pay,
        "status": entry.status.value,
        "notes": entry.notes,
    }
