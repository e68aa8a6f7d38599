from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.datetime_utils import format_hhmm, minutes_since_midnight
from ..common.validators import require_positive, round_half_up
from ..core.constants import DEFAULT_REGULAR_HOURS_PER_DAY, HOURS_DECIMALS
from ..shifts.calculator import ShiftHoursCalculator
from ..shifts.model import ShiftHoursDetail, ShiftInterval
from .model import HoursBreakdown, HoursSummary
from .overtime.base import OvertimePolicy
from .overtime.per_shift import PerShiftOvertimePolicy

logger = logging.getLogger(__name__)


class PayrollHoursAggregator:
    """Sum completed shifts and split the total into regular and overtime hours."""

    def __init__(
        self,
        *,
        calculator: Optional[ShiftHoursCalculator] = None,
        policy: Optional[OvertimePolicy] = None,
    ):
        self._calculator = calculator or ShiftHoursCalculator()
        self._policy = policy or PerShiftOvertimePolicy()

    def aggregate(
        self,
        shifts: Iterable[ShiftInterval],
        regular_hours_per_day: float = DEFAULT_REGULAR_HOURS_PER_DAY,
    ) -> HoursBreakdown:
        return self.summarize(shifts, regular_hours_per_day).breakdown

    def summarize(
        self,
        shifts: Iterable[ShiftInterval],
        regular_hours_per_day: float = DEFAULT_REGULAR_HOURS_PER_DAY,
    ) -> HoursSummary:
        require_positive(regular_hours_per_day, "regular_hours_per_day")

        completed = []
        for shift in shifts:
            if shift.is_open:
                # In-progress work is paid once punched out.
                logger.debug("Skipping open shift %s on %s", shift.shift_id or "-", shift.work_date)
                continue
            completed.append(shift)
        completed.sort(key=lambda s: (s.work_date, minutes_since_midnight(s.start_time)))

        worked = [(s, self._calculator.compute_for(s)) for s in completed]
        splits = self._policy.split(worked, regular_hours_per_day)

        details = []
        for (shift, hours), part in zip(worked, splits):
            regular_part, overtime_part = _rounded_split(hours, part.regular_hours)
            details.append(
                ShiftHoursDetail(
                    work_date=shift.work_date,
                    start_time=shift.start_time,
                    end_time=shift.end_time,
                    hours=hours,
                    regular_hours=regular_part,
                    overtime_hours=overtime_part,
                    break_start=format_hhmm(shift.break_start),
                    break_end=format_hhmm(shift.break_end),
                    break_paid=shift.break_paid,
                    break_minutes=round(self._calculator.break_minutes(shift.break_start, shift.break_end)),
                    shift_id=shift.shift_id,
                )
            )

        total = sum(hours for _, hours in worked)
        regular, overtime = _rounded_split(total, sum(p.regular_hours for p in splits))
        total = round_half_up(total, HOURS_DECIMALS)

        logger.debug(
            "Aggregated %d shifts (%s): total=%.2f regular=%.2f overtime=%.2f",
            len(details), type(self._policy).__name__, total, regular, overtime,
        )
        return HoursSummary(
            breakdown=HoursBreakdown(total_hours=total, regular_hours=regular, overtime_hours=overtime),
            details=tuple(details),
        )


def _rounded_split(total: float, regular: float) -> tuple[float, float]:
    """Round total and regular hours; overtime is what is left, so the parts add up."""
    total = round_half_up(total, HOURS_DECIMALS)
    regular = min(round_half_up(regular, HOURS_DECIMALS), total)
    overtime = max(round_half_up(total - regular, HOURS_DECIMALS), 0.0)
    return regular, overtime
