from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import minutes_since_midnight, require_comparable
from ..common.validators import round_half_up
from ..core.constants import HOURS_DECIMALS, MINUTES_PER_DAY, MINUTES_PER_HOUR
from ..core.exceptions import InvalidInputError
from .model import ShiftInterval


class ShiftHoursCalculator:
    """Worked hours of a single shift.

    Rules:
      * times are HH:MM, 24-hour, minute precision;
      * an end time before the start time means the shift ends the next day;
      * an unpaid break (both timestamps present) is deducted;
      * the result never goes below zero and is rounded to 2 decimals, half-up.
    """

    def compute_hours(
        self,
        start_time: str,
        end_time: str,
        break_start: Optional[datetime] = None,
        break_end: Optional[datetime] = None,
        *,
        break_paid: bool = False,
    ) -> float:
        minutes = self.span_minutes(start_time, end_time)
        if not break_paid:
            minutes -= self.break_minutes(break_start, break_end)
        minutes = max(minutes, 0)
        return round_half_up(minutes / MINUTES_PER_HOUR, HOURS_DECIMALS)

    def compute_for(self, shift: ShiftInterval) -> float:
        if shift.is_open:
            raise InvalidInputError("Cannot compute hours of an open shift")
        return self.compute_hours(
            shift.start_time,
            shift.end_time,
            shift.break_start,
            shift.break_end,
            break_paid=shift.break_paid,
        )

    @staticmethod
    def span_minutes(start_time: str, end_time: str) -> int:
        start_minutes = minutes_since_midnight(start_time)
        end_minutes = minutes_since_midnight(end_time)

        # Crossing midnight: the shift ends on the next calendar day.
        if end_minutes < start_minutes:
            end_minutes += MINUTES_PER_DAY

        return end_minutes - start_minutes

    @staticmethod
    def break_minutes(break_start: Optional[datetime], break_end: Optional[datetime]) -> float:
        if break_start is None or break_end is None:
            return 0.0
        require_comparable(break_start, break_end, "break")
        minutes = (break_end - break_start).total_seconds() / 60
        if minutes < 0:
            raise InvalidInputError("Break ends before it starts")
        return minutes
