from __future__ import annotations

from datetime import date
from typing import Sequence

from ...shifts.model import ShiftInterval
from .base import HoursSplit, OvertimePolicy


class PerDayOvertimePolicy(OvertimePolicy):
    """Threshold applies to the sum of all shifts on the same work date.

    Regular hours are handed out to the day's shifts in start-time order; a
    shift that crosses midnight counts toward the date it started on.
    """

    def split(self, worked: Sequence[tuple[ShiftInterval, float]], threshold: float) -> list[HoursSplit]:
        remaining: dict[date, float] = {}
        out: list[HoursSplit] = []
        for shift, hours in worked:
            allowance = remaining.get(shift.work_date, threshold)
            part = self._split_hours(hours, allowance)
            remaining[shift.work_date] = allowance - part.regular_hours
            out.append(part)
        return out
