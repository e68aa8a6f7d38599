from __future__ import annotations

from typing import Sequence

from ...shifts.model import ShiftInterval
from .base import HoursSplit, OvertimePolicy


class PerShiftOvertimePolicy(OvertimePolicy):
    """Threshold applies to every shift on its own.

    Two 5-hour shifts on the same day are 10 regular hours, not 8 + 2.
    """

    def split(self, worked: Sequence[tuple[ShiftInterval, float]], threshold: float) -> list[HoursSplit]:
        return [self._split_hours(hours, threshold) for _, hours in worked]
