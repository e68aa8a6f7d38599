from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ...shifts.model import ShiftInterval


@dataclass(frozen=True)
class HoursSplit:
    regular_hours: float
    overtime_hours: float


class OvertimePolicy(ABC):
    """Strategy Pattern: decide which worked hours count as overtime."""

    @abstractmethod
    def split(self, worked: Sequence[tuple[ShiftInterval, float]], threshold: float) -> list[HoursSplit]:
        """Return one split per (shift, hours) pair, in the same order.

        `worked` is already sorted by date and start time.
        """
        raise NotImplementedError

    @staticmethod
    def _split_hours(hours: float, allowance: float) -> HoursSplit:
        if hours <= allowance:
            return HoursSplit(regular_hours=hours, overtime_hours=0.0)
        return HoursSplit(regular_hours=allowance, overtime_hours=hours - allowance)
