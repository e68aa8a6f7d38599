from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import require_comparable
from ..core.enums import WageMode
from ..core.exceptions import InvalidInputError


@dataclass(frozen=True)
class ShiftInterval:
    """Domain entity: one worked (or still running) shift of an employee."""

    work_date: date
    start_time: str
    end_time: Optional[str] = None
    break_start: Optional[datetime] = None
    break_end: Optional[datetime] = None
    break_paid: bool = False
    approved: bool = True
    wage: Optional[float] = None
    wage_type: Optional[WageMode] = None
    shift_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.break_start and self.break_end:
            require_comparable(self.break_start, self.break_end, "break")
            if self.break_end < self.break_start:
                raise InvalidInputError("break_end must not be before break_start")

    @property
    def is_open(self) -> bool:
        """A shift without an end time is still in progress."""
        return not self.end_time

    @property
    def has_break(self) -> bool:
        return self.break_start is not None and self.break_end is not None


@dataclass(frozen=True)
class ShiftHoursDetail:
    """Read-model: per-shift row of a payroll hours report."""

    work_date: date
    start_time: str
    end_time: str
    hours: float
    regular_hours: float
    overtime_hours: float
    break_start: Optional[str] = None
    break_end: Optional[str] = None
    break_paid: bool = False
    break_minutes: int = 0
    shift_id: Optional[str] = None
