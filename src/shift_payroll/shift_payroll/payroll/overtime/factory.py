from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ...core.enums import OvertimeRule
from ...core.exceptions import InvalidInputError
from .base import OvertimePolicy
from .per_day import PerDayOvertimePolicy
from .per_shift import PerShiftOvertimePolicy


@dataclass
class OvertimePolicyFactory:
    """Factory Pattern: choose the overtime policy for a configured rule."""

    def for_rule(self, rule: Union[OvertimeRule, str, None]) -> OvertimePolicy:
        if rule is None:
            return PerShiftOvertimePolicy()
        try:
            rule = OvertimeRule(rule)
        except ValueError:
            raise InvalidInputError(f"Unknown overtime rule: {rule!r}") from None

        if rule == OvertimeRule.PER_DAY:
            return PerDayOvertimePolicy()
        return PerShiftOvertimePolicy()
