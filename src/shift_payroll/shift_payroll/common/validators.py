from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.exceptions import InvalidInputError


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise InvalidInputError(f"{field_name} must be non-negative, got {value!r}")
    return value


def require_positive(value: float, field_name: str) -> float:
    if value is None or value <= 0:
        raise InvalidInputError(f"{field_name} must be positive, got {value!r}")
    return value


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round like a payslip does (0.005 -> 0.01), not banker's rounding."""
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
