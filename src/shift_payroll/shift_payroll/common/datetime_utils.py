from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional, Union

from ..core.constants import MINUTES_PER_HOUR
from ..core.exceptions import InvalidInputError

_TIME_OF_DAY = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid date: {value!r}") from None


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; empty values map to None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        raise InvalidInputError(f"Invalid timestamp: {value!r}") from None


def minutes_since_midnight(value: Union[str, time]) -> int:
    """Convert an HH:MM (24-hour) value into minutes since midnight."""
    if isinstance(value, time):
        return value.hour * MINUTES_PER_HOUR + value.minute

    match = _TIME_OF_DAY.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidInputError(f"Invalid time of day: {value!r}")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidInputError(f"Invalid time of day: {value!r}")
    return hours * MINUTES_PER_HOUR + minutes


def format_hhmm(value: Optional[datetime]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


def is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def require_comparable(start: datetime, end: datetime, field_name: str) -> None:
    """Both timestamps must carry a UTC offset, or neither."""
    if is_aware(start) != is_aware(end):
        raise InvalidInputError(f"{field_name} mixes timestamps with and without a UTC offset")
