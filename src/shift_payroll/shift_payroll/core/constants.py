"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

DEFAULT_REGULAR_HOURS_PER_DAY = 8.0
DEFAULT_OVERTIME_MULTIPLIER = 1.5

HOURS_DECIMALS = 2
MONEY_DECIMALS = 2
HOURS_TOLERANCE = 0.01
