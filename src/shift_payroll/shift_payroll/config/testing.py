SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

REGULAR_HOURS_PER_DAY = 8.0
OVERTIME_MULTIPLIER = 1.5
OVERTIME_RULE = "per_shift"
