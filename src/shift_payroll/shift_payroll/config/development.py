import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Payroll rules
REGULAR_HOURS_PER_DAY = float(os.getenv("REGULAR_HOURS_PER_DAY", "8"))
OVERTIME_MULTIPLIER = float(os.getenv("OVERTIME_MULTIPLIER", "1.5"))
OVERTIME_RULE = os.getenv("OVERTIME_RULE", "per_shift")
