"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Payroll thresholds are policy values shared with existing payroll figures.
"""

STANDARD_MONTHLY_HOURS = 160
OVERTIME_MULTIPLIER = 1.5
BONUS_HOURS_THRESHOLD = 200
BONUS_RATE = 0.10

MAX_HOURS_PER_DAY = 24

# date.weekday() numbering: 0 = Monday.
WEEK_STARTS_ON = 0

DAY_OFF_PLACEHOLDER_TIME = "00:00"
DEFAULT_DAILY_HOURS_WINDOW = 7
