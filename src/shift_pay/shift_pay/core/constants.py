"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
MINUTES_PER_HOUR = 60

# 15:30, minutes-of-day after which worked time is paid as overtime.
OVERTIME_START = 15 * 60 + 30

LUNCH_MINUTES = 30
OVERTIME_MULTIPLIER = 1.5
