"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
EngineConfig reads its defaults from this module.
"""

LUNCH_GRACE_HOURS = 0.5

OT_RATE_PER_HOUR_WORKER = 70.0
SUNDAY_ALLOWANCE_STAFF = 500.0

PF_RATE = 0.12
ESI_RATE = 0.0075
ESI_WAGE_CEILING = 21000.0

REQUIRED_DAYS_LONG_MONTH = 27
REQUIRED_DAYS_SHORT_MONTH = 26

MIN_MARKED_DAYS_TO_FINALIZE = 26

ALL_DEPARTMENTS = "All"
