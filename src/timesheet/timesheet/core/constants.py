"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_WORK_MINUTES = 480
LATE_NIGHT_START_HOUR = 22
LATE_NIGHT_END_HOUR = 5
WEEKLY_STATUTORY_LIMIT_MINUTES = 2400

DEFAULT_TIMEZONE = "Asia/Tokyo"
DATE_FORMAT = "%Y-%m-%d"
