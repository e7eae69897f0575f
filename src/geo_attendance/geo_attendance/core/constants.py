"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

USER_ID_PATTERN = r"(STU|TCH)[0-9]+"

DEFAULT_CALENDAR_PATH = "calendar.json"
DEFAULT_FLUSH_INTERVAL_SECONDS = 5.0
