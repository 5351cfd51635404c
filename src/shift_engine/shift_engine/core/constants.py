"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SELECTION_MARGIN_MINUTES = 4 * 60
DEFAULT_TIME_ZONE = "UTC"

# Time logs fetched around a date: [start of day - 1 day, start of day + 2 days)
TIME_LOG_LOOKBEHIND_DAYS = 1
TIME_LOG_LOOKAHEAD_DAYS = 2
