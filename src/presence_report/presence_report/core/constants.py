"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 1000
DEFAULT_REPORT_DAYS = 7

# Events in the same "YYYY-MM-DDTHH:MM" minute are compacted in the summary path.
MINUTE_KEY_FORMAT = "%Y-%m-%dT%H:%M"

SUSPICIOUS_MAX_MINUTES = 5
HIGH_ABSENCE_BELOW_PERCENT = 50

DEFAULT_AWAY_REASON = "Ausente"
