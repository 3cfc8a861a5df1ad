"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

LATE_AFTER = time(9, 30)
HALF_DAY_HOURS = 4
HISTORY_LIMIT = 100
LISTING_LIMIT = 500
RECENT_DAYS = 7
TREND_DAYS = 7
UNKNOWN_LABEL = "Unknown"
NOT_AVAILABLE = "N/A"
