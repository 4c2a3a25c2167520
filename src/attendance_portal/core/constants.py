"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_SESSION_DAYS = 7
DEFAULT_PRESENT_CUTOFF = time(8, 10)
DEFAULT_LATE_CUTOFF = time(8, 30)
DEFAULT_SUBJECTS = ("CRP", "IOT", "BPS", "WDD")
DEFAULT_REPORTING_TIMEZONE = "UTC"
ROLL_NUMBER_LENGTH = 11
MIN_PASSWORD_LENGTH = 6
