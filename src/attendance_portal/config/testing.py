from ..core.constants import DEFAULT_LATE_CUTOFF, DEFAULT_PRESENT_CUTOFF, DEFAULT_SUBJECTS

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

SESSION_DAYS = 7

PRESENT_CUTOFF = DEFAULT_PRESENT_CUTOFF
LATE_CUTOFF = DEFAULT_LATE_CUTOFF
REPORTING_TIMEZONE = "UTC"
SUBJECTS = DEFAULT_SUBJECTS

SEED_DEMO_DATA = True
REQUIRE_EXPLICIT_SUBJECT = False

LOG_LEVEL = "WARNING"
LOG_FORMAT = "standard"
