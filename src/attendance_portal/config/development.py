import os

from . import parse_bool, parse_csv, parse_time
from ..core.constants import DEFAULT_LATE_CUTOFF, DEFAULT_PRESENT_CUTOFF, DEFAULT_SUBJECTS

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

# Scan classification cutoffs (inclusive, HH:MM)
PRESENT_CUTOFF = parse_time(os.getenv("PRESENT_CUTOFF"), DEFAULT_PRESENT_CUTOFF)
LATE_CUTOFF = parse_time(os.getenv("LATE_CUTOFF"), DEFAULT_LATE_CUTOFF)
REPORTING_TIMEZONE = os.getenv("REPORTING_TIMEZONE", "UTC")
SUBJECTS = parse_csv(os.getenv("SUBJECTS"), DEFAULT_SUBJECTS)

# Load the demo roster/accounts on startup
SEED_DEMO_DATA = parse_bool(os.getenv("SEED_DEMO_DATA"), True)
REQUIRE_EXPLICIT_SUBJECT = parse_bool(os.getenv("REQUIRE_EXPLICIT_SUBJECT"), False)

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "standard")
