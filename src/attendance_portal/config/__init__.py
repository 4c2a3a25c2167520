from __future__ import annotations

import importlib
import os
from dataclasses import dataclass
from datetime import time

from ..common.datetime_utils import parse_clock_time
from ..core.constants import (
    DEFAULT_LATE_CUTOFF,
    DEFAULT_PRESENT_CUTOFF,
    DEFAULT_REPORTING_TIMEZONE,
    DEFAULT_SESSION_DAYS,
    DEFAULT_SUBJECTS,
)


def get_settings_module() -> str:
    # APP_ENV picks the settings module, development by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "attendance_portal.config.production"

    if env in {"test", "testing"}:
        return "attendance_portal.config.testing"

    return "attendance_portal.config.development"


def parse_bool(value: str | None, fallback: bool) -> bool:
    if value is None:
        return fallback
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return fallback


def parse_csv(value: str | None, fallback: tuple[str, ...]) -> tuple[str, ...]:
    if not value:
        return fallback
    parsed = tuple(item.strip() for item in value.split(",") if item.strip())
    return parsed or fallback


def parse_time(value: str | None, fallback: time) -> time:
    if not value:
        return fallback
    try:
        return parse_clock_time(value)
    except (ValueError, IndexError):
        return fallback


@dataclass(frozen=True)
class Settings:
    secret_key: str
    debug: bool = False
    session_days: int = DEFAULT_SESSION_DAYS
    present_cutoff: time = DEFAULT_PRESENT_CUTOFF
    late_cutoff: time = DEFAULT_LATE_CUTOFF
    reporting_timezone: str = DEFAULT_REPORTING_TIMEZONE
    subjects: tuple[str, ...] = DEFAULT_SUBJECTS
    seed_demo_data: bool = False
    require_explicit_subject: bool = False
    log_level: str = "INFO"
    log_format: str = "standard"


def load_settings(module_name: str | None = None) -> Settings:
    settings = importlib.import_module(module_name or get_settings_module())
    return Settings(
        secret_key=getattr(settings, "SECRET_KEY"),
        debug=bool(getattr(settings, "DEBUG", False)),
        session_days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)),
        present_cutoff=getattr(settings, "PRESENT_CUTOFF", DEFAULT_PRESENT_CUTOFF),
        late_cutoff=getattr(settings, "LATE_CUTOFF", DEFAULT_LATE_CUTOFF),
        reporting_timezone=getattr(settings, "REPORTING_TIMEZONE", DEFAULT_REPORTING_TIMEZONE),
        subjects=tuple(getattr(settings, "SUBJECTS", DEFAULT_SUBJECTS)),
        seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", False)),
        require_explicit_subject=bool(getattr(settings, "REQUIRE_EXPLICIT_SUBJECT", False)),
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        log_format=str(getattr(settings, "LOG_FORMAT", "standard")),
    )
