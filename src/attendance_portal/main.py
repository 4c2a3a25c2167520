from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv

from .common.datetime_utils import get_zone, now_utc
from .config import get_settings_module, load_settings
from .container import build_container
from .database.bootstrap import ensure_demo_data
from .logging_config import configure_logging
from .portal import AttendancePortal

logger = logging.getLogger(__name__)


def create_app(
    settings_module: Optional[str] = None,
    *,
    clock: Callable[[], datetime] = now_utc,
) -> AttendancePortal:
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = load_settings(settings_module)
    configure_logging(settings.log_level, settings.log_format)

    logger.debug(
        "settings=%s tz=%s cutoffs=%s/%s",
        settings_module,
        settings.reporting_timezone,
        settings.present_cutoff.strftime("%H:%M"),
        settings.late_cutoff.strftime("%H:%M"),
    )

    container = build_container(settings=settings, clock=clock)
    if settings.seed_demo_data:
        ensure_demo_data(container, tz=get_zone(settings.reporting_timezone))

    return AttendancePortal(container)
