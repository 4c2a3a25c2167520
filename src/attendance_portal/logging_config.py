"""
Logging configuration for the attendance portal.
Provides a plain console formatter and a structured JSON formatter.
"""

from __future__ import annotations

import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter


class PortalJsonFormatter(JsonFormatter):
    """JSON formatter adding timestamp, level and portal context fields"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        for field in ("actor", "role", "subject", "roll_number", "error_code"):
            if hasattr(record, field):
                log_record[field] = getattr(record, field)


def build_logging_config(level: str = "INFO", fmt: str = "standard") -> Dict[str, Any]:
    formatter = "json" if fmt == "json" else "standard"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
            "json": {
                "()": PortalJsonFormatter,
                "format": "%(timestamp)s %(level)s %(logger)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "attendance_portal": {
                "level": level.upper(),
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }


def configure_logging(level: str = "INFO", fmt: str = "standard") -> None:
    logging.config.dictConfig(build_logging_config(level, fmt))
