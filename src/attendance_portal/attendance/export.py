from __future__ import annotations

import csv
import io
from datetime import timezone, tzinfo
from typing import Sequence

from .model import AttendanceEvent

EXPORT_FIELDS = [
    "event_id",
    "work_date",
    "scan_time",
    "roll_number",
    "student_name",
    "subject",
    "status",
    "recorder",
]


def render_csv(events: Sequence[AttendanceEvent], tz: tzinfo = timezone.utc) -> str:
    """Write ledger rows to CSV text.

    Scan times are rendered in the reporting timezone, rows keep the
    order they were given in.
    """

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
    writer.writeheader()
    for e in events:
        writer.writerow(
            {
                "event_id": e.event_id,
                "work_date": e.work_date.isoformat(),
                "scan_time": e.timestamp.astimezone(tz).strftime("%H:%M:%S"),
                "roll_number": e.roll_number,
                "student_name": e.student_name,
                "subject": e.subject,
                "status": e.status.label,
                "recorder": e.recorder,
            }
        )
    return out.getvalue()
