from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timezone, tzinfo

from ..common.datetime_utils import minutes_since_midnight, time_to_minutes
from ..core.constants import DEFAULT_LATE_CUTOFF, DEFAULT_PRESENT_CUTOFF
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusClassifier:
    """Maps a scan's time of day to a stored status.

    Both cutoffs are inclusive: a scan at exactly ``present_cutoff`` is
    present, one at exactly ``late_cutoff`` is late.
    """

    present_cutoff: time = DEFAULT_PRESENT_CUTOFF
    late_cutoff: time = DEFAULT_LATE_CUTOFF

    def __post_init__(self):
        if time_to_minutes(self.present_cutoff) > time_to_minutes(self.late_cutoff):
            raise ValueError("present_cutoff must not be after late_cutoff")

    def classify(self, minutes: int) -> AttendanceStatus:
        if minutes <= time_to_minutes(self.present_cutoff):
            return AttendanceStatus.PRESENT
        if minutes <= time_to_minutes(self.late_cutoff):
            return AttendanceStatus.LATE
        return AttendanceStatus.SERIOUSLY_LATE

    def classify_scan(self, scanned_at: datetime, tz: tzinfo = timezone.utc) -> AttendanceStatus:
        return self.classify(minutes_since_midnight(scanned_at, tz))


def classify(minutes: int) -> AttendanceStatus:
    """Classify with the default 08:10 / 08:30 cutoffs."""
    return StatusClassifier().classify(minutes)
