from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceEvent


class AttendanceLedger(Protocol):
    """Append-only store of attendance events."""

    def exists(self, *, roll_number: str, subject: str, work_date: date) -> bool:
        raise NotImplementedError

    def append(
        self,
        *,
        roll_number: str,
        student_name: str,
        subject: str,
        recorder: str,
        timestamp: datetime,
        work_date: date,
        status: AttendanceStatus,
    ) -> int:
        """Store one event and return its id.

        Implementations reject a second event for the same
        (roll_number, subject, work_date) with AlreadyRecordedError.
        """

        raise NotImplementedError

    def query(self, predicate: Callable[[AttendanceEvent], bool]) -> Sequence[AttendanceEvent]:
        raise NotImplementedError
