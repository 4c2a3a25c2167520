from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Callable, Iterable, Sequence

from ..common.datetime_utils import as_utc
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyRecordedError, ValidationError
from .model import AttendanceEvent
from .repository import AttendanceLedger


class InMemoryAttendanceLedger(AttendanceLedger):
    """Process-local ledger. Reads return snapshot copies."""

    def __init__(self, events: Iterable[AttendanceEvent] = ()):
        self._lock = threading.Lock()
        self._events: list[AttendanceEvent] = []
        self._keys: set[tuple[str, str, date]] = set()
        self._last_id = 0
        for event in events:
            self._store(event)

    def _store(self, event: AttendanceEvent) -> None:
        if event.status == AttendanceStatus.ABSENT:
            raise ValidationError("Absence is derived and cannot be recorded")
        if event.key in self._keys:
            raise AlreadyRecordedError(
                f"{event.student_name} already marked for {event.subject} on {event.work_date.isoformat()}"
            )
        self._events.append(event)
        self._keys.add(event.key)
        self._last_id = max(self._last_id, event.event_id)

    def exists(self, *, roll_number: str, subject: str, work_date: date) -> bool:
        with self._lock:
            return (roll_number, subject, work_date) in self._keys

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
        with self._lock:
            event = AttendanceEvent(
                event_id=self._last_id + 1,
                roll_number=roll_number,
                student_name=student_name,
                subject=subject,
                recorder=recorder,
                timestamp=as_utc(timestamp),
                work_date=work_date,
                status=status,
            )
            self._store(event)
            return event.event_id

    def query(self, predicate: Callable[[AttendanceEvent], bool]) -> Sequence[AttendanceEvent]:
        with self._lock:
            snapshot = list(self._events)
        return [e for e in snapshot if predicate(e)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
