from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import AttendanceStatus
from ..roster.model import Person


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one recorded scan. Never mutated once appended."""

    event_id: int
    roll_number: str
    student_name: str
    subject: str
    recorder: str
    timestamp: datetime
    work_date: date
    status: AttendanceStatus

    @property
    def key(self) -> tuple[str, str, date]:
        return (self.roll_number, self.subject, self.work_date)


@dataclass(frozen=True)
class AbsenceRecord:
    """Read-model: an expected (person, subject) pair with no event that day."""

    person: Person
    subject: str
    work_date: date
    status: AttendanceStatus = AttendanceStatus.ABSENT


@dataclass(frozen=True)
class Eligibility:
    """What the eligibility gate hands to the write path."""

    person: Person
    subject: str
    work_date: date
