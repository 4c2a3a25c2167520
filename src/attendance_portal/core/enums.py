from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Closed set of portal roles used for authorization."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Attendance status. ABSENT is derived, never stored in the ledger."""

    PRESENT = "present"
    LATE = "late"
    SERIOUSLY_LATE = "seriously_late"
    ABSENT = "absent"

    @property
    def label(self) -> str:
        return {
            AttendanceStatus.PRESENT: "present",
            AttendanceStatus.LATE: "late",
            AttendanceStatus.SERIOUSLY_LATE: "serious late",
            AttendanceStatus.ABSENT: "absent",
        }[self]


class ErrorCode(str, Enum):
    """Failure tags carried by every unsuccessful Result."""

    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    SESSION_EXPIRED = "SESSION_EXPIRED"
    NO_SUBJECT_ASSIGNED = "NO_SUBJECT_ASSIGNED"
    SUBJECT_AMBIGUOUS = "SUBJECT_AMBIGUOUS"
    UNKNOWN_CREDENTIAL = "UNKNOWN_CREDENTIAL"
    ALREADY_RECORDED = "ALREADY_RECORDED"
    COURSE_OR_PERSON_NOT_FOUND = "COURSE_OR_PERSON_NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    OPERATION_FAILED = "OPERATION_FAILED"
