from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from attendance_portal.attendance.memory_ledger import InMemoryAttendanceLedger
from attendance_portal.attendance.service import AttendanceService
from attendance_portal.core.enums import Role
from attendance_portal.identity.model import AuthorizationContext
from attendance_portal.main import create_app
from attendance_portal.roster.memory_roster_repository import InMemoryRosterRepository
from attendance_portal.roster.model import Person

FIXED_NOW = datetime(2026, 3, 11, 8, 5, 0, tzinfo=timezone.utc)

PEOPLE = [
    Person(name="Shinn Khant Aung", roll_number="20260000001", scan_credential_id="FP-0001"),
    Person(name="Swan Pyae Aung", roll_number="20260000002", scan_credential_id="FP-0002"),
    Person(name="Thet Myat Noe", roll_number="20260000003", scan_credential_id="FP-0003"),
    Person(name="Myat Thu Kha", roll_number="20260000004", scan_credential_id="FP-0004"),
]


class FrozenClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def teacher_ctx(*subjects: str, email: str = "bob.teacher@example.com") -> AuthorizationContext:
    return AuthorizationContext(role=Role.TEACHER, email=email, name="Teacher Bob", subjects=tuple(subjects))


def student_ctx(roll_number: str = "20260000002", name: str = "Swan Pyae Aung") -> AuthorizationContext:
    return AuthorizationContext(role=Role.STUDENT, email="swan.pyae@example.com", name=name, roll_number=roll_number)


def admin_ctx() -> AuthorizationContext:
    return AuthorizationContext(role=Role.ADMIN, email="admin@example.com", name="Portal Admin")


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now) -> FrozenClock:
    return FrozenClock(fixed_now)


@pytest.fixture
def ledger() -> InMemoryAttendanceLedger:
    return InMemoryAttendanceLedger()


@pytest.fixture
def roster() -> InMemoryRosterRepository:
    return InMemoryRosterRepository(PEOPLE)


@pytest.fixture
def service(ledger, roster, clock) -> AttendanceService:
    return AttendanceService(ledger, roster, clock=clock)


@pytest.fixture
def portal(clock):
    return create_app("attendance_portal.config.testing", clock=clock)


@pytest.fixture
def login(portal):
    def _login(email: str, password: str) -> str:
        res = portal.login(email, password)
        assert res.ok, res.message
        return res.value.token

    return _login
