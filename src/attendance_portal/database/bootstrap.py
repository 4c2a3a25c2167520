from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import TYPE_CHECKING

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import local_date
from ..core.enums import AttendanceStatus, Role
from ..roster.model import Person

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

DEMO_ADMIN = {"name": "Portal Admin", "email": "admin@example.com", "password": "admin123"}

DEMO_TEACHERS = [
    {"name": "Teacher Alice", "email": "alice.teacher@example.com", "subject": "CRP"},
    {"name": "Teacher Bob", "email": "bob.teacher@example.com", "subject": "IOT"},
    {"name": "Teacher Carol", "email": "carol.teacher@example.com", "subject": "BPS"},
    {"name": "Teacher David", "email": "david.teacher@example.com", "subject": "WDD"},
]
DEMO_TEACHER_PASSWORD = "teacher123"

DEMO_STUDENTS = [
    {"name": "Shinn Khant Aung", "email": "shinn.khant@example.com", "roll": "20260000001", "phone": "09111111111", "fp": "FP-0001"},
    {"name": "Swan Pyae Aung", "email": "swan.pyae@example.com", "roll": "20260000002", "phone": "09222222222", "fp": "FP-0002"},
    {"name": "Thet Myat Noe", "email": "thet.myat@example.com", "roll": "20260000003", "phone": "09333333333", "fp": "FP-0003"},
    {"name": "Myat Thu Kha", "email": "myat.thu@example.com", "roll": "20260000004", "phone": "09444444444", "fp": "FP-0004"},
]
DEMO_STUDENT_PASSWORD = "student123"

# (roll, subject, recorder, scanned at UTC, status)
DEMO_EVENTS = [
    ("20260000001", "CRP", "alice.teacher@example.com", datetime(2025, 3, 11, 8, 0, tzinfo=timezone.utc), AttendanceStatus.PRESENT),
    ("20260000003", "BPS", "carol.teacher@example.com", datetime(2025, 3, 11, 8, 20, tzinfo=timezone.utc), AttendanceStatus.LATE),
]


def ensure_demo_data(container: "Container", *, tz: tzinfo = timezone.utc) -> None:
    """Load the demo accounts, roster, courses and sample scans.

    Idempotent: does nothing when the admin account already exists.
    """

    users = container.users_repo
    if users.get_by_email(DEMO_ADMIN["email"]):
        return

    users.create_user(
        name=DEMO_ADMIN["name"],
        email=DEMO_ADMIN["email"],
        password_hash=generate_password_hash(DEMO_ADMIN["password"]),
        role=Role.ADMIN,
    )

    for t in DEMO_TEACHERS:
        users.create_user(
            name=t["name"],
            email=t["email"],
            password_hash=generate_password_hash(DEMO_TEACHER_PASSWORD),
            role=Role.TEACHER,
            subjects=(t["subject"],),
        )
        course_id = container.courses_repo.create(name=t["subject"])
        container.courses_repo.set_teacher(course_id, t["email"])
        container.subject_catalog.add(t["subject"])

    for s in DEMO_STUDENTS:
        container.roster_repo.add(Person(name=s["name"], roll_number=s["roll"], scan_credential_id=s["fp"]))
        users.create_user(
            name=s["name"],
            email=s["email"],
            password_hash=generate_password_hash(DEMO_STUDENT_PASSWORD),
            role=Role.STUDENT,
            roll_number=s["roll"],
            phone=s["phone"],
            scan_credential_id=s["fp"],
        )
        for course in container.courses_repo.list_all():
            container.courses_repo.add_student(course.course_id, s["roll"])

    names = {s["roll"]: s["name"] for s in DEMO_STUDENTS}
    for roll, subject, recorder, scanned_at, status in DEMO_EVENTS:
        container.ledger.append(
            roll_number=roll,
            student_name=names[roll],
            subject=subject,
            recorder=recorder,
            timestamp=scanned_at,
            work_date=local_date(scanned_at, tz),
            status=status,
        )

    logger.info(
        "Demo data ready (%d teachers, %d students, %d events)",
        len(DEMO_TEACHERS),
        len(DEMO_STUDENTS),
        len(DEMO_EVENTS),
    )
