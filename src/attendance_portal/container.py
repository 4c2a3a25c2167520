from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.classifier import StatusClassifier
from .attendance.memory_ledger import InMemoryAttendanceLedger
from .attendance.service import AttendanceService
from .common.datetime_utils import get_zone, now_utc
from .config import Settings
from .courses.catalog import SubjectCatalog
from .courses.memory_course_repository import InMemoryCourseRepository
from .courses.service import CourseService
from .identity.memory_user_repository import InMemoryUserRepository
from .identity.service import AccountService, AuthService
from .identity.tokens import SessionSigner
from .roster.memory_roster_repository import InMemoryRosterRepository


@dataclass(frozen=True)
class Container:
    settings: Settings

    users_repo: InMemoryUserRepository
    roster_repo: InMemoryRosterRepository
    courses_repo: InMemoryCourseRepository
    ledger: InMemoryAttendanceLedger
    subject_catalog: SubjectCatalog

    account_service: AccountService
    auth_service: AuthService
    attendance_service: AttendanceService
    course_service: CourseService


def build_container(
    *,
    settings: Settings,
    clock: Callable[[], datetime] = now_utc,
    token_clock: Optional[Callable[[], float]] = None,
) -> Container:
    tz = get_zone(settings.reporting_timezone)

    users_repo = InMemoryUserRepository()
    roster_repo = InMemoryRosterRepository()
    courses_repo = InMemoryCourseRepository()
    ledger = InMemoryAttendanceLedger()
    subject_catalog = SubjectCatalog(settings.subjects)

    signer = SessionSigner(
        settings.secret_key,
        session_days=settings.session_days,
        clock=token_clock or (lambda: clock().timestamp()),
    )

    account_service = AccountService(users_repo, roster_repo)
    auth_service = AuthService(users_repo, account_service, signer)
    attendance_service = AttendanceService(
        ledger,
        roster_repo,
        classifier=StatusClassifier(settings.present_cutoff, settings.late_cutoff),
        catalog=subject_catalog,
        tz=tz,
        clock=clock,
        require_explicit_subject=settings.require_explicit_subject,
    )
    course_service = CourseService(courses_repo, users_repo, roster_repo, account_service, subject_catalog)

    return Container(
        settings=settings,
        users_repo=users_repo,
        roster_repo=roster_repo,
        courses_repo=courses_repo,
        ledger=ledger,
        subject_catalog=subject_catalog,
        account_service=account_service,
        auth_service=auth_service,
        attendance_service=attendance_service,
        course_service=course_service,
    )
