from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import normalize_email, require_non_empty
from ..core.enums import ErrorCode, Role
from ..core.exceptions import AlreadyExistsError, AuthorizationError, NotFoundError
from ..core.result import Result, guarded
from ..identity.model import AuthorizationContext
from ..identity.repository import UserRepository
from ..identity.service import AccountService
from ..roster.repository import RosterStore
from .catalog import SubjectCatalog
from .model import AdminPanelData, Course
from .repository import CourseRepository

logger = logging.getLogger(__name__)


def _require_admin(context: Optional[AuthorizationContext]) -> None:
    if context is None or not context.is_admin:
        raise AuthorizationError("Not authorized")


class CourseService:
    """Use case: admin-side course and account management."""

    def __init__(
        self,
        courses: CourseRepository,
        users: UserRepository,
        roster: RosterStore,
        accounts: AccountService,
        catalog: SubjectCatalog,
    ):
        self._courses = courses
        self._users = users
        self._roster = roster
        self._accounts = accounts
        self._catalog = catalog

    @guarded("Failed to create course", logger=logger)
    def create_course(self, context: Optional[AuthorizationContext], *, name: str) -> Result[Course]:
        _require_admin(context)
        name = require_non_empty(name, "Course name")
        if self._courses.get_by_name(name):
            raise AlreadyExistsError(f"Course {name} already exists")

        course_id = self._courses.create(name=name)
        self._catalog.add(name)
        logger.info("Created course %s", name, extra={"actor": context.email, "subject": name})
        return Result.success(self._courses.get_by_id(course_id), message="Course created")

    @guarded("Failed to assign teacher", logger=logger)
    def assign_teacher(
        self,
        context: Optional[AuthorizationContext],
        *,
        course_id: int,
        teacher_email: str,
    ) -> Result[Course]:
        _require_admin(context)
        course = self._courses.get_by_id(course_id)
        teacher = self._users.get_by_email(normalize_email(teacher_email))
        if not course or not teacher or teacher.role != Role.TEACHER:
            raise NotFoundError("Course or teacher not found")

        # a subject has exactly one recorder at a time
        if course.teacher_email and course.teacher_email != teacher.email:
            previous = self._users.get_by_email(course.teacher_email)
            if previous:
                self._users.set_subjects(
                    previous.user_id,
                    tuple(s for s in previous.subjects if s != course.name),
                )

        if course.name not in teacher.subjects:
            self._users.set_subjects(teacher.user_id, teacher.subjects + (course.name,))
        self._courses.set_teacher(course.course_id, teacher.email)

        logger.info(
            "Assigned %s to %s",
            teacher.email,
            course.name,
            extra={"actor": context.email, "subject": course.name},
        )
        return Result.success(self._courses.get_by_id(course.course_id), message="Teacher assigned to course")

    @guarded("Failed to enroll student", logger=logger)
    def enroll_student(
        self,
        context: Optional[AuthorizationContext],
        *,
        course_id: int,
        roll_number: str,
    ) -> Result[Course]:
        _require_admin(context)
        course = self._courses.get_by_id(course_id)
        if not course or not self._roster.get_by_roll_number((roll_number or "").strip()):
            raise NotFoundError("Course or student not found")

        self._courses.add_student(course.course_id, roll_number.strip())
        return Result.success(self._courses.get_by_id(course.course_id), message="Student enrolled to course")

    @guarded("Failed to register student", logger=logger)
    def register_student(
        self,
        context: Optional[AuthorizationContext],
        *,
        name: str,
        email: str,
        roll_number: str,
        phone: str,
        password: str,
        scan_credential_id: Optional[str] = None,
    ) -> Result[int]:
        _require_admin(context)
        user_id = self._accounts.create_student(
            name=name,
            email=email,
            roll_number=roll_number,
            phone=phone,
            password=password,
            scan_credential_id=scan_credential_id,
        )
        return Result.success(user_id, message="Student registered")

    @guarded("Failed to register teacher", logger=logger)
    def register_teacher(
        self,
        context: Optional[AuthorizationContext],
        *,
        name: str,
        email: str,
        phone: str,
        password: str,
    ) -> Result[int]:
        _require_admin(context)
        user_id = self._accounts.create_teacher(name=name, email=email, phone=phone, password=password)
        return Result.success(user_id, message="Teacher registered")

    @guarded("Failed to load admin data", logger=logger)
    def panel_data(self, context: Optional[AuthorizationContext]) -> Result[AdminPanelData]:
        if context is None or not context.is_admin:
            return Result.failure(ErrorCode.NOT_AUTHORIZED, "Not authorized")

        teachers = [{"name": t.name, "email": t.email} for t in self._users.list_by_role(Role.TEACHER)]
        students = [
            {"name": s.name, "roll_number": s.roll_number, "email": s.email}
            for s in self._users.list_by_role(Role.STUDENT)
        ]
        return Result.success(
            AdminPanelData(courses=list(self._courses.list_all()), teachers=teachers, students=students)
        )
