"""Request-facing seam of the portal.

Every call takes the caller's session token, resolves it through the
identity provider and hands the resulting context to a service. Identity
failures come back unchanged so callers can tell "not logged in" from
"session expired" from "wrong role".
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Optional, Union

from .common.datetime_utils import parse_iso_date
from .container import Container
from .core.exceptions import ValidationError
from .core.result import Result, guarded
from .identity.model import AuthorizationContext

logger = logging.getLogger(__name__)

DateInput = Union[datetime, date, str, None]


def _coerce_date(value: DateInput) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if value is None or isinstance(value, date):
        return value
    value = value.strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Date must be YYYY-MM-DD")


class AttendancePortal:
    def __init__(self, container: Container):
        self._c = container

    @property
    def container(self) -> Container:
        return self._c

    def _as(self, token: Optional[str], action: Callable[[AuthorizationContext], Result[Any]]) -> Result[Any]:
        resolved = self._c.auth_service.resolve(token)
        if not resolved.ok:
            return resolved
        return action(resolved.value)

    # -----------------------------
    # Identity
    # -----------------------------
    def login(self, email: str, password: str, *, as_teacher: bool = False):
        return self._c.auth_service.authenticate(email, password, as_teacher=as_teacher)

    def register(self, *, name: str, email: str, roll_number: str, phone: str, password: str):
        return self._c.auth_service.register_student(
            name=name,
            email=email,
            roll_number=roll_number,
            phone=phone,
            password=password,
        )

    def profile(self, token: Optional[str]) -> Result[AuthorizationContext]:
        return self._c.auth_service.resolve(token)

    # -----------------------------
    # Attendance
    # -----------------------------
    def scan(self, token: Optional[str], scan_credential_id: str, *, subject: Optional[str] = None):
        svc = self._c.attendance_service
        return self._as(token, lambda ctx: svc.record_scan(ctx, scan_credential_id, subject=subject))

    def mark_attendance(self, token: Optional[str]):
        return self._c.attendance_service.mark_attendance()

    def roster(self, token: Optional[str]):
        return self._as(token, self._c.attendance_service.roster_for)

    @guarded("Failed to load absentees", logger=logger)
    def absentees(self, token: Optional[str], day: DateInput):
        target = _coerce_date(day)
        return self._as(token, lambda ctx: self._c.attendance_service.absentees_for(ctx, target))

    def history(self, token: Optional[str], roll_number: Optional[str] = None):
        return self._as(token, lambda ctx: self._c.attendance_service.history_for(ctx, roll_number))

    @guarded("Failed to get attendance records", logger=logger)
    def records(self, token: Optional[str], day: DateInput = None):
        target = _coerce_date(day)
        return self._as(token, lambda ctx: self._c.attendance_service.ledger_for(ctx, target))

    @guarded("Failed to export attendance data", logger=logger)
    def export(self, token: Optional[str], day: DateInput = None):
        target = _coerce_date(day)
        return self._as(token, lambda ctx: self._c.attendance_service.export_ledger(ctx, target))

    # -----------------------------
    # Admin
    # -----------------------------
    def admin_panel(self, token: Optional[str]):
        return self._as(token, self._c.course_service.panel_data)

    def create_course(self, token: Optional[str], name: str):
        return self._as(token, lambda ctx: self._c.course_service.create_course(ctx, name=name))

    def assign_teacher(self, token: Optional[str], *, course_id: int, teacher_email: str):
        return self._as(
            token,
            lambda ctx: self._c.course_service.assign_teacher(ctx, course_id=course_id, teacher_email=teacher_email),
        )

    def enroll_student(self, token: Optional[str], *, course_id: int, roll_number: str):
        return self._as(
            token,
            lambda ctx: self._c.course_service.enroll_student(ctx, course_id=course_id, roll_number=roll_number),
        )

    def register_student(self, token: Optional[str], **fields):
        return self._as(token, lambda ctx: self._c.course_service.register_student(ctx, **fields))

    def register_teacher(self, token: Optional[str], **fields):
        return self._as(token, lambda ctx: self._c.course_service.register_teacher(ctx, **fields))
