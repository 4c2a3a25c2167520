from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Course:
    """Domain entity: a subject offering. The name is the subject label."""

    course_id: int
    name: str
    teacher_email: Optional[str] = None
    student_roll_numbers: tuple[str, ...] = ()


@dataclass(frozen=True)
class AdminPanelData:
    """Read-model for the admin overview."""

    courses: list[Course]
    teachers: list[dict]
    students: list[dict]
