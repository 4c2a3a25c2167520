from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Course


class CourseRepository(Protocol):
    def get_by_id(self, course_id: int) -> Optional[Course]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Course]:
        raise NotImplementedError

    def create(self, *, name: str) -> int:
        raise NotImplementedError

    def set_teacher(self, course_id: int, teacher_email: Optional[str]) -> bool:
        raise NotImplementedError

    def add_student(self, course_id: int, roll_number: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Course]:
        raise NotImplementedError
