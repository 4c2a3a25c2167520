from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional, Sequence

from .model import Course
from .repository import CourseRepository


class InMemoryCourseRepository(CourseRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[int, Course] = {}

    def get_by_id(self, course_id: int) -> Optional[Course]:
        with self._lock:
            return self._by_id.get(int(course_id))

    def get_by_name(self, name: str) -> Optional[Course]:
        wanted = (name or "").strip().lower()
        with self._lock:
            return next((c for c in self._by_id.values() if c.name.lower() == wanted), None)

    def create(self, *, name: str) -> int:
        with self._lock:
            course_id = len(self._by_id) + 1
            self._by_id[course_id] = Course(course_id=course_id, name=name)
            return course_id

    def set_teacher(self, course_id: int, teacher_email: Optional[str]) -> bool:
        with self._lock:
            course = self._by_id.get(int(course_id))
            if not course:
                return False
            self._by_id[course.course_id] = replace(course, teacher_email=teacher_email)
            return True

    def add_student(self, course_id: int, roll_number: str) -> bool:
        with self._lock:
            course = self._by_id.get(int(course_id))
            if not course:
                return False
            if roll_number not in course.student_roll_numbers:
                self._by_id[course.course_id] = replace(
                    course,
                    student_roll_numbers=course.student_roll_numbers + (roll_number,),
                )
            return True

    def list_all(self) -> Sequence[Course]:
        with self._lock:
            return list(self._by_id.values())
