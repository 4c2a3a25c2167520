from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import Role
from ..core.exceptions import AlreadyExistsError
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[int, User] = {}
        self._by_email: dict[str, int] = {}
        self._by_roll: dict[str, int] = {}

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._by_id.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user_id = self._by_email.get((email or "").strip().lower())
            return self._by_id.get(user_id) if user_id is not None else None

    def get_by_roll_number(self, roll_number: str) -> Optional[User]:
        if not roll_number:
            return None
        with self._lock:
            user_id = self._by_roll.get(roll_number)
            return self._by_id.get(user_id) if user_id is not None else None

    def create_user(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
        roll_number: str = "",
        phone: str = "",
        subjects: tuple[str, ...] = (),
        scan_credential_id: Optional[str] = None,
    ) -> int:
        with self._lock:
            email = email.lower()
            if email in self._by_email or (roll_number and roll_number in self._by_roll):
                if roll_number:
                    raise AlreadyExistsError("User with this email or roll number already exists")
                raise AlreadyExistsError("User with this email already exists")

            user_id = len(self._by_id) + 1
            user = User(
                user_id=user_id,
                name=name,
                email=email,
                password_hash=password_hash,
                role=role,
                roll_number=roll_number,
                phone=phone,
                subjects=tuple(subjects),
                scan_credential_id=scan_credential_id,
            )
            self._by_id[user_id] = user
            self._by_email[user.email] = user_id
            if roll_number:
                self._by_roll[roll_number] = user_id
            return user_id

    def set_subjects(self, user_id: int, subjects: tuple[str, ...]) -> bool:
        with self._lock:
            user = self._by_id.get(int(user_id))
            if not user:
                return False
            self._by_id[user.user_id] = replace(user, subjects=tuple(subjects))
            return True

    def list_by_role(self, role: Role) -> Sequence[User]:
        with self._lock:
            return [u for u in self._by_id.values() if u.role == role]
