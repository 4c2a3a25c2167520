from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a portal account.

    Note: Plain data object (no storage access). Teachers carry an ordered
    tuple of subjects; the first one is their default recording subject.
    """

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Role
    roll_number: str = ""
    phone: str = ""
    subjects: tuple[str, ...] = ()
    scan_credential_id: Optional[str] = None


@dataclass(frozen=True)
class AuthorizationContext:
    """What a resolved session says about the caller."""

    role: Role
    email: str
    name: str
    roll_number: str = ""
    subjects: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_teacher(self) -> bool:
        return self.role == Role.TEACHER

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass(frozen=True)
class SessionToken:
    token: str
    role: Role
    expires_at: datetime
