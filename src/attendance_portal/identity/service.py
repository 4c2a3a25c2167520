from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import normalize_email, require_min_length, require_non_empty, require_roll_number
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import ErrorCode, Role
from ..core.exceptions import AlreadyExistsError, AuthenticationError
from ..core.result import Result, guarded
from ..roster.model import Person
from ..roster.repository import RosterStore
from .model import AuthorizationContext, SessionToken, User
from .repository import UserRepository
from .tokens import SessionSigner

logger = logging.getLogger(__name__)


class AccountService:
    """Use case: create student and teacher accounts.

    Raises DomainError subclasses; callers decide who may invoke it.
    """

    def __init__(self, users: UserRepository, roster: RosterStore):
        self._users = users
        self._roster = roster

    def create_student(
        self,
        *,
        name: str,
        email: str,
        roll_number: str,
        phone: str,
        password: str,
        scan_credential_id: Optional[str] = None,
    ) -> int:
        name = require_non_empty(name, "Name")
        email = normalize_email(email)
        roll_number = require_roll_number(roll_number)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        credential = (scan_credential_id or "").strip() or None

        if self._users.get_by_email(email) or self._users.get_by_roll_number(roll_number):
            raise AlreadyExistsError("User with this email or roll number already exists")
        if credential and self._roster.resolve_credential(credential):
            raise AlreadyExistsError(f"Scan credential {credential} is already assigned")

        # roster first: it is the store that enforces roll/credential uniqueness
        self._roster.add(Person(name=name, roll_number=roll_number, scan_credential_id=credential))
        try:
            user_id = self._users.create_user(
                name=name,
                email=email,
                password_hash=generate_password_hash(password),
                role=Role.STUDENT,
                roll_number=roll_number,
                phone=(phone or "").strip(),
                scan_credential_id=credential,
            )
        except AlreadyExistsError:
            # lost a race on the email, keep roster and accounts in step
            self._roster.remove(roll_number)
            raise
        logger.info("Registered student %s (%s)", name, roll_number)
        return user_id

    def create_teacher(self, *, name: str, email: str, phone: str, password: str) -> int:
        name = require_non_empty(name, "Name")
        email = normalize_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise AlreadyExistsError("User with this email already exists")

        user_id = self._users.create_user(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=Role.TEACHER,
            phone=(phone or "").strip(),
        )
        logger.info("Registered teacher %s", email)
        return user_id


class AuthService:
    """Use case: login, self-registration and session resolution."""

    def __init__(self, users: UserRepository, accounts: AccountService, signer: SessionSigner):
        self._users = users
        self._accounts = accounts
        self._signer = signer

    @guarded("Failed to register user", logger=logger)
    def register_student(self, *, name: str, email: str, roll_number: str, phone: str, password: str) -> Result[int]:
        user_id = self._accounts.create_student(
            name=name,
            email=email,
            roll_number=roll_number,
            phone=phone,
            password=password,
        )
        return Result.success(user_id)

    @guarded("Failed to login", logger=logger)
    def authenticate(self, email: str, password: str, *, as_teacher: bool = False) -> Result[SessionToken]:
        user = self._users.get_by_email(email or "")
        try:
            ok = bool(user) and check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            return Result.failure(ErrorCode.NOT_AUTHENTICATED, "Invalid credentials")

        if as_teacher and user.role != Role.TEACHER:
            return Result.failure(ErrorCode.NOT_AUTHORIZED, "You do not have teacher privileges")

        token, expires_at = self._signer.issue({"uid": user.user_id, "role": user.role.value})
        logger.info("Issued session for %s", user.email, extra={"actor": user.email, "role": user.role.value})
        return Result.success(SessionToken(token=token, role=user.role, expires_at=expires_at))

    @guarded("Failed to get user profile", logger=logger)
    def resolve(self, token: Optional[str]) -> Result[AuthorizationContext]:
        payload = self._signer.verify(token)
        try:
            user = self._users.get_by_id(int(payload["uid"]))
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Not authenticated")
        if not user:
            raise AuthenticationError("Not authenticated")
        return Result.success(to_context(user))


def to_context(user: User) -> AuthorizationContext:
    return AuthorizationContext(
        role=user.role,
        email=user.email,
        name=user.name,
        roll_number=user.roll_number,
        subjects=tuple(user.subjects),
    )
