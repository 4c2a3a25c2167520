from __future__ import annotations

from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for business rule violations."""

    code = ErrorCode.OPERATION_FAILED


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = ErrorCode.VALIDATION_FAILED


class AuthenticationError(DomainError):
    """Raised when credentials or a session token cannot be verified."""

    code = ErrorCode.NOT_AUTHENTICATED


class SessionExpiredError(AuthenticationError):
    """Raised when a session token was valid but is past its lifetime."""

    code = ErrorCode.SESSION_EXPIRED


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    code = ErrorCode.NOT_AUTHORIZED


class NotFoundError(DomainError):
    """Raised when a course or person referenced by an admin action is unknown."""

    code = ErrorCode.COURSE_OR_PERSON_NOT_FOUND


class AlreadyExistsError(DomainError):
    code = ErrorCode.ALREADY_EXISTS


class AlreadyRecordedError(DomainError):
    """Raised by a ledger that already holds an event for the same key."""

    code = ErrorCode.ALREADY_RECORDED
