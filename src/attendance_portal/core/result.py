from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Generic, Optional, TypeVar

from .enums import ErrorCode
from .exceptions import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Tagged outcome of a portal operation.

    Failures are data: callers read ``error`` and render ``message`` verbatim.
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[ErrorCode] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: Optional[T] = None, *, message: Optional[str] = None) -> "Result[T]":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: ErrorCode, message: str) -> "Result[T]":
        return cls(ok=False, error=error, message=message)

    @classmethod
    def from_error(cls, exc: DomainError) -> "Result[T]":
        return cls.failure(exc.code, str(exc))


def guarded(failure_message: str, *, logger: Optional[logging.Logger] = None):
    """Turn raised errors into failed Results at an operation boundary.

    DomainError keeps its own code and message. Anything else is logged with
    traceback and reported as OPERATION_FAILED with ``failure_message``.
    """

    log = logger or logging.getLogger(__name__)

    def decorator(func: Callable[..., Result[Any]]) -> Callable[..., Result[Any]]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Result[Any]:
            try:
                return func(*args, **kwargs)
            except DomainError as e:
                return Result.from_error(e)
            except Exception:
                log.exception("%s: %s", func.__qualname__, failure_message)
                return Result.failure(ErrorCode.OPERATION_FAILED, failure_message)

        return wrapper

    return decorator
