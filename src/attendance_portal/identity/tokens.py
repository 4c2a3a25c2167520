from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Callable

from itsdangerous import BadSignature, SignatureExpired, TimestampSigner, URLSafeTimedSerializer

from ..core.exceptions import AuthenticationError, SessionExpiredError

SESSION_SALT = "attendance-portal-session"


def _clocked_signer(clock: Callable[[], float]) -> type[TimestampSigner]:
    class ClockedTimestampSigner(TimestampSigner):
        def get_timestamp(self) -> int:
            return int(clock())

    return ClockedTimestampSigner


class SessionSigner:
    """Issues and verifies opaque, signed, time-limited session tokens."""

    def __init__(self, secret_key: str, *, session_days: int = 7, clock: Callable[[], float] = time.time):
        if not secret_key:
            raise ValueError("secret_key is required")
        self._clock = clock
        self._max_age = int(session_days) * 24 * 60 * 60
        self._serializer = URLSafeTimedSerializer(
            secret_key,
            salt=SESSION_SALT,
            signer=_clocked_signer(clock),
        )

    @property
    def max_age_seconds(self) -> int:
        return self._max_age

    def issue(self, payload: dict[str, Any]) -> tuple[str, datetime]:
        token = self._serializer.dumps(payload)
        expires_at = datetime.fromtimestamp(int(self._clock()) + self._max_age, tz=timezone.utc)
        return token, expires_at

    def verify(self, token: str | None) -> dict[str, Any]:
        if not token:
            raise AuthenticationError("Not authenticated")
        try:
            payload = self._serializer.loads(token, max_age=self._max_age)
        except SignatureExpired:
            raise SessionExpiredError("Session expired")
        except BadSignature:
            raise AuthenticationError("Not authenticated")

        if not isinstance(payload, dict):
            raise AuthenticationError("Not authenticated")
        return payload
