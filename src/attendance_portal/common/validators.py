from __future__ import annotations

from ..core.constants import ROLL_NUMBER_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_roll_number(value: str) -> str:
    value = require_non_empty(value, "Roll number")
    if len(value) != ROLL_NUMBER_LENGTH or not value.isdigit():
        raise ValidationError(f"Roll number must be {ROLL_NUMBER_LENGTH} digits")
    return value


def normalize_email(value: str) -> str:
    value = require_non_empty(value, "Email").lower()
    if "@" not in value:
        raise ValidationError("Email is not valid")
    return value
