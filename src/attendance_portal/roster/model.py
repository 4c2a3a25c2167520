from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Person:
    """Domain entity: a student on the scan roster.

    Note: Plain data object, no storage access here.
    """

    name: str
    roll_number: str
    scan_credential_id: Optional[str] = None
