from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Person


class RosterStore(Protocol):
    """Repository interface for the scan roster.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def resolve_credential(self, scan_credential_id: str) -> Optional[Person]:
        raise NotImplementedError

    def get_by_roll_number(self, roll_number: str) -> Optional[Person]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Person]:
        raise NotImplementedError

    def add(self, person: Person) -> None:
        raise NotImplementedError

    def remove(self, roll_number: str) -> Optional[Person]:
        raise NotImplementedError
