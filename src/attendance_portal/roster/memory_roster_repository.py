from __future__ import annotations

import threading
from typing import Optional, Sequence

from ..core.exceptions import AlreadyExistsError
from .model import Person
from .repository import RosterStore


class InMemoryRosterRepository(RosterStore):
    """Roster keyed by roll number and by scan credential, insertion ordered."""

    def __init__(self, people: Sequence[Person] = ()):
        self._lock = threading.Lock()
        self._by_roll: dict[str, Person] = {}
        self._by_credential: dict[str, Person] = {}
        for person in people:
            self.add(person)

    def resolve_credential(self, scan_credential_id: str) -> Optional[Person]:
        with self._lock:
            return self._by_credential.get((scan_credential_id or "").strip())

    def get_by_roll_number(self, roll_number: str) -> Optional[Person]:
        with self._lock:
            return self._by_roll.get(roll_number)

    def list_all(self) -> Sequence[Person]:
        with self._lock:
            return list(self._by_roll.values())

    def add(self, person: Person) -> None:
        with self._lock:
            if person.roll_number in self._by_roll:
                raise AlreadyExistsError(f"Roll number {person.roll_number} is already on the roster")
            if person.scan_credential_id and person.scan_credential_id in self._by_credential:
                raise AlreadyExistsError(f"Scan credential {person.scan_credential_id} is already assigned")
            self._by_roll[person.roll_number] = person
            if person.scan_credential_id:
                self._by_credential[person.scan_credential_id] = person

    def remove(self, roll_number: str) -> Optional[Person]:
        with self._lock:
            person = self._by_roll.pop(roll_number, None)
            if person and person.scan_credential_id:
                self._by_credential.pop(person.scan_credential_id, None)
            return person
