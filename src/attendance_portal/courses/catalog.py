from __future__ import annotations

import threading
from typing import Iterable


class SubjectCatalog:
    """The closed, ordered set of subject labels known to the portal."""

    def __init__(self, labels: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._labels: list[str] = []
        for label in labels:
            self.add(label)

    def add(self, label: str) -> bool:
        label = label.strip()
        with self._lock:
            if not label or label in self._labels:
                return False
            self._labels.append(label)
            return True

    def all(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._labels)

    def __contains__(self, label: object) -> bool:
        with self._lock:
            return label in self._labels
