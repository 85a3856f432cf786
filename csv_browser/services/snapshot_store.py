from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Optional


class SnapshotStore(ABC):
    """
    Abstract single-slot store for the saved snapshot (memory, database, etc.).
    """

    @abstractmethod
    def replace(self, payload: Any) -> None:
        """Overwrite the slot unconditionally."""
        pass

    @abstractmethod
    def read(self) -> Optional[Any]:
        """Return the last payload, or None if nothing has been saved."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class InMemorySnapshotStore(SnapshotStore):
    """
    Process-local implementation. Starts empty and forgets everything on
    restart. No locking: concurrent writers are last-write-wins.
    """

    def __init__(self) -> None:
        self._payload: Optional[Any] = None
        self._has_payload = False

    def replace(self, payload: Any) -> None:
        # Copy on the way in and out so callers never share the slot
        self._payload = copy.deepcopy(payload)
        self._has_payload = True

    def read(self) -> Optional[Any]:
        if not self._has_payload:
            return None
        return copy.deepcopy(self._payload)

    def clear(self) -> None:
        self._payload = None
        self._has_payload = False
