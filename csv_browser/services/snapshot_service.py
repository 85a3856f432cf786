from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from csv_browser.core.exceptions import SnapshotError
from csv_browser.core.snapshot import DATASET_KEY, LEGACY_DATASET_KEY, Snapshot
from csv_browser.services.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


class LoadOutcome(str, Enum):
    NOT_FOUND = "not_found"
    EMPTY = "empty"
    LOADED = "loaded"


@dataclass(frozen=True)
class LoadResult:
    outcome: LoadOutcome
    snapshot: Snapshot = field(default_factory=Snapshot)

    @property
    def found(self) -> bool:
        return self.outcome is LoadOutcome.LOADED


def _row_count(payload: Any) -> Optional[int]:
    if not isinstance(payload, dict):
        return None
    rows = payload.get(DATASET_KEY, payload.get(LEGACY_DATASET_KEY))
    return len(rows) if isinstance(rows, list) else None


class SnapshotService:
    """
    Save/Load operations over the single snapshot slot.

    `save`/`load` work on raw JSON-shaped payloads and are what the HTTP
    endpoint exposes; payloads are stored verbatim without a schema check.
    `save_snapshot`/`load_snapshot` are the typed versions used by the UI.
    Store failures surface as SnapshotError so callers can report them
    without touching their in-memory state.
    """

    def __init__(self, store: SnapshotStore):
        self.store = store

    def save(self, payload: Any) -> None:
        try:
            self.store.replace(payload)
        except Exception as e:
            logger.exception("Failed to save snapshot")
            raise SnapshotError("Failed to save snapshot") from e
        logger.info("Snapshot saved", extra={"rows": _row_count(payload)})

    def load(self) -> Optional[Any]:
        try:
            payload = self.store.read()
        except Exception as e:
            logger.exception("Failed to load snapshot")
            raise SnapshotError("Failed to load snapshot") from e
        logger.info(
            "Snapshot loaded",
            extra={"found": payload is not None, "rows": _row_count(payload)},
        )
        return payload

    def save_snapshot(self, snapshot: Snapshot) -> None:
        self.save(snapshot.to_payload())

    def load_snapshot(self) -> LoadResult:
        payload = self.load()
        if payload is None:
            return LoadResult(LoadOutcome.NOT_FOUND)

        snapshot = Snapshot.from_payload(payload)
        if snapshot.dataset.is_empty:
            return LoadResult(LoadOutcome.EMPTY)
        return LoadResult(LoadOutcome.LOADED, snapshot)
