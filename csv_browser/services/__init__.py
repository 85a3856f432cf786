from .snapshot_service import LoadOutcome, LoadResult, SnapshotService
from .snapshot_store import InMemorySnapshotStore, SnapshotStore

__all__ = [
    "InMemorySnapshotStore",
    "LoadOutcome",
    "LoadResult",
    "SnapshotService",
    "SnapshotStore",
]
