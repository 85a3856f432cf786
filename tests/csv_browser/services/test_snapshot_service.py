from __future__ import annotations

import pytest

from csv_browser.core.dataset import Dataset
from csv_browser.core.exceptions import SnapshotError
from csv_browser.core.filter_state import FilterState
from csv_browser.core.snapshot import Snapshot
from csv_browser.services.snapshot_service import LoadOutcome, SnapshotService
from csv_browser.services.snapshot_store import InMemorySnapshotStore, SnapshotStore


class _BrokenStore(SnapshotStore):
    def replace(self, payload):
        raise OSError("disk gone")

    def read(self):
        raise OSError("disk gone")

    def clear(self):
        pass


def _snapshot() -> Snapshot:
    return Snapshot(
        dataset=Dataset.from_records(
            [
                {"name": "Apple", "price": "1"},
                {"name": "Banana", "price": "2"},
            ]
        ),
        filters=FilterState({"name": "", "price": "1"}),
    )


def test_store_starts_empty():
    store = InMemorySnapshotStore()

    assert store.read() is None


def test_store_replaces_wholesale():
    store = InMemorySnapshotStore()
    store.replace({"dataset": [{"a": "1"}], "filterState": {"a": "1"}})
    store.replace({"dataset": [{"b": "2"}]})

    assert store.read() == {"dataset": [{"b": "2"}]}


def test_store_copies_in_and_out():
    store = InMemorySnapshotStore()
    payload = {"dataset": [{"a": "1"}]}
    store.replace(payload)

    payload["dataset"].append({"a": "2"})
    read_back = store.read()
    read_back["dataset"].clear()

    assert store.read() == {"dataset": [{"a": "1"}]}


def test_store_clear():
    store = InMemorySnapshotStore()
    store.replace({"dataset": []})
    store.clear()

    assert store.read() is None


def test_load_before_save_is_not_found():
    service = SnapshotService(InMemorySnapshotStore())

    assert service.load() is None
    result = service.load_snapshot()
    assert result.outcome is LoadOutcome.NOT_FOUND
    assert not result.found
    assert result.snapshot.dataset.is_empty


def test_saved_empty_dataset_is_reported_as_empty():
    service = SnapshotService(InMemorySnapshotStore())
    service.save_snapshot(Snapshot())

    result = service.load_snapshot()

    assert result.outcome is LoadOutcome.EMPTY
    assert result.snapshot == Snapshot()


def test_save_then_load_roundtrip():
    service = SnapshotService(InMemorySnapshotStore())
    current = _snapshot()

    service.save_snapshot(current)
    result = service.load_snapshot()

    assert result.outcome is LoadOutcome.LOADED
    assert result.snapshot == current


def test_load_save_load_is_stable():
    service = SnapshotService(InMemorySnapshotStore())
    service.save_snapshot(_snapshot())

    current = service.load_snapshot().snapshot
    service.save_snapshot(current)

    assert service.load_snapshot().snapshot == current


def test_raw_payload_stored_verbatim():
    service = SnapshotService(InMemorySnapshotStore())
    payload = {"anything": [1, 2, {"nested": True}], "dataset": "not rows"}

    service.save(payload)

    assert service.load() == payload
    assert service.load_snapshot().outcome is LoadOutcome.EMPTY


def test_last_write_wins():
    service = SnapshotService(InMemorySnapshotStore())
    service.save({"dataset": [{"who": "first"}]})
    service.save({"dataset": [{"who": "second"}]})

    assert service.load_snapshot().snapshot.dataset.records[0]["who"] == "second"


def test_store_failures_become_snapshot_errors():
    service = SnapshotService(_BrokenStore())

    with pytest.raises(SnapshotError):
        service.save_snapshot(_snapshot())
    with pytest.raises(SnapshotError):
        service.load_snapshot()
