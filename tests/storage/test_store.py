from __future__ import annotations

import json

import pytest

from src.abimanyu_core.abimanyu_core.core.enums import Collection
from src.abimanyu_core.abimanyu_core.storage.mirror import MirroredStore
from src.abimanyu_core.abimanyu_core.storage.store import InMemoryStore, JsonFileStore


class FakeMirror:
    def __init__(self, failures: int = 0, snapshots: dict | None = None):
        self.failures = failures
        self.snapshots = dict(snapshots or {})
        self.attempts = 0

    def push(self, collection, records):
        self.attempts += 1
        if self.failures:
            self.failures -= 1
            raise ConnectionError("mirror down")
        self.snapshots[collection] = list(records)

    def pull(self, collection):
        return self.snapshots.get(collection)


def test_in_memory_store_keeps_order_and_copies():
    store = InMemoryStore()
    records = [{"id": "b"}, {"id": "a"}, {"id": "c"}]
    store.write("things", records)
    records.append({"id": "z"})

    out = store.read("things")
    out[0]["id"] = "changed"

    assert [r["id"] for r in store.read("things")] == ["b", "a", "c"]


def test_subscribe_and_unsubscribe():
    store = InMemoryStore()
    seen = []
    unsubscribe = store.subscribe(Collection.WORKERS, lambda name, records: seen.append((name, len(records))))

    store.write(Collection.WORKERS, [{"worker_id": "1"}])
    store.write(Collection.KASBON, [{"kasbon_id": "k"}])
    unsubscribe()
    store.write(Collection.WORKERS, [])

    assert seen == [("workers", 1)]


def test_json_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "data" / "store.json"
    JsonFileStore(path).write(Collection.PAYROLL, [{"payroll_id": "p1"}, {"payroll_id": "p2"}])

    reopened = JsonFileStore(path)

    assert reopened.read(Collection.PAYROLL) == [{"payroll_id": "p1"}, {"payroll_id": "p2"}]
    assert json.loads(path.read_text(encoding="utf-8"))["payrollRecords"][0]["payroll_id"] == "p1"
    assert [p.name for p in path.parent.iterdir()] == ["store.json"]


def test_json_file_store_rejects_non_object_document(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        JsonFileStore(path)


def test_mirror_retry_succeeds_quietly(notifier):
    mirror = FakeMirror(failures=1)
    store = MirroredStore(InMemoryStore(), mirror, notifier=notifier)

    store.write(Collection.WORKERS, [{"worker_id": "1"}])

    assert mirror.attempts == 2
    assert mirror.snapshots["workers"] == [{"worker_id": "1"}]
    assert notifier.sent == []


def test_mirror_failure_is_reported_not_raised(notifier):
    mirror = FakeMirror(failures=5)
    store = MirroredStore(InMemoryStore(), mirror, notifier=notifier)

    store.write(Collection.WORKERS, [{"worker_id": "1"}])

    assert mirror.attempts == 2
    assert store.read(Collection.WORKERS) == [{"worker_id": "1"}]
    assert notifier.messages("error") == ["Gagal sinkronisasi data ke database"]


def test_hydrate_copies_mirrored_collections():
    mirror = FakeMirror(snapshots={"workers": [{"worker_id": "w1"}]})
    local = InMemoryStore()
    store = MirroredStore(local, mirror)

    loaded = store.hydrate()

    assert loaded == 1
    assert local.read(Collection.WORKERS) == [{"worker_id": "w1"}]
    assert local.read(Collection.KASBON) == []


def test_json_file_store_failed_write_leaves_memory_and_disk_alone(tmp_path):
    path = tmp_path / "store.json"
    store = JsonFileStore(path)
    store.write(Collection.WORKERS, [{"worker_id": "1"}])
    on_disk = path.read_text(encoding="utf-8")

    with pytest.raises(TypeError):
        store.write(Collection.WORKERS, [{"worker_id": "2", "photo": object()}])

    assert store.read(Collection.WORKERS) == [{"worker_id": "1"}]
    assert path.read_text(encoding="utf-8") == on_disk
    assert [p.name for p in tmp_path.iterdir()] == ["store.json"]
