from __future__ import annotations

from datetime import date

from src.abimanyu_core.abimanyu_core.storage.store import InMemoryStore
from src.abimanyu_core.abimanyu_core.workers.model import Worker
from src.abimanyu_core.abimanyu_core.workers.store_repository import StoreWorkerRepository


def _worker(worker_id: str, name: str) -> Worker:
    return Worker(worker_id=worker_id, name=name, daily_rate=100_000, position="", join_date=date(2025, 1, 1))


def test_replace_many_keeps_order_and_writes_once():
    store = InMemoryStore()
    repo = StoreWorkerRepository(store)
    for wid, name in (("1", "Andi"), ("2", "Bayu"), ("3", "Cahya")):
        repo.add(_worker(wid, name))
    writes = []
    store.subscribe("workers", lambda name, records: writes.append(records))

    repo.replace_many([_worker("3", "Cahyo"), _worker("1", "Andika")])

    assert [w.name for w in repo.list_all()] == ["Andika", "Bayu", "Cahyo"]
    assert len(writes) == 1


def test_replace_and_delete_report_missing_records():
    repo = StoreWorkerRepository(InMemoryStore())
    repo.add(_worker("1", "Andi"))

    assert repo.replace(_worker("9", "Nobody")) is False
    assert repo.delete("9") is False
    assert repo.delete("1") is True
    assert repo.get("1") is None
