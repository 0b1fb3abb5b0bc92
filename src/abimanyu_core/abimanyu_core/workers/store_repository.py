from __future__ import annotations

from ..core.enums import Collection
from ..storage.collection import StoreCollection
from ..storage.store import KeyValueStore
from .model import Worker


class StoreWorkerRepository(StoreCollection[Worker]):
    collection = Collection.WORKERS

    def __init__(self, store: KeyValueStore):
        super().__init__(store, from_dict=Worker.from_dict, id_of=lambda w: w.worker_id)
