from __future__ import annotations

from ..core.enums import Collection
from ..storage.collection import StoreCollection
from ..storage.store import KeyValueStore
from .model import KasbonRecord


class StoreKasbonRepository(StoreCollection[KasbonRecord]):
    collection = Collection.KASBON

    def __init__(self, store: KeyValueStore):
        super().__init__(store, from_dict=KasbonRecord.from_dict, id_of=lambda r: r.kasbon_id)
