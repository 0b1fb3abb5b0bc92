from __future__ import annotations

from ..core.enums import Collection
from ..storage.collection import StoreCollection
from ..storage.store import KeyValueStore
from .model import Material


class StoreMaterialRepository(StoreCollection[Material]):
    collection = Collection.MATERIALS

    def __init__(self, store: KeyValueStore):
        super().__init__(store, from_dict=Material.from_dict, id_of=lambda m: m.material_id)
