from __future__ import annotations

from ..core.enums import Collection
from ..storage.collection import StoreCollection
from ..storage.store import KeyValueStore
from .model import OvertimeRecord


class StoreOvertimeRepository(StoreCollection[OvertimeRecord]):
    collection = Collection.OVERTIME

    def __init__(self, store: KeyValueStore):
        super().__init__(store, from_dict=OvertimeRecord.from_dict, id_of=lambda r: r.overtime_id)
