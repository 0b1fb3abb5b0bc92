from __future__ import annotations

from ..core.enums import Collection
from ..storage.collection import StoreCollection
from ..storage.store import KeyValueStore
from .model import QuotaLedgerEntry


class StoreQuotaRepository(StoreCollection[QuotaLedgerEntry]):
    collection = Collection.ACTION_LIMITS

    def __init__(self, store: KeyValueStore):
        super().__init__(store, from_dict=QuotaLedgerEntry.from_dict, id_of=lambda e: e.user_id)

    def save(self, entry: QuotaLedgerEntry) -> None:
        if not self.replace(entry):
            self.add(entry)
