from __future__ import annotations

from ..core.enums import Collection
from ..storage.collection import StoreCollection
from ..storage.store import KeyValueStore
from .model import Transaction


class StoreTransactionRepository(StoreCollection[Transaction]):
    collection = Collection.TRANSACTIONS

    def __init__(self, store: KeyValueStore):
        super().__init__(store, from_dict=Transaction.from_dict, id_of=lambda t: t.transaction_id)
