from __future__ import annotations

from ..core.enums import Collection
from ..storage.collection import StoreCollection
from ..storage.store import KeyValueStore
from .model import Subscription


class StoreSubscriptionRepository(StoreCollection[Subscription]):
    collection = Collection.SUBSCRIPTIONS

    def __init__(self, store: KeyValueStore):
        super().__init__(store, from_dict=Subscription.from_dict, id_of=lambda s: s.user_id)

    def save(self, subscription: Subscription) -> None:
        if not self.replace(subscription):
            self.add(subscription)
