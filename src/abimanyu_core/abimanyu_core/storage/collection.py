from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from ..core.enums import Collection
from .store import KeyValueStore

T = TypeVar("T")


class StoreCollection(Generic[T]):
    """Base for store-backed repositories.

    Every mutation is a read-modify-write of the whole collection, so record
    order is whatever the store returns (insertion order).
    """

    collection: Collection

    def __init__(
        self,
        store: KeyValueStore,
        *,
        from_dict: Callable[[dict], T],
        id_of: Callable[[T], str],
    ):
        self._store = store
        self._from_dict = from_dict
        self._id_of = id_of

    def list_all(self) -> list[T]:
        return [self._from_dict(r) for r in self._store.read(self.collection)]

    def get(self, record_id: str) -> Optional[T]:
        for item in self.list_all():
            if self._id_of(item) == str(record_id):
                return item
        return None

    def add(self, item: T) -> T:
        items = self.list_all()
        items.append(item)
        self._save(items)
        return item

    def replace(self, item: T) -> bool:
        items = self.list_all()
        for i, existing in enumerate(items):
            if self._id_of(existing) == self._id_of(item):
                items[i] = item
                self._save(items)
                return True
        return False

    def replace_many(self, updated: list[T]) -> None:
        by_id = {self._id_of(u): u for u in updated}
        items = [by_id.get(self._id_of(i), i) for i in self.list_all()]
        self._save(items)

    def delete(self, record_id: str) -> bool:
        items = self.list_all()
        kept = [i for i in items if self._id_of(i) != str(record_id)]
        if len(kept) == len(items):
            return False
        self._save(kept)
        return True

    def _save(self, items: list[T]) -> None:
        self._store.write(self.collection, [i.to_dict() for i in items])
