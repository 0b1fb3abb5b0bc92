from __future__ import annotations

from ..core.enums import Collection
from ..storage.collection import StoreCollection
from ..storage.store import KeyValueStore
from .model import Project


class StoreProjectRepository(StoreCollection[Project]):
    collection = Collection.PROJECTS

    def __init__(self, store: KeyValueStore):
        super().__init__(store, from_dict=Project.from_dict, id_of=lambda p: p.project_id)
