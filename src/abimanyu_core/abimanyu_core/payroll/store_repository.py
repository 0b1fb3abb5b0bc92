from __future__ import annotations

from ..core.enums import Collection
from ..storage.collection import StoreCollection
from ..storage.store import KeyValueStore
from .model import PayrollRecord


class StorePayrollRepository(StoreCollection[PayrollRecord]):
    collection = Collection.PAYROLL

    def __init__(self, store: KeyValueStore):
        super().__init__(store, from_dict=PayrollRecord.from_dict, id_of=lambda r: r.payroll_id)
