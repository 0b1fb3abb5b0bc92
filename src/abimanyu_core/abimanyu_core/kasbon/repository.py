from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import KasbonRecord


class KasbonRepository(Protocol):
    def get(self, kasbon_id: str) -> Optional[KasbonRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[KasbonRecord]:
        """All kasbon records in submission order."""

        raise NotImplementedError

    def add(self, record: KasbonRecord) -> KasbonRecord:
        raise NotImplementedError

    def replace(self, record: KasbonRecord) -> bool:
        raise NotImplementedError

    def replace_many(self, records: list[KasbonRecord]) -> None:
        """Write several updated records back in a single store write."""

        raise NotImplementedError

    def delete(self, kasbon_id: str) -> bool:
        raise NotImplementedError
