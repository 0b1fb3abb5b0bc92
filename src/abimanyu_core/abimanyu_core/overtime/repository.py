from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import OvertimeRecord


class OvertimeRepository(Protocol):
    def get(self, overtime_id: str) -> Optional[OvertimeRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[OvertimeRecord]:
        raise NotImplementedError

    def add(self, record: OvertimeRecord) -> OvertimeRecord:
        raise NotImplementedError

    def replace(self, record: OvertimeRecord) -> bool:
        raise NotImplementedError
