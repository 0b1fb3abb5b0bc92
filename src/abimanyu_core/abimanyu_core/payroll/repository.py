from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def get(self, payroll_id: str) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[PayrollRecord]:
        """All payroll records in insertion order."""

        raise NotImplementedError

    def add(self, record: PayrollRecord) -> PayrollRecord:
        raise NotImplementedError

    def replace(self, record: PayrollRecord) -> bool:
        raise NotImplementedError
