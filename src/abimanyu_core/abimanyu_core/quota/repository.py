from __future__ import annotations

from typing import Optional, Protocol

from .model import QuotaLedgerEntry


class QuotaRepository(Protocol):
    def get(self, user_id: str) -> Optional[QuotaLedgerEntry]:
        raise NotImplementedError

    def save(self, entry: QuotaLedgerEntry) -> None:
        """Insert or replace the entry for ``entry.user_id``."""

        raise NotImplementedError
