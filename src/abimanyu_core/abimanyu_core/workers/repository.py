from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker


class WorkerRepository(Protocol):
    """Repository interface for workers.

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def get(self, worker_id: str) -> Optional[Worker]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Worker]:
        raise NotImplementedError

    def add(self, worker: Worker) -> Worker:
        raise NotImplementedError

    def replace(self, worker: Worker) -> bool:
        raise NotImplementedError
