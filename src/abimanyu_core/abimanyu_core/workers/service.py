from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.ids import new_id
from ..common.validators import require_date, require_min_length, require_range
from ..core.constants import MAX_DAILY_RATE, MIN_DAILY_RATE
from ..core.exceptions import NotFoundError
from .model import Worker
from .repository import WorkerRepository

logger = logging.getLogger(__name__)


class WorkerService:
    """Use case: manage the worker registry (admin)."""

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    def create_worker(
        self,
        *,
        name: str,
        daily_rate: int,
        position: str = "",
        join_date: Optional[date] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        skills: Sequence[str] = (),
    ) -> Worker:
        name = require_min_length(name, "Nama tukang", 2)
        require_range(int(daily_rate), "Tarif harian", MIN_DAILY_RATE, MAX_DAILY_RATE)
        join_date = require_date(join_date, "Tanggal bergabung")

        worker = Worker(
            worker_id=new_id(),
            name=name,
            daily_rate=int(daily_rate),
            position=(position or "").strip(),
            join_date=join_date,
            phone=(phone or "").strip() or None,
            address=(address or "").strip() or None,
            skills=tuple(s.strip() for s in skills if s and s.strip()),
        )
        self._workers.add(worker)
        logger.info("worker %s created (%s)", worker.worker_id, worker.name)
        return worker

    def get(self, worker_id: str) -> Worker:
        worker = self._workers.get(str(worker_id))
        if not worker:
            raise NotFoundError("Tukang tidak ditemukan")
        return worker

    def deactivate(self, worker_id: str) -> Worker:
        worker = self.get(worker_id)
        if not worker.is_active:
            return worker
        updated = replace(worker, is_active=False)
        self._workers.replace(updated)
        logger.info("worker %s deactivated", worker.worker_id)
        return updated

    def list_workers(self, *, active_only: bool = False) -> list[Worker]:
        workers = list(self._workers.list_all())
        if active_only:
            workers = [w for w in workers if w.is_active]
        return workers
