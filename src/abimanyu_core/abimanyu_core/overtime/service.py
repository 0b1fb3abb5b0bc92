from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import year_month
from ..common.ids import new_id
from ..common.validators import require_date, require_positive
from ..core.constants import HOURS_PER_DAY, MAX_OVERTIME_HOURS
from ..core.enums import OvertimeStatus
from ..core.exceptions import NotFoundError, StateError, ValidationError
from ..workers.repository import WorkerRepository
from .model import OvertimeRecord
from .repository import OvertimeRepository

logger = logging.getLogger(__name__)


class OvertimeService:
    def __init__(self, overtime: OvertimeRepository, workers: WorkerRepository):
        self._overtime = overtime
        self._workers = workers

    def record_overtime(
        self,
        *,
        worker_id: str,
        work_date: date,
        hours: float,
        rate: Optional[float] = None,
        description: str = "",
        project_id: Optional[str] = None,
    ) -> OvertimeRecord:
        worker = self._workers.get(str(worker_id))
        if not worker:
            raise NotFoundError("Tukang tidak ditemukan")

        work_date = require_date(work_date, "Tanggal lembur")
        if hours is None or hours <= 0 or hours > MAX_OVERTIME_HOURS:
            raise ValidationError(f"Jam lembur harus lebih dari 0 dan maksimal {MAX_OVERTIME_HOURS} jam")

        # Hourly base defaults to the daily rate spread over a standard day.
        if rate is None:
            rate = worker.daily_rate / HOURS_PER_DAY
        require_positive(rate, "Tarif lembur")

        record = OvertimeRecord(
            overtime_id=new_id(),
            worker_id=worker.worker_id,
            worker_name=worker.name,
            date=work_date,
            hours=hours,
            rate=rate,
            description=(description or "").strip(),
            project_id=project_id or None,
        )
        self._overtime.add(record)
        logger.info("overtime %s recorded for worker %s (%s h)", record.overtime_id, worker.worker_id, hours)
        return record

    def _get(self, overtime_id: str) -> OvertimeRecord:
        record = self._overtime.get(str(overtime_id))
        if not record:
            raise NotFoundError("Data lembur tidak ditemukan")
        return record

    def approve(self, overtime_id: str, *, approver: str) -> OvertimeRecord:
        record = self._get(overtime_id)
        if record.status != OvertimeStatus.PENDING:
            raise StateError("Lembur sudah diproses")
        updated = replace(record, status=OvertimeStatus.APPROVED, approved_by=approver)
        self._overtime.replace(updated)
        return updated

    def reject(self, overtime_id: str) -> OvertimeRecord:
        record = self._get(overtime_id)
        if record.status != OvertimeStatus.PENDING:
            raise StateError("Lembur sudah diproses")
        updated = replace(record, status=OvertimeStatus.REJECTED)
        self._overtime.replace(updated)
        return updated

    def list_records(self, *, worker_id: Optional[str] = None, period: Optional[str] = None) -> list[OvertimeRecord]:
        records = list(self._overtime.list_all())
        if worker_id is not None:
            records = [r for r in records if r.worker_id == str(worker_id)]
        if period is not None:
            records = [r for r in records if year_month(r.date) == period]
        return records

    def approved_total(self, *, worker_id: str, period: str):
        """Sum of approved overtime pay for one worker in one period."""
        return sum(
            (r.total for r in self.list_records(worker_id=worker_id, period=period) if r.status == OvertimeStatus.APPROVED),
            0,
        )
