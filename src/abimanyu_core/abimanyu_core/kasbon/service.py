from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import Clock, SystemClock
from ..common.formatting import format_rupiah
from ..common.ids import new_id
from ..common.validators import require_date, require_non_empty
from ..core.constants import KASBON_MIN_AMOUNT
from ..core.enums import KasbonStatus, NotificationLevel, PayrollStatus
from ..core.exceptions import NotFoundError, StateError, ValidationError
from ..notifications.notifier import Notifier
from ..payroll.repository import PayrollRepository
from ..workers.repository import WorkerRepository
from .model import Deduction, KasbonRecord, KasbonSummary
from .repository import KasbonRepository

logger = logging.getLogger(__name__)


class KasbonService:
    """Salary advance settlement.

    Lifecycle::

        pending -> approved -> deducted   (settled against a pending payroll)
        pending -> approved -> paid       (paid out manually)
        pending -> rejected

    Deduction is not a user action: callers run ``reconcile_deductions()``
    after every change that can create a match (kasbon approved, payroll
    created). It is idempotent.
    """

    def __init__(
        self,
        kasbon: KasbonRepository,
        workers: WorkerRepository,
        payroll: PayrollRepository,
        notifier: Notifier,
        *,
        clock: Optional[Clock] = None,
    ):
        self._kasbon = kasbon
        self._workers = workers
        self._payroll = payroll
        self._notifier = notifier
        self._clock = clock or SystemClock()

    def submit(
        self,
        *,
        worker_id: str,
        amount: int,
        reason: str,
        kasbon_date: Optional[date],
        notes: Optional[str] = None,
    ) -> KasbonRecord:
        if amount is None or amount < KASBON_MIN_AMOUNT:
            raise ValidationError(f"Jumlah kasbon minimal {format_rupiah(KASBON_MIN_AMOUNT)}")
        if int(amount) != amount:
            raise ValidationError("Jumlah kasbon harus dalam Rupiah penuh")
        reason = require_non_empty(reason, "Alasan kasbon")
        kasbon_date = require_date(kasbon_date, "Tanggal kasbon")

        worker = self._workers.get(str(worker_id))
        if not worker:
            raise NotFoundError("Tukang tidak ditemukan")

        record = KasbonRecord(
            kasbon_id=new_id(),
            worker_id=worker.worker_id,
            worker_name=worker.name,
            amount=int(amount),
            reason=reason,
            date=kasbon_date,
            status=KasbonStatus.PENDING,
            created_at=self._clock.now(),
            notes=(notes or "").strip() or None,
        )
        self._kasbon.add(record)
        logger.info("kasbon %s submitted for worker %s (%d)", record.kasbon_id, worker.worker_id, record.amount)
        self._notifier.notify(NotificationLevel.SUCCESS, f"Kasbon {worker.name} berhasil dicatat")
        return record

    def get(self, kasbon_id: str) -> KasbonRecord:
        record = self._kasbon.get(str(kasbon_id))
        if not record:
            raise NotFoundError("Kasbon tidak ditemukan")
        return record

    def _transition(self, kasbon_id: str, *, expected: KasbonStatus, **changes) -> KasbonRecord:
        record = self.get(kasbon_id)
        if record.status != expected:
            logger.warning(
                "kasbon %s: %s -> %s rejected (current %s)",
                record.kasbon_id,
                expected.value,
                changes.get("status").value,
                record.status.value,
            )
            raise StateError(f"Kasbon berstatus {record.status.value} tidak dapat diproses")
        updated = replace(record, **changes)
        self._kasbon.replace(updated)
        return updated

    def approve(self, kasbon_id: str, *, approver: str) -> KasbonRecord:
        approver = require_non_empty(approver, "Penyetuju")
        updated = self._transition(
            kasbon_id,
            expected=KasbonStatus.PENDING,
            status=KasbonStatus.APPROVED,
            approved_by=approver,
            approved_at=self._clock.now(),
        )
        self._notifier.notify(NotificationLevel.SUCCESS, "Kasbon berhasil disetujui")
        return updated

    def reject(self, kasbon_id: str, *, approver: str, note: Optional[str] = None) -> KasbonRecord:
        approver = require_non_empty(approver, "Penyetuju")
        record = self.get(kasbon_id)
        updated = self._transition(
            kasbon_id,
            expected=KasbonStatus.PENDING,
            status=KasbonStatus.REJECTED,
            approved_by=approver,
            approved_at=self._clock.now(),
            notes=(note or "").strip() or record.notes,
        )
        self._notifier.notify(NotificationLevel.INFO, "Kasbon ditolak")
        return updated

    def mark_paid(self, kasbon_id: str) -> KasbonRecord:
        updated = self._transition(kasbon_id, expected=KasbonStatus.APPROVED, status=KasbonStatus.PAID)
        self._notifier.notify(NotificationLevel.SUCCESS, "Kasbon berhasil dibayar")
        return updated

    def delete(self, kasbon_id: str) -> None:
        if not self._kasbon.delete(str(kasbon_id)):
            raise NotFoundError("Kasbon tidak ditemukan")
        self._notifier.notify(NotificationLevel.SUCCESS, "Kasbon berhasil dihapus")

    def reconcile_deductions(self) -> list[Deduction]:
        """Settle approved kasbons against each worker's first pending payroll.

        Kasbons are visited in submission order and payrolls in store order,
        so the outcome is reproducible for a given snapshot.
        """
        pending_payrolls = [p for p in self._payroll.list_all() if p.status == PayrollStatus.PENDING]
        if not pending_payrolls:
            return []

        updated: list[KasbonRecord] = []
        for kasbon in self._kasbon.list_all():
            if kasbon.status != KasbonStatus.APPROVED or kasbon.deducted_from_payroll:
                continue
            match = next((p for p in pending_payrolls if p.worker_id == kasbon.worker_id), None)
            if match is None:
                continue
            updated.append(
                replace(kasbon, status=KasbonStatus.DEDUCTED, deducted_from_payroll=match.payroll_id)
            )

        if not updated:
            return []

        self._kasbon.replace_many(updated)
        for kasbon in updated:
            logger.info("kasbon %s deducted from payroll %s", kasbon.kasbon_id, kasbon.deducted_from_payroll)
            self._notifier.notify(NotificationLevel.INFO, f"Kasbon {kasbon.worker_name} otomatis dipotong dari gaji")
        return [Deduction(kasbon_id=k.kasbon_id, payroll_id=k.deducted_from_payroll) for k in updated]

    def list_records(self, *, status: Optional[KasbonStatus] = None, worker_id: Optional[str] = None) -> list[KasbonRecord]:
        records = list(self._kasbon.list_all())
        if status is not None:
            records = [r for r in records if r.status == status]
        if worker_id is not None:
            records = [r for r in records if r.worker_id == str(worker_id)]
        return records

    def summary(self) -> KasbonSummary:
        records = list(self._kasbon.list_all())

        def count(status: KasbonStatus) -> int:
            return sum(1 for r in records if r.status == status)

        return KasbonSummary(
            total_amount=sum(r.amount for r in records),
            pending=count(KasbonStatus.PENDING),
            approved=count(KasbonStatus.APPROVED),
            paid=count(KasbonStatus.PAID),
            deducted=count(KasbonStatus.DEDUCTED),
            rejected=count(KasbonStatus.REJECTED),
        )
