from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import Clock, SystemClock, require_period
from ..common.ids import new_id
from ..common.validators import require_non_negative, require_range
from ..core.constants import MAX_DAILY_RATE, MAX_DAYS_WORKED, MIN_DAILY_RATE
from ..core.enums import KasbonStatus, PayrollStatus
from ..core.exceptions import NotFoundError, StateError, ValidationError
from ..kasbon.repository import KasbonRepository
from ..overtime.service import OvertimeService
from ..workers.repository import WorkerRepository
from .calculator.base import PayrollBreakdown, PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord, PayrollSettlement
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


class PayrollService:
    """Use case: compute pay and manage payroll records through pending -> paid | cancelled."""

    def __init__(
        self,
        payroll: PayrollRepository,
        workers: WorkerRepository,
        overtime: OvertimeService,
        kasbon: KasbonRepository,
        *,
        clock: Optional[Clock] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._workers = workers
        self._overtime = overtime
        self._kasbon = kasbon
        self._clock = clock or SystemClock()
        self._calculator = calculator or StandardPayrollCalculator()

    @staticmethod
    def _validate_inputs(daily_rate: int, days_worked: int) -> None:
        require_range(daily_rate, "Tarif harian", MIN_DAILY_RATE, MAX_DAILY_RATE)
        require_range(days_worked, "Hari kerja", 0, MAX_DAYS_WORKED)

    def compute_payroll(self, daily_rate: int, days_worked: int, overtime_total=0) -> PayrollBreakdown:
        self._validate_inputs(daily_rate, days_worked)
        require_non_negative(overtime_total, "Total lembur")
        return self._calculator.breakdown(daily_rate, days_worked, overtime_total)

    def create_payroll(
        self,
        *,
        worker_id: str,
        period: str,
        days_worked: int,
        notes: Optional[str] = None,
    ) -> PayrollRecord:
        period = require_period(period)
        worker = self._workers.get(str(worker_id))
        if not worker:
            raise NotFoundError("Tukang tidak ditemukan")
        if not worker.is_active:
            raise ValidationError("Tukang sudah tidak aktif")

        self._validate_inputs(worker.daily_rate, days_worked)

        for existing in self._payroll.list_all():
            if (
                existing.worker_id == worker.worker_id
                and existing.period == period
                and existing.status != PayrollStatus.CANCELLED
            ):
                raise ValidationError(f"Gaji {worker.name} untuk periode {period} sudah dibuat")

        record = PayrollRecord(
            payroll_id=new_id(),
            worker_id=worker.worker_id,
            worker_name=worker.name,
            period=period,
            days_worked=int(days_worked),
            daily_rate=worker.daily_rate,
            overtime=self._overtime.approved_total(worker_id=worker.worker_id, period=period),
            status=PayrollStatus.PENDING,
            created_at=self._clock.now(),
            notes=(notes or "").strip() or None,
        )
        self._payroll.add(record)
        logger.info("payroll %s created for worker %s period %s", record.payroll_id, worker.worker_id, period)
        return record

    def get(self, payroll_id: str) -> PayrollRecord:
        record = self._payroll.get(str(payroll_id))
        if not record:
            raise NotFoundError("Data gaji tidak ditemukan")
        return record

    def mark_paid(self, payroll_id: str) -> PayrollRecord:
        record = self.get(payroll_id)
        if record.status != PayrollStatus.PENDING:
            raise StateError(f"Gaji berstatus {record.status.value} tidak bisa dibayar")
        updated = replace(record, status=PayrollStatus.PAID, paid_at=self._clock.now())
        self._payroll.replace(updated)
        logger.info("payroll %s paid", record.payroll_id)
        return updated

    def cancel(self, payroll_id: str) -> PayrollRecord:
        record = self.get(payroll_id)
        if record.status != PayrollStatus.PENDING:
            raise StateError(f"Gaji berstatus {record.status.value} tidak bisa dibatalkan")
        updated = replace(record, status=PayrollStatus.CANCELLED)
        self._payroll.replace(updated)
        logger.info("payroll %s cancelled", record.payroll_id)
        return updated

    def settlement(self, payroll_id: str) -> PayrollSettlement:
        record = self.get(payroll_id)
        deduction = sum(
            k.amount
            for k in self._kasbon.list_all()
            if k.status == KasbonStatus.DEDUCTED and k.deducted_from_payroll == record.payroll_id
        )
        return PayrollSettlement(
            payroll_id=record.payroll_id,
            total_pay=record.total_pay,
            kasbon_deduction=deduction,
            net_pay=record.total_pay - deduction,
        )

    def list_records(self, *, status: Optional[PayrollStatus] = None, period: Optional[str] = None) -> list[PayrollRecord]:
        records = list(self._payroll.list_all())
        if status is not None:
            records = [r for r in records if r.status == status]
        if period is not None:
            records = [r for r in records if r.period == period]
        return records
