from __future__ import annotations

from datetime import date

import pytest

from src.abimanyu_core.abimanyu_core.core.enums import PayrollStatus
from src.abimanyu_core.abimanyu_core.core.exceptions import NotFoundError, StateError, ValidationError


def test_compute_payroll_rejects_out_of_range_inputs(container):
    svc = container.payroll_service
    with pytest.raises(ValidationError):
        svc.compute_payroll(999, 10)
    with pytest.raises(ValidationError):
        svc.compute_payroll(150_000, 32)
    with pytest.raises(ValidationError):
        svc.compute_payroll(150_000, 10, -1)


def test_compute_payroll_returns_breakdown(container):
    b = container.payroll_service.compute_payroll(150_000, 25, 150_000)
    assert (b.regular_pay, b.overtime, b.total_pay) == (3_750_000, 150_000, 3_900_000)


def test_create_payroll_snapshots_rate_and_includes_approved_overtime(container, worker):
    ot = container.overtime_service
    approved = ot.record_overtime(worker_id=worker.worker_id, work_date=date(2026, 10, 3), hours=8, rate=12_500)
    ot.approve(approved.overtime_id, approver="mandor")
    # pending and other-period overtime are left out
    ot.record_overtime(worker_id=worker.worker_id, work_date=date(2026, 10, 4), hours=2, rate=12_500)
    other = ot.record_overtime(worker_id=worker.worker_id, work_date=date(2026, 9, 30), hours=3, rate=12_500)
    ot.approve(other.overtime_id, approver="mandor")

    record = container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=25)

    assert record.daily_rate == 150_000
    assert record.regular_pay == 3_750_000
    assert record.overtime == 150_000
    assert record.total_pay == 3_900_000
    assert record.status == PayrollStatus.PENDING


def test_create_payroll_once_per_worker_and_period(container, worker):
    svc = container.payroll_service
    first = svc.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=20)

    with pytest.raises(ValidationError):
        svc.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=21)

    svc.cancel(first.payroll_id)
    again = svc.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=21)
    assert again.days_worked == 21


def test_create_payroll_validates_period_and_worker(container, worker):
    svc = container.payroll_service
    with pytest.raises(ValidationError):
        svc.create_payroll(worker_id=worker.worker_id, period="2026-13", days_worked=1)
    with pytest.raises(NotFoundError):
        svc.create_payroll(worker_id="missing", period="2026-10", days_worked=1)

    container.worker_service.deactivate(worker.worker_id)
    with pytest.raises(ValidationError):
        svc.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=1)


def test_paid_payroll_cannot_be_cancelled(container, worker, fixed_now):
    svc = container.payroll_service
    record = svc.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=10)

    paid = svc.mark_paid(record.payroll_id)
    assert paid.status == PayrollStatus.PAID
    assert paid.paid_at == fixed_now

    with pytest.raises(StateError):
        svc.cancel(record.payroll_id)
    with pytest.raises(StateError):
        svc.mark_paid(record.payroll_id)


def test_settlement_subtracts_deducted_kasbon(container, worker):
    record = container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=20)
    kasbon = container.kasbon_service.submit(
        worker_id=worker.worker_id, amount=500_000, reason="Biaya sekolah", kasbon_date=date(2026, 10, 5)
    )
    container.kasbon_service.approve(kasbon.kasbon_id, approver="mandor")
    container.kasbon_service.reconcile_deductions()

    s = container.payroll_service.settlement(record.payroll_id)

    assert s.total_pay == 3_000_000
    assert s.kasbon_deduction == 500_000
    assert s.net_pay == 2_500_000
    # the payroll record itself is untouched
    assert container.payroll_service.get(record.payroll_id).total_pay == 3_000_000
