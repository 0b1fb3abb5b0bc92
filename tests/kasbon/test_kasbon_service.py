from __future__ import annotations

from datetime import date

import pytest

from src.abimanyu_core.abimanyu_core.core.enums import Collection, KasbonStatus
from src.abimanyu_core.abimanyu_core.core.exceptions import NotFoundError, StateError, ValidationError


def _submit(container, worker, amount=500_000):
    return container.kasbon_service.submit(
        worker_id=worker.worker_id,
        amount=amount,
        reason="Biaya berobat",
        kasbon_date=date(2026, 10, 10),
    )


def test_submit_below_minimum_creates_nothing(container, worker, store):
    with pytest.raises(ValidationError):
        _submit(container, worker, amount=5_000)
    assert store.read(Collection.KASBON) == []


def test_submit_requires_whole_rupiah_and_reason(container, worker):
    svc = container.kasbon_service
    with pytest.raises(ValidationError):
        _submit(container, worker, amount=10_000.5)
    with pytest.raises(ValidationError):
        svc.submit(worker_id=worker.worker_id, amount=50_000, reason="  ", kasbon_date=date(2026, 10, 1))
    with pytest.raises(ValidationError):
        svc.submit(worker_id=worker.worker_id, amount=50_000, reason="Sewa", kasbon_date=None)


def test_submit_for_unknown_worker(container):
    with pytest.raises(NotFoundError):
        container.kasbon_service.submit(worker_id="nope", amount=50_000, reason="Sewa", kasbon_date=date(2026, 10, 1))


def test_submit_notifies(container, worker, notifier):
    record = _submit(container, worker)
    assert record.status == KasbonStatus.PENDING
    assert "Kasbon Budi Santoso berhasil dicatat" in notifier.messages("success")


def test_approved_kasbon_is_deducted_from_pending_payroll(container, worker, notifier):
    payroll = container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=20)
    kasbon = _submit(container, worker)
    container.kasbon_service.approve(kasbon.kasbon_id, approver="mandor")

    deductions = container.kasbon_service.reconcile_deductions()

    assert [(d.kasbon_id, d.payroll_id) for d in deductions] == [(kasbon.kasbon_id, payroll.payroll_id)]
    updated = container.kasbon_service.get(kasbon.kasbon_id)
    assert updated.status == KasbonStatus.DEDUCTED
    assert updated.deducted_from_payroll == payroll.payroll_id
    assert "Kasbon Budi Santoso otomatis dipotong dari gaji" in notifier.messages("info")


def test_reconcile_twice_does_not_double_deduct(container, worker, store):
    container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=20)
    kasbon = _submit(container, worker)
    container.kasbon_service.approve(kasbon.kasbon_id, approver="mandor")

    first = container.kasbon_service.reconcile_deductions()
    snapshot = store.read(Collection.KASBON)
    second = container.kasbon_service.reconcile_deductions()

    assert len(first) == 1
    assert second == []
    assert store.read(Collection.KASBON) == snapshot


def test_reconcile_skips_workers_without_pending_payroll(container, worker):
    other = container.worker_service.create_worker(
        name="Slamet", daily_rate=120_000, join_date=date(2025, 2, 1)
    )
    paid = container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2026-09", days_worked=20)
    container.payroll_service.mark_paid(paid.payroll_id)
    target = container.payroll_service.create_payroll(worker_id=other.worker_id, period="2026-10", days_worked=20)

    mine = _submit(container, worker)
    theirs = _submit(container, other, amount=100_000)
    for k in (mine, theirs):
        container.kasbon_service.approve(k.kasbon_id, approver="mandor")

    deductions = container.kasbon_service.reconcile_deductions()

    assert [(d.kasbon_id, d.payroll_id) for d in deductions] == [(theirs.kasbon_id, target.payroll_id)]
    assert container.kasbon_service.get(mine.kasbon_id).status == KasbonStatus.APPROVED


def test_reconcile_uses_first_pending_payroll_in_store_order(container, worker):
    first = container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2026-09", days_worked=20)
    container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=20)
    a = _submit(container, worker, amount=100_000)
    b = _submit(container, worker, amount=200_000)
    for k in (a, b):
        container.kasbon_service.approve(k.kasbon_id, approver="mandor")

    deductions = container.kasbon_service.reconcile_deductions()

    assert [d.kasbon_id for d in deductions] == [a.kasbon_id, b.kasbon_id]
    assert {d.payroll_id for d in deductions} == {first.payroll_id}
    assert container.payroll_service.settlement(first.payroll_id).kasbon_deduction == 300_000


def test_reconcile_ignores_pending_kasbon(container, worker):
    container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=20)
    _submit(container, worker)
    assert container.kasbon_service.reconcile_deductions() == []


@pytest.mark.parametrize("state", ["approved", "paid", "deducted"])
def test_approve_only_from_pending(container, worker, state):
    svc = container.kasbon_service
    kasbon = _submit(container, worker)
    svc.approve(kasbon.kasbon_id, approver="mandor")
    if state == "paid":
        svc.mark_paid(kasbon.kasbon_id)
    elif state == "deducted":
        container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2026-10", days_worked=20)
        svc.reconcile_deductions()

    before = svc.get(kasbon.kasbon_id)
    assert before.status.value == state

    with pytest.raises(StateError):
        svc.approve(kasbon.kasbon_id, approver="owner")
    assert svc.get(kasbon.kasbon_id) == before


def test_reject_is_terminal(container, worker):
    svc = container.kasbon_service
    kasbon = _submit(container, worker)

    rejected = svc.reject(kasbon.kasbon_id, approver="mandor", note="Sudah ada kasbon")

    assert rejected.status == KasbonStatus.REJECTED
    assert rejected.notes == "Sudah ada kasbon"
    with pytest.raises(StateError):
        svc.approve(kasbon.kasbon_id, approver="mandor")
    with pytest.raises(StateError):
        svc.mark_paid(kasbon.kasbon_id)


def test_mark_paid_requires_approval(container, worker):
    kasbon = _submit(container, worker)
    with pytest.raises(StateError):
        container.kasbon_service.mark_paid(kasbon.kasbon_id)


def test_delete(container, worker):
    svc = container.kasbon_service
    kasbon = _submit(container, worker)

    svc.delete(kasbon.kasbon_id)

    with pytest.raises(NotFoundError):
        svc.get(kasbon.kasbon_id)
    with pytest.raises(NotFoundError):
        svc.delete(kasbon.kasbon_id)


def test_summary_counts_by_status(container, worker):
    svc = container.kasbon_service
    a = _submit(container, worker, amount=100_000)
    b = _submit(container, worker, amount=200_000)
    _submit(container, worker, amount=300_000)
    svc.approve(a.kasbon_id, approver="mandor")
    svc.reject(b.kasbon_id, approver="mandor")

    s = svc.summary()

    assert s.total_amount == 600_000
    assert (s.pending, s.approved, s.rejected, s.paid, s.deducted) == (1, 1, 1, 0, 0)
