"""Contoh: memakai service layer langsung (tanpa Flask).

Menghitung gaji, mengajukan kasbon, lalu memotongnya dari gaji yang masih pending.
"""

from datetime import date

from src.abimanyu_core.abimanyu_core.container import build_container
from src.abimanyu_core.abimanyu_core.storage.store import InMemoryStore


def main():
    container = build_container(store=InMemoryStore())

    worker = container.worker_service.create_worker(
        name="Budi Santoso", daily_rate=150_000, position="Tukang Batu", join_date=date(2024, 1, 10)
    )
    print(container.payroll_service.compute_payroll(150_000, 6, 4).to_dict())

    payroll = container.payroll_service.create_payroll(worker_id=worker.worker_id, period="2024-03", days_worked=22)
    kasbon = container.kasbon_service.submit(
        worker_id=worker.worker_id, amount=500_000, reason="Biaya sekolah anak", kasbon_date=date(2024, 3, 5)
    )
    container.kasbon_service.approve(kasbon.kasbon_id, approver="mandor")
    for deduction in container.kasbon_service.reconcile_deductions():
        print(deduction.to_dict())
    print(container.payroll_service.settlement(payroll.payroll_id).to_dict())


if __name__ == "__main__":
    main()
