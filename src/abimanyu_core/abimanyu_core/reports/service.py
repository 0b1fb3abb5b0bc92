from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import Clock, SystemClock, week_range, year_month
from ..common.formatting import round_half_up
from ..core.constants import HOURS_PER_DAY, STANDARD_WEEK_HOURS
from ..core.enums import (
    KasbonStatus,
    OvertimeStatus,
    PayrollStatus,
    ProjectStatus,
    TransactionStatus,
    TransactionType,
)
from ..kasbon.repository import KasbonRepository
from ..materials.store_repository import StoreMaterialRepository
from ..overtime.model import OvertimeRecord
from ..overtime.repository import OvertimeRepository
from ..payroll.model import PayrollRecord
from ..payroll.repository import PayrollRepository
from ..projects.store_repository import StoreProjectRepository
from ..transactions.model import Transaction
from ..transactions.store_repository import StoreTransactionRepository
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .model import BudgetUtilization, ProjectBudget, WeeklyReport, WorkerProductivity


def _completed(transactions: Iterable[Transaction], tx_type: TransactionType) -> int:
    return sum(t.amount for t in transactions if t.type == tx_type and t.status == TransactionStatus.COMPLETED)


def _productivity(
    workers: Iterable[Worker],
    payroll: list[PayrollRecord],
    overtime: list[OvertimeRecord],
) -> list[WorkerProductivity]:
    rows: list[WorkerProductivity] = []
    for w in workers:
        hours_worked = sum(p.days_worked * HOURS_PER_DAY for p in payroll if p.worker_id == w.worker_id)
        overtime_hours = sum(o.hours for o in overtime if o.worker_id == w.worker_id)
        total_hours = hours_worked + overtime_hours
        rows.append(
            WorkerProductivity(
                worker_id=w.worker_id,
                worker_name=w.name,
                hours_worked=hours_worked,
                overtime_hours=overtime_hours,
                productivity=round_half_up(total_hours / STANDARD_WEEK_HOURS * 100) if total_hours > 0 else 0,
            )
        )
    return rows


class ReportService:
    """Read-only aggregates over the current store snapshot.

    Nothing is cached: every call folds the collections from scratch.
    Cancelled payroll and rejected overtime never count as hours worked.
    """

    def __init__(
        self,
        *,
        workers: WorkerRepository,
        payroll: PayrollRepository,
        overtime: OvertimeRepository,
        kasbon: KasbonRepository,
        transactions: StoreTransactionRepository,
        projects: StoreProjectRepository,
        materials: StoreMaterialRepository,
        clock: Optional[Clock] = None,
    ):
        self._workers = workers
        self._payroll = payroll
        self._overtime = overtime
        self._kasbon = kasbon
        self._transactions = transactions
        self._projects = projects
        self._materials = materials
        self._clock = clock or SystemClock()

    def _transactions_between(self, start: date, end: date) -> list[Transaction]:
        return [t for t in self._transactions.list_all() if start <= t.date <= end]

    def net_cash_flow(self, start: date, end: date) -> int:
        txs = self._transactions_between(start, end)
        return _completed(txs, TransactionType.INCOME) - _completed(txs, TransactionType.EXPENSE)

    def weekly_report(self, week_start: date) -> WeeklyReport:
        week_end = week_start + timedelta(days=6)

        txs = self._transactions_between(week_start, week_end)
        overtime = [
            o for o in self._overtime.list_all()
            if week_start <= o.date <= week_end and o.status != OvertimeStatus.REJECTED
        ]
        payroll = [
            p for p in self._payroll.list_all()
            if week_start <= p.created_at.date() <= week_end and p.status != PayrollStatus.CANCELLED
        ]
        workers = list(self._workers.list_all())

        income = _completed(txs, TransactionType.INCOME)
        expenses = _completed(txs, TransactionType.EXPENSE)
        completed_projects = sum(
            1 for p in self._projects.list_all()
            if p.status == ProjectStatus.COMPLETED and p.end_date and week_start <= p.end_date <= week_end
        )

        return WeeklyReport(
            week_start=week_start,
            week_end=week_end,
            total_payroll=sum((p.total_pay for p in payroll), 0),
            total_overtime=sum((o.total for o in overtime), 0),
            total_income=income,
            total_expenses=expenses,
            net_cash_flow=income - expenses,
            active_workers=sum(1 for w in workers if w.is_active),
            completed_projects=completed_projects,
            productivity=_productivity(workers, payroll, overtime),
            generated_at=self._clock.now(),
        )

    def monthly_productivity(self, period: str) -> list[WorkerProductivity]:
        payroll = [p for p in self._payroll.list_all() if p.period == period and p.status != PayrollStatus.CANCELLED]
        overtime = [
            o for o in self._overtime.list_all()
            if year_month(o.date) == period and o.status != OvertimeStatus.REJECTED
        ]
        return _productivity(self._workers.list_all(), payroll, overtime)

    def budget_utilization(self) -> BudgetUtilization:
        rows = [
            ProjectBudget(
                project_id=p.project_id,
                name=p.name,
                budget=p.budget,
                spent=p.spent,
                utilization=(p.spent / p.budget * 100) if p.budget else 0.0,
            )
            for p in self._projects.list_all()
        ]
        total_budget = sum(r.budget for r in rows)
        total_spent = sum(r.spent for r in rows)
        return BudgetUtilization(
            projects=rows,
            total_budget=total_budget,
            total_spent=total_spent,
            utilization=(total_spent / total_budget * 100) if total_budget else 0.0,
        )

    def dashboard(self, today: Optional[date] = None) -> dict:
        today = today or self._clock.now().date()
        month = year_month(today)
        week_start, week_end = week_range(today)

        workers = list(self._workers.list_all())
        payroll = list(self._payroll.list_all())
        txs = list(self._transactions.list_all())
        month_txs = [t for t in txs if year_month(t.date) == month]
        overtime = list(self._overtime.list_all())
        projects = list(self._projects.list_all())
        materials = list(self._materials.list_all())

        return {
            "total_workers": len(workers),
            "active_workers": sum(1 for w in workers if w.is_active),
            "monthly_payroll": sum(
                (p.total_pay for p in payroll if p.period == month and p.status == PayrollStatus.PAID), 0
            ),
            "pending_payrolls": sum(1 for p in payroll if p.status == PayrollStatus.PENDING),
            "total_income": _completed(txs, TransactionType.INCOME),
            "total_expenses": _completed(txs, TransactionType.EXPENSE),
            "monthly_income": _completed(month_txs, TransactionType.INCOME),
            "monthly_expenses": _completed(month_txs, TransactionType.EXPENSE),
            "pending_overtimes": sum(1 for o in overtime if o.status == OvertimeStatus.PENDING),
            "weekly_overtime_hours": sum((o.hours for o in overtime if week_start <= o.date <= week_end), 0),
            "total_overtime_amount": sum((o.total for o in overtime if o.status == OvertimeStatus.APPROVED), 0),
            "active_projects": sum(1 for p in projects if p.status == ProjectStatus.ACTIVE),
            "completed_projects": sum(1 for p in projects if p.status == ProjectStatus.COMPLETED),
            "total_project_budget": sum(p.budget for p in projects),
            "total_project_spent": sum(p.spent for p in projects),
            "total_materials": len(materials),
            "low_stock_materials": sum(1 for m in materials if m.is_low_stock),
            "total_material_value": sum((m.stock_value for m in materials), 0),
        }

    def integrity_issues(self) -> list[str]:
        issues: list[str] = []

        worker_ids = {w.worker_id for w in self._workers.list_all()}
        payroll = list(self._payroll.list_all())
        orphaned = [p for p in payroll if p.worker_id not in worker_ids]
        if orphaned:
            issues.append(f"{len(orphaned)} catatan gaji tanpa data tukang")

        negative = [t for t in self._transactions.list_all() if t.amount < 0]
        if negative:
            issues.append(f"{len(negative)} transaksi dengan jumlah negatif")

        payroll_ids = {p.payroll_id for p in payroll}
        dangling = [
            k for k in self._kasbon.list_all()
            if k.status == KasbonStatus.DEDUCTED and k.deducted_from_payroll not in payroll_ids
        ]
        if dangling:
            issues.append(f"{len(dangling)} kasbon terpotong dari gaji yang tidak ada")

        return issues
