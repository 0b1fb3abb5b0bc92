from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class WorkerProductivity:
    worker_id: str
    worker_name: str
    hours_worked: float
    overtime_hours: float
    productivity: int


@dataclass(frozen=True)
class WeeklyReport:
    week_start: date
    week_end: date
    total_payroll: float
    total_overtime: float
    total_income: int
    total_expenses: int
    net_cash_flow: int
    active_workers: int
    completed_projects: int
    productivity: list[WorkerProductivity]
    generated_at: datetime

    def to_dict(self) -> dict:
        d = asdict(self)
        d["week_start"] = self.week_start.isoformat()
        d["week_end"] = self.week_end.isoformat()
        d["generated_at"] = self.generated_at.isoformat()
        return d


@dataclass(frozen=True)
class ProjectBudget:
    project_id: str
    name: str
    budget: int
    spent: int
    utilization: float


@dataclass(frozen=True)
class BudgetUtilization:
    projects: list[ProjectBudget]
    total_budget: int
    total_spent: int
    utilization: float

    def to_dict(self) -> dict:
        return asdict(self)
