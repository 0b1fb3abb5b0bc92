from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_optional_datetime
from ..core.enums import PayrollStatus
from .calculator.standard_calculator import regular_pay, total_pay


@dataclass(frozen=True)
class PayrollRecord:
    """Domain entity: one worker's pay for one period (YYYY-MM).

    ``daily_rate`` is a snapshot taken when the record is created, not a live
    link to the worker. ``regular_pay`` and ``total_pay`` are derived.
    """

    payroll_id: str
    worker_id: str
    worker_name: str
    period: str
    days_worked: int
    daily_rate: int
    overtime: float
    status: PayrollStatus
    created_at: datetime
    paid_at: Optional[datetime] = None
    notes: Optional[str] = None

    @property
    def regular_pay(self) -> int:
        return regular_pay(self.daily_rate, self.days_worked)

    @property
    def total_pay(self):
        return total_pay(self.regular_pay, self.overtime)

    def to_dict(self) -> dict:
        return {
            "payroll_id": self.payroll_id,
            "worker_id": self.worker_id,
            "worker_name": self.worker_name,
            "period": self.period,
            "days_worked": self.days_worked,
            "daily_rate": self.daily_rate,
            "regular_pay": self.regular_pay,
            "overtime": self.overtime,
            "total_pay": self.total_pay,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "paid_at": self.paid_at.isoformat() if self.paid_at else None,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "PayrollRecord":
        return cls(
            payroll_id=str(d["payroll_id"]),
            worker_id=str(d["worker_id"]),
            worker_name=d.get("worker_name") or "",
            period=d["period"],
            days_worked=int(d["days_worked"]),
            daily_rate=int(d["daily_rate"]),
            overtime=d.get("overtime") or 0,
            status=PayrollStatus(d["status"]),
            created_at=datetime.fromisoformat(d["created_at"]),
            paid_at=parse_optional_datetime(d.get("paid_at")),
            notes=d.get("notes"),
        )


@dataclass(frozen=True)
class PayrollSettlement:
    """What actually goes to the worker once kasbon deductions are applied."""

    payroll_id: str
    total_pay: float
    kasbon_deduction: int
    net_pay: float

    def to_dict(self) -> dict:
        return {
            "payroll_id": self.payroll_id,
            "total_pay": self.total_pay,
            "kasbon_deduction": self.kasbon_deduction,
            "net_pay": self.net_pay,
        }
