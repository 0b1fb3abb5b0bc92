from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import OvertimeStatus
from ..payroll.calculator.standard_calculator import overtime_pay


@dataclass(frozen=True)
class OvertimeRecord:
    """Domain entity: overtime hours worked by one worker on one day.

    ``total`` is derived from ``hours`` and ``rate``; it is written out for
    readers of the store but never read back.
    """

    overtime_id: str
    worker_id: str
    worker_name: str
    date: date
    hours: float
    rate: float
    description: str = ""
    status: OvertimeStatus = OvertimeStatus.PENDING
    project_id: Optional[str] = None
    approved_by: Optional[str] = None

    @property
    def total(self):
        return overtime_pay(self.rate, self.hours)

    def to_dict(self) -> dict:
        return {
            "overtime_id": self.overtime_id,
            "worker_id": self.worker_id,
            "worker_name": self.worker_name,
            "date": self.date.isoformat(),
            "hours": self.hours,
            "rate": self.rate,
            "total": self.total,
            "description": self.description,
            "status": self.status.value,
            "project_id": self.project_id,
            "approved_by": self.approved_by,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "OvertimeRecord":
        return cls(
            overtime_id=str(d["overtime_id"]),
            worker_id=str(d["worker_id"]),
            worker_name=d.get("worker_name") or "",
            date=parse_iso_date(d["date"]),
            hours=d["hours"],
            rate=d["rate"],
            description=d.get("description") or "",
            status=OvertimeStatus(d.get("status", OvertimeStatus.PENDING.value)),
            project_id=d.get("project_id"),
            approved_by=d.get("approved_by"),
        )
