from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_date, parse_optional_datetime
from ..core.enums import KasbonStatus


@dataclass(frozen=True)
class KasbonRecord:
    """Domain entity: a salary advance requested against future pay."""

    kasbon_id: str
    worker_id: str
    worker_name: str
    amount: int
    reason: str
    date: date
    status: KasbonStatus
    created_at: datetime
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    deducted_from_payroll: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "kasbon_id": self.kasbon_id,
            "worker_id": self.worker_id,
            "worker_name": self.worker_name,
            "amount": self.amount,
            "reason": self.reason,
            "date": self.date.isoformat(),
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "approved_by": self.approved_by,
            "approved_at": self.approved_at.isoformat() if self.approved_at else None,
            "deducted_from_payroll": self.deducted_from_payroll,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "KasbonRecord":
        return cls(
            kasbon_id=str(d["kasbon_id"]),
            worker_id=str(d["worker_id"]),
            worker_name=d.get("worker_name") or "",
            amount=int(d["amount"]),
            reason=d.get("reason") or "",
            date=parse_iso_date(d["date"]),
            status=KasbonStatus(d["status"]),
            created_at=datetime.fromisoformat(d["created_at"]),
            approved_by=d.get("approved_by"),
            approved_at=parse_optional_datetime(d.get("approved_at")),
            deducted_from_payroll=d.get("deducted_from_payroll"),
            notes=d.get("notes"),
        )


@dataclass(frozen=True)
class Deduction:
    kasbon_id: str
    payroll_id: str

    def to_dict(self) -> dict:
        return {"kasbon_id": self.kasbon_id, "payroll_id": self.payroll_id}


@dataclass(frozen=True)
class KasbonSummary:
    total_amount: int
    pending: int
    approved: int
    paid: int
    deducted: int
    rejected: int

    def to_dict(self) -> dict:
        return {
            "total_amount": self.total_amount,
            "pending": self.pending,
            "approved": self.approved,
            "paid": self.paid,
            "deducted": self.deducted,
            "rejected": self.rejected,
        }
