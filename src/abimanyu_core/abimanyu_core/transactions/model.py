from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import TransactionStatus, TransactionType


@dataclass(frozen=True)
class Transaction:
    transaction_id: str
    type: TransactionType
    category: str
    amount: int
    description: str
    date: date
    status: TransactionStatus
    created_by: str
    project_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "transaction_id": self.transaction_id,
            "type": self.type.value,
            "category": self.category,
            "amount": self.amount,
            "description": self.description,
            "date": self.date.isoformat(),
            "status": self.status.value,
            "created_by": self.created_by,
            "project_id": self.project_id,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Transaction":
        return cls(
            transaction_id=str(d["transaction_id"]),
            type=TransactionType(d["type"]),
            category=d.get("category") or "",
            amount=d["amount"],
            description=d.get("description") or "",
            date=parse_iso_date(d["date"]),
            status=TransactionStatus(d["status"]),
            created_by=d.get("created_by") or "",
            project_id=d.get("project_id"),
        )
