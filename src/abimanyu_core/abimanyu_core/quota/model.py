from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuotaLedgerEntry:
    """Actions consumed by one user in the calendar month ``reset_date`` (YYYY-MM)."""

    user_id: str
    actions_used: int
    max_actions: int
    reset_date: str
    is_premium: bool

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "actions_used": self.actions_used,
            "max_actions": self.max_actions,
            "reset_date": self.reset_date,
            "is_premium": self.is_premium,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "QuotaLedgerEntry":
        return cls(
            user_id=str(d["user_id"]),
            actions_used=int(d.get("actions_used", 0)),
            max_actions=int(d["max_actions"]),
            reset_date=str(d["reset_date"]),
            is_premium=bool(d.get("is_premium", False)),
        )


@dataclass(frozen=True)
class QuotaStatus:
    used: int
    max: int
    remaining: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "used": self.used,
            "max": self.max,
            "remaining": self.remaining,
            "percentage": self.percentage,
        }
