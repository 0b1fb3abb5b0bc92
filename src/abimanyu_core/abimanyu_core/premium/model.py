from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import SubscriptionPlan


@dataclass(frozen=True)
class Subscription:
    """Premium subscription of one user.

    ``is_premium`` is the last state the expiry check observed; it lets the
    check announce an expiry exactly once.
    """

    user_id: str
    plan: SubscriptionPlan
    premium_until: datetime
    is_premium: bool = True

    def active_at(self, now: datetime) -> bool:
        return self.premium_until > now

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "plan": self.plan.value,
            "premium_until": self.premium_until.isoformat(),
            "is_premium": self.is_premium,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Subscription":
        return cls(
            user_id=str(d["user_id"]),
            plan=SubscriptionPlan(d["plan"]),
            premium_until=datetime.fromisoformat(d["premium_until"]),
            is_premium=bool(d.get("is_premium", True)),
        )
