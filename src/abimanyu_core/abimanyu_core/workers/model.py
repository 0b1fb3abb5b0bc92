from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date


@dataclass(frozen=True)
class Worker:
    """Domain entity: a tukang on the contractor's books.

    Note: workers are deactivated, never deleted, because payroll, overtime
    and kasbon records keep referencing them by id.
    """

    worker_id: str
    name: str
    daily_rate: int
    position: str
    join_date: date
    is_active: bool = True
    phone: Optional[str] = None
    address: Optional[str] = None
    skills: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "worker_id": self.worker_id,
            "name": self.name,
            "daily_rate": self.daily_rate,
            "position": self.position,
            "join_date": self.join_date.isoformat(),
            "is_active": self.is_active,
            "phone": self.phone,
            "address": self.address,
            "skills": list(self.skills),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Worker":
        return cls(
            worker_id=str(d["worker_id"]),
            name=d["name"],
            daily_rate=int(d["daily_rate"]),
            position=d.get("position") or "",
            join_date=parse_iso_date(d["join_date"]),
            is_active=bool(d.get("is_active", True)),
            phone=d.get("phone"),
            address=d.get("address"),
            skills=tuple(d.get("skills") or ()),
        )
