from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date, parse_optional_date
from ..core.enums import ProjectStatus


@dataclass(frozen=True)
class Project:
    project_id: str
    name: str
    description: str
    location: str
    start_date: date
    status: ProjectStatus
    budget: int
    spent: int = 0
    end_date: Optional[date] = None
    manager: str = ""
    progress: int = 0
    workers: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "project_id": self.project_id,
            "name": self.name,
            "description": self.description,
            "location": self.location,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "status": self.status.value,
            "budget": self.budget,
            "spent": self.spent,
            "manager": self.manager,
            "progress": self.progress,
            "workers": list(self.workers),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Project":
        return cls(
            project_id=str(d["project_id"]),
            name=d["name"],
            description=d.get("description") or "",
            location=d.get("location") or "",
            start_date=parse_iso_date(d["start_date"]),
            end_date=parse_optional_date(d.get("end_date")),
            status=ProjectStatus(d["status"]),
            budget=d["budget"],
            spent=d.get("spent") or 0,
            manager=d.get("manager") or "",
            progress=int(d.get("progress") or 0),
            workers=tuple(d.get("workers") or ()),
        )
