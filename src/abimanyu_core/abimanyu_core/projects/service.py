from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.ids import new_id
from ..common.validators import require_date, require_min_length, require_non_negative, require_positive, require_range
from ..core.enums import ProjectStatus
from ..core.exceptions import ValidationError
from .model import Project
from .store_repository import StoreProjectRepository

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, projects: StoreProjectRepository):
        self._projects = projects

    def create_project(
        self,
        *,
        name: str,
        budget: int,
        start_date: Optional[date],
        end_date: Optional[date] = None,
        description: str = "",
        location: str = "",
        status: ProjectStatus | str = ProjectStatus.PLANNING,
        spent: int = 0,
        manager: str = "",
        progress: int = 0,
        workers: Sequence[str] = (),
    ) -> Project:
        name = require_min_length(name, "Nama proyek", 3)
        require_positive(budget, "Budget proyek")
        require_non_negative(spent, "Biaya terpakai")
        require_range(progress, "Progres", 0, 100)
        start_date = require_date(start_date, "Tanggal mulai")
        if end_date and start_date > end_date:
            raise ValidationError("Tanggal mulai tidak boleh setelah tanggal selesai")
        try:
            status = ProjectStatus(status)
        except ValueError:
            raise ValidationError("Status proyek tidak valid")

        project = Project(
            project_id=new_id(),
            name=name,
            description=(description or "").strip(),
            location=(location or "").strip(),
            start_date=start_date,
            end_date=end_date,
            status=status,
            budget=budget,
            spent=spent,
            manager=(manager or "").strip(),
            progress=int(progress),
            workers=tuple(workers),
        )
        self._projects.add(project)
        logger.info("project %s created (%s)", project.project_id, project.name)
        return project

    def list_projects(self) -> list[Project]:
        return list(self._projects.list_all())
