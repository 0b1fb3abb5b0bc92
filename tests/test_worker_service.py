from __future__ import annotations

from datetime import date

import pytest

from src.abimanyu_core.abimanyu_core.core.exceptions import NotFoundError, ValidationError


def test_create_worker_trims_fields(container):
    w = container.worker_service.create_worker(
        name="  Agus  ", daily_rate=175_000, position=" Mandor ", join_date=date(2024, 5, 1), skills=[" las ", ""]
    )
    assert (w.name, w.position, w.skills) == ("Agus", "Mandor", ("las",))
    assert w.is_active


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "A", "daily_rate": 150_000, "join_date": date(2024, 1, 1)},
        {"name": "Agus", "daily_rate": 500, "join_date": date(2024, 1, 1)},
        {"name": "Agus", "daily_rate": 2_000_000, "join_date": date(2024, 1, 1)},
        {"name": "Agus", "daily_rate": 150_000, "join_date": None},
    ],
)
def test_create_worker_validation(container, kwargs):
    with pytest.raises(ValidationError):
        container.worker_service.create_worker(**kwargs)


def test_deactivate_and_filter(container, worker):
    svc = container.worker_service
    svc.create_worker(name="Dedi", daily_rate=120_000, join_date=date(2024, 1, 1))

    svc.deactivate(worker.worker_id)

    assert [w.name for w in svc.list_workers(active_only=True)] == ["Dedi"]
    assert len(svc.list_workers()) == 2


def test_get_missing_worker(container):
    with pytest.raises(NotFoundError):
        container.worker_service.get("missing")
