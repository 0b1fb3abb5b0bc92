from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from src.abimanyu_core.abimanyu_core.container import build_container
from src.abimanyu_core.abimanyu_core.storage.store import InMemoryStore


class FixedClock:
    def __init__(self, current: datetime):
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current = self.current + timedelta(**kwargs)


class RecordingNotifier:
    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    def notify(self, level, message: str) -> None:
        self.sent.append((level.value, message))

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m in self.sent if level is None or lvl == level]


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2026, 10, 14, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def container(store, clock, notifier):
    return build_container(store=store, clock=clock, notifier=notifier)


@pytest.fixture
def worker(container):
    return container.worker_service.create_worker(
        name="Budi Santoso",
        daily_rate=150_000,
        position="Tukang Batu",
        join_date=date(2025, 1, 6),
    )
