from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Optional, Protocol

from ..core.exceptions import ValidationError

_PERIOD_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Wall-clock time source used outside tests."""

    def now(self) -> datetime:
        return now_local()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    return parse_iso_date(value) if value else None


def parse_optional_datetime(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def year_month(value: date) -> str:
    """Period key (YYYY-MM) of a date or datetime."""
    return f"{value.year:04d}-{value.month:02d}"


def require_period(value: str) -> str:
    v = (value or "").strip()
    if not _PERIOD_RE.match(v):
        raise ValidationError("Periode harus berformat YYYY-MM")
    return v


def week_range(day: date) -> tuple[date, date]:
    """Monday..Sunday week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)
