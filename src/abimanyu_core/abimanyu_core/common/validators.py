from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} wajib diisi")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value.strip()) < min_len:
        raise ValidationError(f"{field_name} minimal {min_len} karakter")
    return value.strip()


def require_range(value, field_name: str, low, high):
    if value is None or value < low or value > high:
        raise ValidationError(f"{field_name} harus antara {low}-{high}")
    return value


def require_positive(value, field_name: str):
    if value is None or value <= 0:
        raise ValidationError(f"{field_name} harus lebih dari 0")
    return value


def require_non_negative(value, field_name: str):
    if value is None or value < 0:
        raise ValidationError(f"{field_name} tidak boleh negatif")
    return value


def require_date(value: Optional[date], field_name: str) -> date:
    if value is None:
        raise ValidationError(f"{field_name} wajib diisi")
    if isinstance(value, datetime):
        return value.date()
    return value
