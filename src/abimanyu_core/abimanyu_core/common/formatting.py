from __future__ import annotations


def format_rupiah(amount) -> str:
    """Format whole Rupiah the id-ID way: ``Rp 1.500.000``."""
    value = int(round(amount))
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,}".replace(",", ".")
    return f"{sign}Rp {digits}"


def round_half_up(value: float) -> int:
    """Round non-negative values the way the dashboards display percentages."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)
