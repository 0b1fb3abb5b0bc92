from __future__ import annotations

from ...core.constants import OVERTIME_MULTIPLIER
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: daily rate x days, overtime at a fixed 1.5x of the hourly rate."""

    def regular_pay(self, daily_rate: int, days_worked: int) -> int:
        return daily_rate * days_worked

    def overtime_pay(self, hourly_rate, hours):
        return hourly_rate * hours * OVERTIME_MULTIPLIER


_standard = StandardPayrollCalculator()

regular_pay = _standard.regular_pay
overtime_pay = _standard.overtime_pay
total_pay = _standard.total_pay
