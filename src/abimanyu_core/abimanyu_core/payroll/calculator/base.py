from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PayrollBreakdown:
    regular_pay: int
    overtime: float
    total_pay: float

    def to_dict(self) -> dict:
        return {
            "regular_pay": self.regular_pay,
            "overtime": self.overtime,
            "total_pay": self.total_pay,
        }


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Implementations are pure and total: they never validate. Callers check
    rate/day ranges before calling.
    """

    @abstractmethod
    def regular_pay(self, daily_rate: int, days_worked: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def overtime_pay(self, hourly_rate, hours):
        raise NotImplementedError

    def total_pay(self, regular, overtime):
        return regular + overtime

    def breakdown(self, daily_rate: int, days_worked: int, overtime_total) -> PayrollBreakdown:
        regular = self.regular_pay(daily_rate, days_worked)
        return PayrollBreakdown(
            regular_pay=regular,
            overtime=overtime_total,
            total_pay=self.total_pay(regular, overtime_total),
        )
