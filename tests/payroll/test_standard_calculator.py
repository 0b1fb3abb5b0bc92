import pytest

from src.abimanyu_core.abimanyu_core.payroll.calculator.standard_calculator import (
    StandardPayrollCalculator,
    overtime_pay,
    regular_pay,
    total_pay,
)


@pytest.mark.parametrize(
    "rate,hours",
    [(12_500, 8), (0, 4), (18_750, 0), (20_000, 2.5)],
)
def test_overtime_pay_is_one_and_a_half_times_hourly(rate, hours):
    assert overtime_pay(rate, hours) == rate * hours * 1.5


def test_overtime_pay_example():
    assert overtime_pay(12_500, 8) == 150_000


def test_total_pay_adds_regular_and_overtime():
    assert total_pay(2_500_000, 150_000) == 2_650_000
    assert total_pay(0, 0) == 0


def test_breakdown_for_full_month_with_overtime():
    calc = StandardPayrollCalculator()
    ot = calc.overtime_pay(12_500, 8)

    b = calc.breakdown(150_000, 25, ot)

    assert b.regular_pay == 3_750_000
    assert b.overtime == 150_000
    assert b.total_pay == 3_900_000


def test_regular_pay_with_zero_days():
    assert regular_pay(150_000, 0) == 0
