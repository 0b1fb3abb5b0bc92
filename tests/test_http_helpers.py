import pytest

from src.abimanyu_core.abimanyu_core.common.http import number_field
from src.abimanyu_core.abimanyu_core.core.exceptions import ValidationError


@pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf"), "nan", "inf"])
def test_number_field_rejects_non_finite(raw):
    with pytest.raises(ValidationError):
        number_field({"amount": raw}, "amount", "Jumlah", integer=True)
    with pytest.raises(ValidationError):
        number_field({"amount": raw}, "amount", "Jumlah")


def test_number_field_keeps_whole_and_fractional_values():
    assert number_field({"hours": "2"}, "hours", "Jam") == 2
    assert number_field({"hours": 2.5}, "hours", "Jam") == 2.5
    assert number_field({}, "stock", "Stok", default=0) == 0
    with pytest.raises(ValidationError):
        number_field({"amount": 10.5}, "amount", "Jumlah", integer=True)
