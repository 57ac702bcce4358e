import pytest
from datetime import date
from decimal import Decimal

from analytics.formatting import format_brl, format_date, format_pct


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("1234.56"), "R$ 1.234,56"),
        (Decimal("-5"), "-R$ 5,00"),
        (Decimal("0"), "R$ 0,00"),
        (Decimal("1234567.891"), "R$ 1.234.567,89"),
        (0.5, "R$ 0,50"),
    ],
)
def test_format_brl(value, expected):
    assert format_brl(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("12.5"), "12,5%"),
        (Decimal("-12.46"), "-12,5%"),
        (Decimal("50"), "50,0%"),
    ],
)
def test_format_pct(value, expected):
    assert format_pct(value) == expected


def test_format_date():
    assert format_date(date(2024, 1, 5)) == "05/01/2024"
