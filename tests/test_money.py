from decimal import Decimal

import pytest

from budgetbook.errors import InvalidInput
from budgetbook.money import format_cents, parse_amount, signed_cents, to_cents


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12.34", 1234),
        ("12.345", 1235),
        (" 7 ", 700),
        (45.50, 4550),
        (100, 10000),
        (Decimal("0.005"), 1),
        ("-5", 500),
        ("0", 0),
    ],
)
def test_to_cents(value, expected):
    assert to_cents(value) == expected


@pytest.mark.parametrize("value", ["abc", "", None, "nan", "inf", True])
def test_to_cents_rejects_garbage(value):
    with pytest.raises(InvalidInput):
        to_cents(value)


def test_parse_amount_keeps_sign():
    assert parse_amount("-3.50") == Decimal("-3.50")


def test_expense_is_negative_and_income_positive():
    assert signed_cents(45.50, is_income=False) == -4550
    assert signed_cents(100.00, is_income=True) == 10000


@pytest.mark.parametrize("amount", ["0.01", "19.99", "-42", 1500])
@pytest.mark.parametrize("is_income", [True, False])
def test_sign_follows_income_flag(amount, is_income):
    cents = signed_cents(amount, is_income)
    assert (cents > 0) == is_income


def test_format_cents():
    assert format_cents(123456) == "1234.56"
    assert format_cents(-1234) == "-12.34"
    assert format_cents(5) == "0.05"
    assert format_cents(0) == "0.00"


def test_to_cents_accepts_the_largest_storable_amount():
    assert to_cents("92233720368547758.07") == 2**63 - 1


@pytest.mark.parametrize("value", ["1e20", 1e20, "92233720368547758.08", "-1e30"])
def test_to_cents_rejects_amounts_that_do_not_fit(value):
    with pytest.raises(InvalidInput, match="too large"):
        to_cents(value)
