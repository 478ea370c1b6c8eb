"""Dollar/cent conversions.

Money is integer cents everywhere except at the presentation boundary.
Positive amounts are income, negative amounts are expenses.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .errors import InvalidInput

CENT = Decimal("0.01")
MAX_CENTS = 2**63 - 1


def parse_amount(value) -> Decimal:
    """Parse a user-entered dollar amount (str, int, float or Decimal)."""
    if value is None or isinstance(value, bool):
        raise InvalidInput("Amount is required")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidInput(f"Invalid amount: {value!r}")
    if not amount.is_finite():
        raise InvalidInput(f"Invalid amount: {value!r}")
    return amount


def to_cents(value) -> int:
    """Non-negative cents for ``value``, rounding half away from zero."""
    cents = abs(parse_amount(value)) * 100
    # Amount columns are signed 64-bit integers
    if cents >= MAX_CENTS + Decimal("0.5"):
        raise InvalidInput("Amount is too large")
    return int(cents.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def signed_cents(value, is_income: bool) -> int:
    # The sign typed by the user is ignored; the category decides it
    cents = to_cents(value)
    return cents if is_income else -cents


def format_cents(cents: int) -> str:
    return str((Decimal(cents) / 100).quantize(CENT))
