from datetime import date

import pytest

from budgetbook.errors import InvalidInput
from budgetbook.periods import (
    date_display,
    is_month_key,
    month_bounds,
    month_display,
    next_month,
    parse_date,
    parse_month,
    previous_month,
)


def test_is_month_key_only_checks_shape():
    assert is_month_key("2026-01")
    assert is_month_key("2026-13")
    assert not is_month_key("2026-1")
    assert not is_month_key("2026/01")
    assert not is_month_key(None)


def test_parse_month_is_strict():
    assert parse_month("2026-01") == date(2026, 1, 1)
    with pytest.raises(InvalidInput):
        parse_month("2026-13")
    with pytest.raises(InvalidInput):
        parse_month("budget")


def test_neighbouring_months_cross_year_boundaries():
    assert previous_month("2026-01") == "2025-12"
    assert previous_month("2026-03") == "2026-02"
    assert next_month("2025-12") == "2026-01"


def test_month_bounds_are_half_open():
    assert month_bounds("2026-02") == (date(2026, 2, 1), date(2026, 3, 1))
    assert month_bounds("2025-12") == (date(2025, 12, 1), date(2026, 1, 1))


def test_display_formats():
    assert month_display("2026-01") == "January 2026"
    assert date_display(date(2026, 1, 5)) == " 5 Jan 2026"
    assert date_display(date(2026, 1, 15)) == "15 Jan 2026"


def test_parse_date():
    assert parse_date("2026-01-05") == date(2026, 1, 5)
    with pytest.raises(InvalidInput, match="YYYY-MM-DD"):
        parse_date("2026-02-30")
    with pytest.raises(InvalidInput):
        parse_date("")
