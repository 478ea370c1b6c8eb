from budgetbook.errors import Infrastructure
from budgetbook.models import MonthlyBudget
from budgetbook.services import month_view
from budgetbook.services.month_view import build_month_view
from budgetbook.services.transactions import create_transaction

from .conftest import add_card, add_category


def _rows(view):
    return {row.category_name: row for row in view.budget_rows}


def test_spent_and_remaining_for_an_expense_category(ctx):
    cat_id = add_category("C", limits={"2026-01": 100})
    create_transaction(cat_id, None, "2026-01-05", "25.00")

    row = _rows(build_month_view("2026-01"))["C"]

    assert row.spent == 2500
    assert row.remaining == 7500
    assert row.percent_spent == 25
    assert row.percent_remaining == 75
    assert not row.is_over_budget
    assert (row.spent_dollars, row.remaining_dollars, row.percent_spent_display) == ("25.00", "75.00", "25")


def test_income_category_counts_positive_amounts(ctx):
    cat_id = add_category("Salary", is_income=True, limits={"2026-01": 3000})
    create_transaction(cat_id, None, "2026-01-01", "2000")

    row = _rows(build_month_view("2026-01"))["Salary"]

    assert row.spent == 200000
    assert row.remaining == -100000
    assert row.is_over_budget
    assert row.is_income


def test_overspent_expense_is_over_budget(ctx):
    cat_id = add_category("Fun", limits={"2026-01": 10})
    create_transaction(cat_id, None, "2026-01-02", "15")

    row = _rows(build_month_view("2026-01"))["Fun"]

    assert row.remaining == -500
    assert row.percent_spent == 150
    assert row.is_over_budget


def test_zero_limit_gives_zero_percentages(ctx):
    cat_id = add_category("Health")
    create_transaction(cat_id, None, "2026-01-02", "40")

    row = _rows(build_month_view("2026-01"))["Health"]

    assert row.limit == 0
    assert row.spent == 4000
    assert row.percent_spent == 0
    assert row.percent_remaining == 0


def test_overview_totals(ctx):
    food = add_category("Food")
    pay = add_category("Pay", is_income=True)
    create_transaction(pay, None, "2026-01-01", "5.00")
    create_transaction(food, None, "2026-01-02", "2.00")

    overview = build_month_view("2026-01").overview

    assert (overview.total_income, overview.total_expenses, overview.net) == (500, 200, 300)
    assert overview.net_dollars == "3.00"
    assert overview.net_is_positive


def test_auto_copy_fills_an_empty_month(ctx):
    rent = add_category("Rent", limits={"2026-02": 1300})
    food = add_category("Food", limits={"2026-02": 400})

    view = build_month_view("2026-03")

    assert {r.category_id: r.limit for r in view.budget_rows} == {rent: 130000, food: 40000}
    feb = MonthlyBudget.query.filter_by(month="2026-02").all()
    assert {b.category_id: b.limit_amount for b in feb} == {rent: 130000, food: 40000}


def test_auto_copy_failure_does_not_break_the_view(ctx, monkeypatch):
    add_category("Rent", limits={"2026-02": 1300})

    def broken(month):
        raise Infrastructure("disk on fire")

    monkeypatch.setattr(month_view, "ensure_budgets_exist", broken)
    view = build_month_view("2026-03")

    assert _rows(view)["Rent"].limit == 0


def test_virtual_rows_use_the_enriched_spend(ctx):
    ins = add_category("Car Insurance", limits={"2026-01": 200})
    pay = add_category("Pay", is_income=True)
    create_transaction(ins, None, "2026-01-10", "10.00")
    create_transaction(pay, None, "2026-01-01", "5.00")

    virtual = build_month_view("2026-01").virtual_rows

    assert [(v.name, v.amount) for v in virtual] == [
        ("Total Income", 500),
        ("Auto (Mazda)", 500),
        ("Auto (Elantra)", 500),
    ]


def test_transaction_rows_resolve_names_with_fallbacks(ctx):
    food = add_category("Food")
    archived = add_category("Archived", is_active=False)
    card_id = add_card("Visa")
    create_transaction(food, card_id, "2026-01-05", "12.5", notes="lunch")
    create_transaction(archived, None, "2026-01-04", "1")

    rows = build_month_view("2026-01").transactions

    assert rows[0].category_name == "Food"
    assert rows[0].card_name == "Visa"
    assert rows[0].amount_dollars == "12.50"
    assert rows[0].transaction_date_display == " 5 Jan 2026"
    assert rows[0].notes == "lunch"
    assert not rows[0].is_income
    assert (rows[1].category_name, rows[1].category_color, rows[1].card_name) == ("Unknown", "#ffffff", "Cash")


def test_month_navigation(ctx):
    view = build_month_view("2026-01")
    assert (view.month_display, view.previous_month, view.next_month) == ("January 2026", "2025-12", "2026-02")
