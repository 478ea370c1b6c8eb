"""Screen model for one budget month.

Ties the budget views, the month's transactions and the cards together into
the overview totals, the per-category rows, the virtual rows and the
transaction table. Amounts stay in cents on every model; the ``*_dollars``
properties are what templates print.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from flask import current_app

from ..errors import BudgetBookError
from ..money import format_cents
from ..periods import date_display, month_display, next_month, parse_month, previous_month
from .budgets import ensure_budgets_exist, get_budget_view
from .cards import list_cards
from .transactions import get_month_transactions
from .virtual import derive_virtual_rows

UNKNOWN_CATEGORY = "Unknown"
UNKNOWN_COLOR = "#ffffff"
CASH = "Cash"


@dataclass
class Overview:
    total_income: int
    total_expenses: int
    net: int

    @property
    def total_income_dollars(self):
        return format_cents(self.total_income)

    @property
    def total_expenses_dollars(self):
        return format_cents(self.total_expenses)

    @property
    def net_dollars(self):
        return format_cents(self.net)

    @property
    def net_is_positive(self):
        return self.net >= 0


@dataclass
class BudgetRow:
    category_id: int
    category_name: str
    category_color: str
    limit: int
    spent: int
    remaining: int
    percent_spent: float
    percent_remaining: float
    is_over_budget: bool
    is_income: bool
    is_active: bool

    @property
    def limit_dollars(self):
        return format_cents(self.limit)

    @property
    def spent_dollars(self):
        return format_cents(self.spent)

    @property
    def remaining_dollars(self):
        return format_cents(self.remaining)

    @property
    def percent_spent_display(self):
        return f"{self.percent_spent:.0f}"

    @property
    def percent_remaining_display(self):
        return f"{self.percent_remaining:.0f}"

    def chart_data(self):
        return {
            "id": self.category_id,
            "name": self.category_name,
            "color": self.category_color,
            "limit": self.limit / 100,
            "spent": self.spent / 100,
            "is_income": self.is_income,
            "is_active": self.is_active,
        }


@dataclass
class TransactionRow:
    id: int
    category_id: int
    card_id: Optional[int]
    category_name: str
    category_color: str
    card_name: str
    transaction_date: str
    transaction_date_display: str
    amount_dollars: str
    is_income: bool
    notes: str = ""


@dataclass
class MonthView:
    month: str
    month_display: str
    previous_month: str
    next_month: str
    overview: Overview
    budget_rows: List[BudgetRow] = field(default_factory=list)
    virtual_rows: list = field(default_factory=list)
    transactions: List[TransactionRow] = field(default_factory=list)
    categories: list = field(default_factory=list)
    cards: list = field(default_factory=list)


def category_spent(category, transactions):
    """Income categories count positive amounts, expense categories negative ones."""
    if category.is_income:
        return sum(t.amount for t in transactions if t.category_id == category.id and t.amount > 0)
    return sum(-t.amount for t in transactions if t.category_id == category.id and t.amount < 0)


def enrich_view(view, transactions):
    """Fill ``spent``/``remaining`` on a budget view and return its display row.

    ``remaining`` is the distance from the limit in the good direction:
    earning more than planned or spending less than planned is positive.
    """
    cat = view.category
    limit = view.limit
    view.spent = category_spent(cat, transactions)
    view.remaining = view.spent - limit if cat.is_income else limit - view.spent

    if limit == 0:
        percent_spent = percent_remaining = 0.0
    else:
        percent_spent = view.spent / limit * 100
        percent_remaining = view.remaining / limit * 100

    return BudgetRow(
        category_id=cat.id,
        category_name=cat.name,
        category_color=cat.color,
        limit=limit,
        spent=view.spent,
        remaining=view.remaining,
        percent_spent=percent_spent,
        percent_remaining=percent_remaining,
        is_over_budget=view.remaining < 0,
        is_income=cat.is_income,
        is_active=cat.is_active,
    )


def transaction_row(txn, categories_by_id, cards_by_id):
    cat = categories_by_id.get(txn.category_id)
    card = cards_by_id.get(txn.card_id) if txn.card_id is not None else None
    return TransactionRow(
        id=txn.id,
        category_id=txn.category_id,
        card_id=txn.card_id,
        category_name=cat.name if cat else UNKNOWN_CATEGORY,
        category_color=cat.color if cat else UNKNOWN_COLOR,
        card_name=card.name if card else CASH,
        transaction_date=txn.transaction_date.isoformat(),
        transaction_date_display=date_display(txn.transaction_date),
        amount_dollars=format_cents(abs(txn.amount)),
        is_income=txn.amount > 0,
        notes=txn.notes or "",
    )


def build_month_view(month, rules=None):
    parse_month(month)
    current_app.logger.info("Fetching month view for %s", month)

    # A failed forward copy must not keep the month from rendering
    try:
        ensure_budgets_exist(month)
    except BudgetBookError as exc:
        current_app.logger.warning("Auto-copy budgets failed: %s. Continuing anyway.", exc)

    transactions, summary = get_month_transactions(month)
    views = get_budget_view(month)
    cards = list_cards()

    budget_rows = [enrich_view(view, transactions) for view in views]

    if rules is None:
        rules = current_app.config.get("SPLIT_RULES", [])
    virtual_rows = derive_virtual_rows(views, [(t.category_id, t.amount) for t in transactions], rules)

    categories_by_id = {view.category.id: view.category for view in views}
    cards_by_id = {card.id: card for card in cards}
    rows = [transaction_row(t, categories_by_id, cards_by_id) for t in transactions]

    return MonthView(
        month=month,
        month_display=month_display(month),
        previous_month=previous_month(month),
        next_month=next_month(month),
        overview=Overview(
            total_income=summary.total_income,
            total_expenses=summary.total_expenses,
            net=summary.net,
        ),
        budget_rows=budget_rows,
        virtual_rows=virtual_rows,
        transactions=rows,
        categories=[view.category for view in views],
        cards=cards,
    )
