from dataclasses import dataclass

from flask import current_app

from ..errors import InvalidInput, NotFound, storage_errors
from ..extensions import db
from ..models import Card, Category, Transaction
from ..money import signed_cents
from ..periods import month_bounds, parse_date


@dataclass
class MonthlySummary:
    month: str
    total_income: int
    total_expenses: int

    @property
    def net(self) -> int:
        return self.total_income - self.total_expenses


def summarize(month, amounts):
    income = sum(a for a in amounts if a > 0)
    expenses = sum(-a for a in amounts if a < 0)
    return MonthlySummary(month=month, total_income=income, total_expenses=expenses)


def _normalize(category_id, card_id, transaction_date, amount_dollars, notes):
    # The category decides the sign, so it has to be looked up first
    with storage_errors():
        category = db.session.get(Category, category_id) if category_id is not None else None
    if category is None:
        current_app.logger.warning("Transaction refers to unknown category %r", category_id)
        raise InvalidInput("Invalid category ID")
    if card_id is not None:
        with storage_errors():
            card = db.session.get(Card, card_id)
        if card is None:
            raise InvalidInput("Invalid card ID")
    return {
        "category_id": category.id,
        "card_id": card_id,
        "transaction_date": parse_date(transaction_date),
        "amount": signed_cents(amount_dollars, category.is_income),
        "notes": notes or None,
    }


def get_transaction(transaction_id):
    with storage_errors():
        txn = db.session.get(Transaction, transaction_id)
    if txn is None:
        raise NotFound("Transaction not found")
    return txn


def create_transaction(category_id, card_id, transaction_date, amount_dollars, notes=None):
    fields = _normalize(category_id, card_id, transaction_date, amount_dollars, notes)
    txn = Transaction(**fields)
    with storage_errors():
        db.session.add(txn)
        db.session.commit()
    current_app.logger.info("Created transaction %s (%s cents)", txn.id, txn.amount)
    return txn


def update_transaction(transaction_id, category_id, card_id, transaction_date, amount_dollars, notes=None):
    fields = _normalize(category_id, card_id, transaction_date, amount_dollars, notes)
    txn = get_transaction(transaction_id)
    with storage_errors():
        for key, value in fields.items():
            setattr(txn, key, value)
        db.session.commit()
    current_app.logger.info("Updated transaction %s", transaction_id)
    return txn


def delete_transaction(transaction_id):
    txn = get_transaction(transaction_id)
    with storage_errors():
        db.session.delete(txn)
        db.session.commit()
    current_app.logger.info("Deleted transaction %s", transaction_id)


def get_month_transactions(month):
    """Transactions dated within ``month`` (newest first) and their totals."""
    start, end = month_bounds(month)
    with storage_errors():
        rows = (
            Transaction.query.filter(Transaction.transaction_date >= start, Transaction.transaction_date < end)
            .order_by(Transaction.transaction_date.desc(), Transaction.id.desc())
            .all()
        )
    return rows, summarize(month, [t.amount for t in rows])
