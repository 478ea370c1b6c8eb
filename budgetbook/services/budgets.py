"""Monthly limits: upsert, forward copy and the per-category budget view."""
from dataclasses import dataclass
from typing import Optional

from flask import current_app
from sqlalchemy import insert, literal, select
from sqlalchemy.orm import aliased

from ..errors import InvalidInput, storage_errors
from ..extensions import db
from ..models import Category, MonthlyBudget
from ..money import parse_amount, to_cents
from ..periods import is_month_key, previous_month
from .categories import get_category


@dataclass
class CategoryBudgetView:
    category: Category
    budget: Optional[MonthlyBudget] = None
    spent: int = 0
    remaining: int = 0

    @property
    def limit(self) -> int:
        return self.budget.limit_amount if self.budget is not None else 0

    def to_dict(self):
        return {
            "category": self.category.to_dict(),
            "budget": self.budget.to_dict() if self.budget is not None else None,
            "spent": self.spent,
            "remaining": self.remaining,
        }


def set_monthly_limit(category_id, month, limit):
    """Insert or replace the limit for (category, month). Returns the row."""
    if parse_amount(limit) < 0:
        raise InvalidInput("Limit cannot be negative")
    if not is_month_key(month):
        raise InvalidInput("Invalid month format. Expected YYYY-MM")
    limit_amount = to_cents(limit)
    get_category(category_id)

    with storage_errors(conflict="Monthly budget already exists"):
        row = MonthlyBudget.query.filter_by(category_id=category_id, month=month).first()
        if row:
            row.limit_amount = limit_amount
        else:
            row = MonthlyBudget(category_id=category_id, month=month, limit_amount=limit_amount)
            db.session.add(row)
        db.session.commit()
    current_app.logger.info("Set limit for category %s in %s to %s", category_id, month, limit_amount)
    return row


def copy_budgets(source_month, target_month):
    """Copy every source_month limit into target_month unless it already has one.

    The emptiness check rides inside the INSERT ... SELECT itself, so the
    check and the copy commit or fail together. Returns the rows inserted.
    """
    existing = aliased(MonthlyBudget)
    target_has_rows = select(existing.id).where(existing.month == target_month).exists()
    rows = select(
        MonthlyBudget.category_id,
        literal(target_month),
        MonthlyBudget.limit_amount,
    ).where(MonthlyBudget.month == source_month, ~target_has_rows)
    stmt = insert(MonthlyBudget.__table__).from_select(["category_id", "month", "limit_amount"], rows)

    with storage_errors(conflict="Budgets already copied"):
        result = db.session.execute(stmt)
        db.session.commit()
    copied = result.rowcount or 0
    if copied:
        current_app.logger.info("Copied %s budgets from %s to %s", copied, source_month, target_month)
    return copied


def ensure_budgets_exist(month):
    return copy_budgets(previous_month(month), month)


def get_budget_view(month):
    """One view per category that is active or has a limit for ``month``.

    ``spent`` and ``remaining`` stay at zero here; the month view fills them
    in from the month's transactions.
    """
    current_app.logger.info("Building budget view for %s", month)
    with storage_errors():
        categories = Category.query.order_by(Category.name).all()
        budgets = MonthlyBudget.query.filter_by(month=month).all()

    by_category = {b.category_id: b for b in budgets}
    views = []
    for cat in categories:
        budget = by_category.get(cat.id)
        if cat.is_active or budget is not None:
            views.append(CategoryBudgetView(category=cat, budget=budget))
    return views
