from .owner import Owner
from .category import Category
from .card import Card
from .transaction import Transaction
from .monthly_budget import MonthlyBudget

__all__ = ["Owner", "Category", "Card", "Transaction", "MonthlyBudget"]
