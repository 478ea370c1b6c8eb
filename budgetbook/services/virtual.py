"""Synthetic budget rows derived from the real categories of a month.

Nothing here is persisted or touches the database: the rows are rebuilt on
every request from the budget views and the month's (category_id, amount)
pairs. Split rules are data, read from ``VIRTUAL_SPLIT_RULES``::

    {"Car Insurance": [["Auto (Mazda)", "1/2"], ["Auto (Elantra)", "1/2"]]}

A rule whose category name matches no view emits nothing.
"""
import json
from dataclasses import dataclass
from fractions import Fraction
from math import floor
from typing import List, Tuple

from ..money import format_cents

TOTAL_INCOME = "Total Income"


@dataclass
class VirtualCategory:
    name: str
    amount: int  # cents
    is_income: bool

    @property
    def amount_dollars(self):
        return format_cents(self.amount)

    def to_dict(self):
        return {"name": self.name, "amount": self.amount, "is_income": self.is_income}


@dataclass
class SplitRule:
    category_name: str
    shares: List[Tuple[str, Fraction]]


def load_split_rules(config) -> List[SplitRule]:
    """Build rules from a ``{category name: [[row name, share], ...]}`` mapping
    or its JSON text.

    Raises ``ValueError`` naming the offending entry when the rules are
    malformed, so a bad setting stops the app at startup.
    """
    if isinstance(config, str):
        try:
            config = json.loads(config)
        except json.JSONDecodeError as exc:
            raise ValueError(f"VIRTUAL_SPLIT_RULES is not valid JSON: {exc}") from exc
    config = config or {}
    if not isinstance(config, dict):
        raise ValueError("VIRTUAL_SPLIT_RULES must be a JSON object")

    rules = []
    for category_name, shares in config.items():
        if not isinstance(shares, list):
            raise ValueError(f"Split rule for {category_name!r} must be a list of [name, share] pairs")
        parsed = []
        for pair in shares:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise ValueError(f"Bad split share for {category_name!r}: {pair!r}")
            name, share = pair
            try:
                fraction = Fraction(str(share))
            except (ValueError, ZeroDivisionError) as exc:
                raise ValueError(f"Bad split share for {category_name!r}: {pair!r}") from exc
            if fraction < 0:
                raise ValueError(f"Negative split share for {category_name!r}: {pair!r}")
            parsed.append((str(name), fraction))
        rules.append(SplitRule(category_name=category_name, shares=parsed))
    return rules


def derive_virtual_rows(views, amounts, rules=()):
    """Return the Total Income row followed by the rows of each matching rule.

    ``views`` are budget views with ``spent`` already filled in and
    ``amounts`` is every (category_id, amount) pair of the month.
    """
    total_income = sum(amount for _, amount in amounts if amount > 0)
    rows = [VirtualCategory(name=TOTAL_INCOME, amount=total_income, is_income=True)]

    by_name = {}
    for view in views:
        by_name.setdefault(view.category.name, view)

    for rule in rules:
        view = by_name.get(rule.category_name)
        if view is None:
            continue
        for name, share in rule.shares:
            rows.append(VirtualCategory(name=name, amount=floor(view.spent * share), is_income=False))
    return rows
