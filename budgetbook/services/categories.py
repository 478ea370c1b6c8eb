import random

from flask import current_app

from ..errors import Conflict, InvalidInput, NotFound, storage_errors
from ..extensions import db
from ..models import Category, Transaction

PASTEL_COLORS = [
    "#FFB3BA", "#FFDFBA", "#FFFFBA", "#BAFFC9", "#BAE1FF",
    "#E2F0CB", "#FDFD96", "#FFC3A0", "#FFD1DC", "#D4F0F0",
    "#CCE2CB", "#B6CFB6", "#97C1A9", "#FCB7AF", "#FFDAC1",
    "#E7FFAC", "#FFABAB", "#D5AAFF", "#85E3FF", "#B9F6CA",
]


def _clean_name(name):
    name = (name or "").strip()
    if not name:
        raise InvalidInput("Category name cannot be empty")
    return name


def list_categories():
    with storage_errors():
        return Category.query.order_by(Category.name).all()


def get_category(category_id):
    with storage_errors():
        cat = db.session.get(Category, category_id)
    if cat is None:
        raise NotFound("Category not found")
    return cat


def create_category(name, is_income=False):
    name = _clean_name(name)
    cat = Category(name=name, color=random.choice(PASTEL_COLORS), is_income=bool(is_income), is_active=True)
    with storage_errors(conflict="Category already exists"):
        db.session.add(cat)
        db.session.commit()
    current_app.logger.info("Created category %s (%s)", cat.id, name)
    return cat


def update_category(category_id, name, color=None, is_income=False, is_active=True):
    name = _clean_name(name)
    cat = get_category(category_id)
    with storage_errors(conflict="Category already exists"):
        cat.name = name
        if color:
            cat.color = color
        cat.is_income = bool(is_income)
        cat.is_active = bool(is_active)
        db.session.commit()
    current_app.logger.info("Updated category %s", category_id)
    return cat


def delete_category(category_id):
    cat = get_category(category_id)
    with storage_errors():
        used = Transaction.query.filter_by(category_id=cat.id).first()
    # Prevent deletion if referenced by any transactions
    if used:
        raise Conflict("Cannot delete category in use by transactions")
    with storage_errors():
        db.session.delete(cat)
        db.session.commit()
    current_app.logger.info("Deleted category %s", category_id)
