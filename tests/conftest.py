import pytest

from budgetbook import create_app
from budgetbook.extensions import db
from budgetbook.services.budgets import set_monthly_limit
from budgetbook.services.cards import create_card, update_card
from budgetbook.services.categories import create_category, update_category

TEST_CONFIG = {
    "TESTING": True,
    "SECRET_KEY": "test-secret",
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "SEED_DEFAULTS": False,
    "APP_PASSWORD": None,
}


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def locked_app():
    app = create_app({**TEST_CONFIG, "APP_PASSWORD": "hunter2"})
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def add_category(name, is_income=False, is_active=True, limits=None):
    """Create a category (plus monthly limits in dollars) and return its id."""
    cat = create_category(name, is_income=is_income)
    if not is_active:
        update_category(cat.id, name, is_income=is_income, is_active=False)
    for month, limit in (limits or {}).items():
        set_monthly_limit(cat.id, month, limit)
    return cat.id


def add_card(name, is_active=True):
    card_id = create_card(name).id
    if not is_active:
        update_card(card_id, name, is_active=False)
    return card_id
