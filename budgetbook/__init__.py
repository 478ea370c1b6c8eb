from flask import Flask, jsonify
from werkzeug.security import generate_password_hash

from .config import Config
from .errors import BudgetBookError, Infrastructure
from .extensions import db, migrate, login_manager
from .periods import current_month
from .services.virtual import load_split_rules

from .blueprints.auth.routes import auth_bp
from .blueprints.budget.routes import budget_bp
from .blueprints.categories.routes import categories_bp
from .blueprints.cards.routes import cards_bp

DEFAULT_CARDS = ["Debit", "Credit"]
DEFAULT_CATEGORIES = [
    # name, color, is_income, starter limit in cents
    ("Salary", "#BAFFC9", True, 344000),
    ("Rent", "#BAE1FF", False, 130000),
    ("Groceries", "#FFB3BA", False, 40000),
    ("Fast Food", "#FFDFBA", False, 5000),
    ("Car Insurance", "#FFDAC1", False, 80000),
    ("Phone", "#FFFFBA", False, 3000),
    ("Health", "#D4F0F0", False, 0),
    ("Subscriptions", "#D5AAFF", False, 700),
    ("Other", "#f8f9fa", False, 20000),
]


def seed_defaults(app):
    """Give an empty database starter cards, categories and limits."""
    from .models import Card, Category, MonthlyBudget

    try:
        if Category.query.first() is None:
            # Starter limits belong to the month the database is created in
            month = current_month()
            for name, color, is_income, limit in DEFAULT_CATEGORIES:
                cat = Category(name=name, color=color, is_income=is_income)
                db.session.add(cat)
                db.session.flush()
                db.session.add(MonthlyBudget(category_id=cat.id, month=month, limit_amount=limit))
        if Card.query.first() is None:
            for name in DEFAULT_CARDS:
                db.session.add(Card(name=name))
        db.session.commit()
    except Exception:
        # Do not block app startup if seeding fails
        db.session.rollback()
        app.logger.exception("Seeding default data failed")


def register_error_handlers(app):
    @app.errorhandler(BudgetBookError)
    def handle_budgetbook_error(err):
        if isinstance(err, Infrastructure):
            app.logger.error("Infrastructure error: %s", err.message)
        else:
            app.logger.info("%s: %s", type(err).__name__, err.message)
        return jsonify({"error": err.public_message}), err.status_code


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])
    app.config["SPLIT_RULES"] = load_split_rules(app.config.get("VIRTUAL_SPLIT_RULES"))

    # No password configured: the login gate is switched off
    password = app.config.get("APP_PASSWORD")
    app.config["APP_PASSWORD_HASH"] = generate_password_hash(password) if password else None
    app.config["LOGIN_DISABLED"] = not password
    if not password:
        app.logger.warning("APP_PASSWORD is not set; authentication is disabled")

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    # Ensure tables exist for a smooth first run
    with app.app_context():
        from . import models  # noqa: F401  (register tables)

        db.create_all()
        if app.config.get("SEED_DEFAULTS"):
            seed_defaults(app)

    register_error_handlers(app)

    # Register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(budget_bp)
    app.register_blueprint(categories_bp)
    app.register_blueprint(cards_bp)

    return app
