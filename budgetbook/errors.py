"""Error taxonomy shared by the services and the HTTP layer.

Storage failures are translated once, in the services, through
``storage_errors``; the app-level handler registered in ``create_app`` turns a
``BudgetBookError`` into a JSON body and a status code.
"""
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .extensions import db


class BudgetBookError(Exception):
    status_code = 500

    def __init__(self, message=""):
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        return self.message


class InvalidInput(BudgetBookError):
    status_code = 400


class NotFound(BudgetBookError):
    status_code = 404


class Conflict(BudgetBookError):
    status_code = 409


class Infrastructure(BudgetBookError):
    status_code = 500

    @property
    def public_message(self) -> str:
        # Driver detail is logged, never sent back
        return "Internal server error"


@contextmanager
def storage_errors(conflict="Resource already exists"):
    """Roll back and re-raise SQLAlchemy errors as domain errors."""
    try:
        yield
    except IntegrityError as exc:
        db.session.rollback()
        raise Conflict(f"{conflict}: {exc.orig}") from exc
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise Infrastructure(f"Database error: {exc}") from exc
