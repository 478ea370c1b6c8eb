from flask import current_app

from ..errors import InvalidInput, NotFound, storage_errors
from ..extensions import db
from ..models import Card, Transaction


def _clean_name(name):
    name = (name or "").strip()
    if not name:
        raise InvalidInput("Card name cannot be empty")
    return name


def list_cards():
    with storage_errors():
        return Card.query.order_by(Card.name).all()


def list_active_cards():
    with storage_errors():
        return Card.query.filter_by(is_active=True).order_by(Card.name).all()


def get_card(card_id):
    with storage_errors():
        card = db.session.get(Card, card_id)
    if card is None:
        raise NotFound("Card not found")
    return card


def create_card(name):
    card = Card(name=_clean_name(name), is_active=True)
    with storage_errors(conflict="Card name already exists"):
        db.session.add(card)
        db.session.commit()
    current_app.logger.info("Created card %s (%s)", card.id, card.name)
    return card


def update_card(card_id, name, is_active=True):
    name = _clean_name(name)
    card = get_card(card_id)
    with storage_errors(conflict="Card name already exists"):
        card.name = name
        card.is_active = bool(is_active)
        db.session.commit()
    current_app.logger.info("Updated card %s", card_id)
    return card


def delete_card(card_id):
    card = get_card(card_id)
    with storage_errors():
        # Transactions paid with this card fall back to cash
        Transaction.query.filter_by(card_id=card.id).update({"card_id": None})
        db.session.delete(card)
        db.session.commit()
    current_app.logger.info("Deleted card %s", card_id)
