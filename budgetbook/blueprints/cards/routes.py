from flask import Blueprint, jsonify
from flask_login import login_required

from ...services.cards import create_card, delete_card, list_active_cards, list_cards, update_card
from ..helpers import as_bool, json_body, require

cards_bp = Blueprint("cards", __name__, url_prefix="/cards")


@cards_bp.route("/", methods=["GET"])
@login_required
def list_active():
    return jsonify([c.to_dict() for c in list_active_cards()])


@cards_bp.route("/all")
@login_required
def list_all():
    return jsonify([c.to_dict() for c in list_cards()])


@cards_bp.route("/", methods=["POST"])
@login_required
def add_card():
    card = create_card(json_body().get("name"))
    return jsonify({"id": card.id}), 201


@cards_bp.route("/<int:card_id>", methods=["PUT"])
@login_required
def edit_card(card_id):
    data = json_body()
    update_card(card_id, require(data, "name"), is_active=as_bool(data.get("is_active", True)))
    return "", 200


@cards_bp.route("/<int:card_id>", methods=["DELETE"])
@login_required
def remove_card(card_id):
    delete_card(card_id)
    return "", 204
