from flask import Blueprint, redirect, render_template, request, url_for
from flask_login import login_required

from ...periods import current_month
from ...services.cards import list_cards
from ...services.categories import list_categories
from ...services.month_view import build_month_view, transaction_row
from ...services.transactions import create_transaction, delete_transaction, update_transaction
from ..helpers import as_int, json_body, optional_int, require

budget_bp = Blueprint("budget", __name__, url_prefix="/budget")


@budget_bp.route("/<month>")
@login_required
def month_view(month):
    view = build_month_view(month)
    return render_template(
        "budget/month.html",
        view=view,
        chart_rows=[row.chart_data() for row in view.budget_rows],
        categories=[c.to_dict() for c in view.categories],
        cards=[c.to_dict() for c in view.cards],
    )


@budget_bp.route("/add", methods=["POST"])
@login_required
def add_transaction():
    form = request.form
    date_str = (form.get("transaction_date") or "").strip()
    create_transaction(
        category_id=as_int(require(form, "category_id"), "category_id"),
        card_id=optional_int(form.get("card_id"), "card_id"),
        transaction_date=date_str,
        amount_dollars=require(form, "amount_dollars"),
        notes=form.get("notes"),
    )
    # Land on the month the transaction belongs to
    month = date_str[:7] if len(date_str) >= 7 else current_month()
    return redirect(url_for("budget.month_view", month=month))


@budget_bp.route("/transaction/<int:transaction_id>", methods=["PUT"])
@login_required
def edit_transaction(transaction_id):
    data = json_body()
    txn = update_transaction(
        transaction_id,
        category_id=as_int(require(data, "category_id"), "category_id"),
        card_id=optional_int(data.get("card_id"), "card_id"),
        transaction_date=require(data, "transaction_date"),
        amount_dollars=require(data, "amount_dollars"),
        notes=data.get("notes"),
    )
    categories_by_id = {c.id: c for c in list_categories()}
    cards_by_id = {c.id: c for c in list_cards()}
    row = transaction_row(txn, categories_by_id, cards_by_id)
    return render_template("budget/_transaction_row.html", t=row)


@budget_bp.route("/transaction/<int:transaction_id>", methods=["DELETE"])
@login_required
def remove_transaction(transaction_id):
    delete_transaction(transaction_id)
    return "", 204
