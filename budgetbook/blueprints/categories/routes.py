from flask import Blueprint, jsonify, redirect, render_template, request, url_for
from flask_login import login_required

from ...periods import current_month
from ...services.budgets import get_budget_view, set_monthly_limit
from ...services.cards import list_cards
from ...services.categories import (
    PASTEL_COLORS,
    create_category,
    delete_category,
    list_categories,
    update_category,
)
from ..helpers import as_bool, as_int, json_body, require

categories_bp = Blueprint("categories", __name__, url_prefix="/categories")


@categories_bp.route("/", methods=["GET"])
@login_required
def manage_categories():
    return render_template(
        "categories/manage.html",
        categories=list_categories(),
        cards=list_cards(),
        pastel_colors=PASTEL_COLORS,
        month=current_month(),
    )


@categories_bp.route("/", methods=["POST"])
@login_required
def add_category():
    form = request.form
    cat = create_category(require(form, "name"), is_income=form.get("is_income") == "on")
    # New categories start with a limit for the current month
    set_monthly_limit(cat.id, current_month(), form.get("monthly_limit") or 0)
    return redirect(url_for("auth.root"))


@categories_bp.route("/api")
@login_required
def list_categories_api():
    return jsonify([c.to_dict() for c in list_categories()])


@categories_bp.route("/<int:category_id>", methods=["PUT"])
@login_required
def edit_category(category_id):
    data = json_body()
    update_category(
        category_id,
        name=require(data, "name"),
        color=data.get("color"),
        is_income=as_bool(data.get("is_income", False)),
        is_active=as_bool(data.get("is_active", True)),
    )
    return "", 200


@categories_bp.route("/<int:category_id>", methods=["DELETE"])
@login_required
def remove_category(category_id):
    delete_category(category_id)
    return "", 204


@categories_bp.route("/budget")
@login_required
def budget_view():
    month = request.args.get("month") or current_month()
    return jsonify([view.to_dict() for view in get_budget_view(month)])


@categories_bp.route("/limit", methods=["POST"])
@login_required
def set_limit():
    data = json_body()
    set_monthly_limit(
        as_int(require(data, "category_id"), "category_id"),
        require(data, "month"),
        require(data, "limit"),
    )
    return "", 200
