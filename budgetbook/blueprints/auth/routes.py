from flask import Blueprint, current_app, redirect, render_template, request, url_for
from flask_login import login_required, login_user, logout_user
from werkzeug.security import check_password_hash

from ...models import Owner
from ...periods import current_month

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/")
@login_required
def root():
    return redirect(url_for("budget.month_view", month=current_month()))


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    password_hash = current_app.config.get("APP_PASSWORD_HASH")
    if not password_hash:
        return redirect(url_for("auth.root"))
    if request.method == "POST":
        password = request.form.get("password") or ""
        if check_password_hash(password_hash, password):
            login_user(Owner())
            return redirect(url_for("auth.root"))
        current_app.logger.warning("Failed login attempt from %s", request.remote_addr)
        return render_template("auth/login.html", error="Invalid password"), 401
    return render_template("auth/login.html", error=None)


@auth_bp.route("/logout")
@login_required
def logout():
    logout_user()
    return redirect(url_for("auth.login"))
