# blog/routes/auth.py
from flask import Blueprint, request, jsonify, g, current_app
from sqlalchemy.exc import IntegrityError

from blog.extensions import db
from blog.models import User
from blog.auth.decorators import login_required
from blog.auth.tokens import issue_token, set_session_cookie, clear_session_cookie

auth_bp = Blueprint("auth", __name__)

WRONG_CREDENTIALS = "wrong credentials"


def _credentials():
    data = request.get_json(silent=True) or request.form
    username = (data.get("username") or "").strip()
    password = data.get("password") or ""
    return username, password


@auth_bp.route("/register", methods=["POST"])
def register():
    username, password = _credentials()
    if not username or not password:
        return jsonify({"error": "Username and password required"}), 400

    user = User(username=username)
    user.set_password(password)

    # 🔒 La unicidad la garantiza la restricción UNIQUE de la tabla
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        current_app.logger.info("⚠️ Registro rechazado, username duplicado: %s", username)
        return jsonify({"error": "Username already taken"}), 400

    current_app.logger.info("✅ Usuario registrado: %s", username)
    return jsonify(user.to_dict()), 200


@auth_bp.route("/login", methods=["POST"])
def login():
    username, password = _credentials()

    # Mismo error para usuario desconocido y password incorrecto
    user = User.query.filter_by(username=username).first() if username else None
    if not user or not user.check_password(password):
        return jsonify({"error": WRONG_CREDENTIALS}), 400

    token = issue_token(user)
    response = jsonify({"id": user.id, "username": user.username})
    set_session_cookie(response, token)

    current_app.logger.info("✅ Login exitoso: %s", user.username)
    return response


@auth_bp.route("/profile", methods=["GET"])
@login_required
def profile():
    return jsonify(g.current_user), 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify("ok")
    return clear_session_cookie(response)
