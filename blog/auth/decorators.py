# blog/auth/decorators.py
from functools import wraps
from flask import request, jsonify, g, current_app
import jwt

from blog.auth.tokens import decode_token


def load_user():
    """Lee la cookie de sesión y deja los claims en g.current_user (o None)."""
    g.current_user = None
    g.auth_error = None

    token = request.cookies.get(current_app.config["AUTH_COOKIE_NAME"])
    if not token:
        return

    try:
        payload = decode_token(token)
        g.current_user = {
            "id": payload.get("id"),
            "username": payload.get("username"),
        }
    except jwt.InvalidTokenError as e:
        g.auth_error = "Token inválido"
        current_app.logger.warning("❌ Token inválido: %s", e)


def login_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        if not getattr(g, "current_user", None):
            error = getattr(g, "auth_error", None) or "Token requerido"
            return jsonify({"error": error}), 401
        return f(*args, **kwargs)
    return decorated
