# blog/auth/tokens.py
import jwt
from flask import current_app

ALGORITHM = "HS256"


def issue_token(user):
    """Token firmado con {username, id}. Sin "exp": no caduca."""
    payload = {"username": user.username, "id": user.id}
    return jwt.encode(payload, current_app.config["JWT_SECRET_KEY"], algorithm=ALGORITHM)


def decode_token(token):
    """Devuelve los claims o lanza jwt.InvalidTokenError."""
    payload = jwt.decode(token, current_app.config["JWT_SECRET_KEY"], algorithms=[ALGORITHM])
    if "id" not in payload or "username" not in payload:
        raise jwt.InvalidTokenError("Faltan claims de identidad")
    return payload


def _cookie_options():
    return {
        "httponly": True,
        "secure": current_app.config.get("COOKIE_SECURE", False),
        "samesite": current_app.config.get("COOKIE_SAMESITE", "Lax"),
    }


def set_session_cookie(response, token):
    response.set_cookie(current_app.config["AUTH_COOKIE_NAME"], token, **_cookie_options())
    return response


def clear_session_cookie(response):
    response.set_cookie(current_app.config["AUTH_COOKIE_NAME"], "", expires=0, **_cookie_options())
    return response
