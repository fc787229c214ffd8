# blog/errors.py
from flask import jsonify
from werkzeug.exceptions import HTTPException


def register_error_handlers(app):
    """Todos los errores salen como JSON {"error": ...} con su status."""

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception("❌ Error inesperado: %s", e)
        return jsonify({"error": "Internal server error"}), 500
