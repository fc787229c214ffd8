# blog/client/__init__.py
"""
Cliente web del blog: renderiza los posts consumiendo el API por HTTP.

    flask --app "blog.client:create_client_app()" run --port 3000
"""
import logging

from flask import Flask

from blog.config import Config


def create_client_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    from .views import web_bp
    app.register_blueprint(web_bp)

    return app
