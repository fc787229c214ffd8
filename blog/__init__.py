# blog/__init__.py
import logging

import click
from flask import Flask

from blog.config import Config
from blog.extensions import db, migrate, cors
from blog.auth.decorators import load_user
from blog.errors import register_error_handlers
from blog.routes import register_routes
from blog.utils.cover_storage import get_cover_storage


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
        allow_headers=["Content-Type"],
    )
    app.extensions["cover_storage"] = get_cover_storage(app)

    # Registrar blueprints centralizado
    register_routes(app)
    register_error_handlers(app)

    @app.before_request
    def before_request():
        load_user()

    @app.cli.command("init-db")
    def init_db():
        """Crea las tablas que falten."""
        from blog import models  # noqa: F401

        db.create_all()
        click.echo("✅ Tablas creadas")

    return app
