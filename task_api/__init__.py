"""
Flask application factory for the task manager API.

Creates and configures the Flask application using the factory pattern so
that the WSGI server and the test-suite each get an identical application
for a given configuration name.

The factory wires, in order:
  * configuration (``config.get_config``)
  * the shared SQLAlchemy extension
  * CORS for the configured origins
  * the token signer, held in ``app.extensions["token_signer"]``
  * the auth and task blueprints
  * JSON error handlers
  * the database schema
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from config import DEV_JWT_SECRET_KEY, get_config

db = SQLAlchemy()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _ensure_sqlite_db_parent_exists(database_uri: str) -> None:
    """Create parent directories for file-based SQLite URIs when missing."""
    sqlite_prefix = "sqlite:///"
    if not database_uri.startswith(sqlite_prefix):
        return

    sqlite_path = database_uri[len(sqlite_prefix) :].split("?", 1)[0]
    if sqlite_path == ":memory:":
        return

    Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name (``"development"``,
            ``"testing"``, ``"production"``).  If None, the ``FLASK_ENV``
            environment variable is used.

    Returns:
        Configured Flask application instance with tables created.

    Raises:
        RuntimeError: If the production profile is started with the
            development JWT secret.
    """
    app = Flask(__name__, instance_relative_config=True)
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    if not app.config["DEBUG"] and app.config["JWT_SECRET_KEY"] == DEV_JWT_SECRET_KEY:
        raise RuntimeError("JWT_SECRET_KEY must be set outside development.")

    logger.info("Creating app with config: %s", config_class.__name__)

    _ensure_sqlite_db_parent_exists(app.config.get("SQLALCHEMY_DATABASE_URI", ""))

    db.init_app(app)
    CORS(app, origins=app.config["CORS_ALLOW_ORIGINS"])

    from .tokens import TokenSigner

    app.extensions["token_signer"] = TokenSigner(
        secret_key=app.config["JWT_SECRET_KEY"],
        expiry_seconds=app.config["JWT_EXPIRY_SECONDS"],
        leeway_seconds=app.config["JWT_CLOCK_SKEW_SECONDS"],
    )

    # Blueprints import ``db`` from this package, so they load after it exists
    from .errors import register_error_handlers
    from .routes.auth import auth_bp
    from .routes.tasks import tasks_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(tasks_bp)
    register_error_handlers(app)

    with app.app_context():
        db.create_all()
        logger.info("Database tables created")

    return app
