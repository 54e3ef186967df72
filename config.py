"""
Application configuration module.

Defines configuration classes for the development, testing, and production
environments.  A shared ``Config`` base class holds defaults and every value
can be overridden from an environment variable, so deployments inject the
database URL and the token signing secret without touching code.

Settings of note:
- ``SQLALCHEMY_DATABASE_URI``: connection URL of the backing store.
- ``JWT_SECRET_KEY``: symmetric secret used to sign bearer tokens (HS256).
- ``JWT_EXPIRY_SECONDS``: lifetime of an issued token (one hour).
- ``JWT_CLOCK_SKEW_SECONDS``: tolerance applied when checking expiry.
- ``CORS_ALLOW_ORIGINS``: origins allowed cross-origin access (default ``*``).
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent

DEV_JWT_SECRET_KEY = "dev-jwt-secret-change-in-production"


def _split_origins(raw: str) -> list[str]:
    """Split a comma-separated origin list, dropping blank entries."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'taskmanager.db'}",
    )

    JWT_SECRET_KEY: str = os.environ.get("JWT_SECRET_KEY", DEV_JWT_SECRET_KEY)
    # Tokens expire one hour after issue
    JWT_EXPIRY_SECONDS: int = int(os.environ.get("JWT_EXPIRY_SECONDS", "3600"))
    JWT_CLOCK_SKEW_SECONDS: int = int(os.environ.get("JWT_CLOCK_SKEW_SECONDS", "0"))

    # Comma-separated list of origins allowed to call the API from a browser
    CORS_ALLOW_ORIGINS: list[str] = _split_origins(os.environ.get("CORS_ALLOW_ORIGINS", "*"))


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """
    Testing environment configuration.

    Uses a separate SQLite database so test runs never touch development
    data.  ``check_same_thread=False`` lets Flask's test client share the
    connection across threads.
    """

    DEBUG: bool = True
    TESTING: bool = True

    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'test_taskmanager.db'}?check_same_thread=False",
    )
    SQLALCHEMY_ENGINE_OPTIONS: dict = {"pool_pre_ping": True}

    JWT_SECRET_KEY: str = os.environ.get(
        "TEST_JWT_SECRET_KEY", "test-jwt-secret-key-for-local-tests-123456"
    )


class ProductionConfig(Config):
    """
    Production environment configuration.

    ``JWT_SECRET_KEY`` must come from the environment; ``create_app`` refuses
    to start with the development default.
    """

    DEBUG: bool = False
    TESTING: bool = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses the FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.  Unknown
        names fall back to ``DevelopmentConfig``.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
