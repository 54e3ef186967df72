"""
Error taxonomy and JSON error handlers.

Service functions raise the :class:`ApiError` subclasses below; the
handlers registered by :func:`register_error_handlers` turn them into a
``{"message": "..."}`` JSON body with the matching status code.  Unexpected
exceptions and store failures are logged with their traceback and answered
with a generic 500 so that no internal detail reaches the client.
"""

from __future__ import annotations

import logging

from flask import Flask, Response, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from . import db

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    message = SERVER_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(ApiError):
    """The request body failed validation."""

    status_code = 400
    message = "Invalid request body"


class ConflictError(ApiError):
    """A unique resource already exists.  Reported as 400 to clients."""

    status_code = 400
    message = "Email already exists"


class AuthenticationError(ApiError):
    status_code = 401
    message = "Invalid credentials"


class NotFoundError(ApiError):
    status_code = 404
    message = "Resource not found"


def json_error(message: str, status_code: int) -> tuple[Response, int]:
    """
    Build a standardised JSON error response.

    Args:
        message: Human-readable description of the error.
        status_code: HTTP status code to return.

    Returns:
        A ``(Response, int)`` tuple suitable for returning from a view.
    """
    return jsonify({"message": message}), status_code


def register_error_handlers(app: Flask) -> None:
    """Install the JSON error handlers on *app*."""

    @app.errorhandler(ApiError)
    def handle_api_error(error: ApiError) -> tuple[Response, int]:
        return json_error(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException) -> tuple[Response, int]:
        # Routing-level failures (unknown URL, wrong method, bad JSON)
        return json_error(error.description or error.name, error.code or 500)

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error: SQLAlchemyError) -> tuple[Response, int]:
        logger.error("Store error: %s", error, exc_info=error)
        db.session.rollback()
        return json_error(SERVER_ERROR_MESSAGE, 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception) -> tuple[Response, int]:
        logger.error("Internal server error: %s", error, exc_info=error)
        return json_error(SERVER_ERROR_MESSAGE, 500)
