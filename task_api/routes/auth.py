"""
Authentication endpoints.

Endpoints:
    GET  /health    -- Liveness check (public).
    POST /register  -- Create an account and receive a token.
    POST /login     -- Exchange credentials for a token.
    GET  /profile   -- Identity of the bearer (requires a token).
"""

from __future__ import annotations

import os

from flask import Blueprint, Response, g, jsonify, request

from .. import auth_service
from ..middleware import require_auth
from ..tokens import current_signer
from ..validation import validate_credentials

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """
    Return service health status.

    Public endpoint polled by load balancers and orchestrators.
    """
    return (
        jsonify(
            {
                "status": "healthy",
                "service": "task-api",
                "environment": os.getenv("ENVIRONMENT", "unknown"),
            }
        ),
        200,
    )


@auth_bp.route("/register", methods=["POST"])
def register() -> tuple[Response, int]:
    """
    Register a new user account.

    Expects a JSON body with ``email`` and ``password``.

    Returns:
        201 with ``message`` and ``token`` on success.
        400 if a field is missing or invalid, or the email is taken.
    """
    email, password = validate_credentials(request.get_json(silent=True))
    token = auth_service.register(email, password, current_signer())
    return jsonify({"message": "User registered", "token": token}), 201


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple[Response, int]:
    """
    Authenticate a user and issue a token.

    Returns:
        200 with ``message`` and ``token`` on success.
        400 if a field is missing.
        401 if the credentials are incorrect.
    """
    email, password = validate_credentials(request.get_json(silent=True))
    token = auth_service.login(email, password, current_signer())
    return jsonify({"message": "Login successful", "token": token}), 200


@auth_bp.route("/profile", methods=["GET"])
@require_auth
def profile() -> tuple[Response, int]:
    """Return ``{id, email}`` for the authenticated user."""
    return jsonify(auth_service.profile(g.user_id, g.email)), 200
