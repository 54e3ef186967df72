"""
Bearer-token authentication for protected routes.

``require_auth`` wraps a view: it reads ``Authorization: Bearer <token>``,
verifies the token with the application's signer, and stores the identity on
``flask.g`` (``g.user_id``, ``g.email``) before the view runs.  Requests
without a usable token are answered with 401 and the view is never called.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import Response, g, request

from .errors import json_error
from .tokens import current_signer


def extract_bearer_token() -> str | None:
    """
    Return the token from the current request's Authorization header.

    Returns ``None`` if the header is absent, uses another scheme, or holds
    an empty token.
    """
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None
    token = auth_header[7:].strip()
    return token or None


def require_auth(view_func: Callable[..., tuple[Response, int] | Response]):
    """Decorator that rejects the request with 401 unless a valid token is sent."""

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        token = extract_bearer_token()
        if token is None:
            return json_error("No token provided", 401)

        payload = current_signer().verify(token)
        if payload is None:
            return json_error("Invalid or expired token", 401)

        g.user_id = payload["id"]
        g.email = payload["email"]
        return view_func(*args, **kwargs)

    return wrapper
