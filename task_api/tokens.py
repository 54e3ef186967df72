"""
Bearer token issuing and verification.

Tokens are JSON Web Tokens signed with HS256 using the server-held
``JWT_SECRET_KEY``.  A single ``TokenSigner`` is built by ``create_app`` and
stored in ``app.extensions["token_signer"]``; handlers and the auth
middleware reach it through :func:`current_signer` rather than a module
global.

Token structure (claims):
    - ``id``    -- integer primary key of the authenticated user.
    - ``email`` -- the user's email address.
    - ``iat``   -- issued-at timestamp (UTC epoch seconds).
    - ``exp``   -- expiration timestamp (UTC epoch seconds).
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from flask import current_app

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
REQUIRED_TOKEN_CLAIMS = ["id", "email", "iat", "exp"]


class TokenSigner:
    """
    Issue and verify HS256 bearer tokens with a fixed validity window.

    Attributes:
        secret_key: Symmetric signing secret.
        expiry_seconds: Seconds from issue until a token expires.
        leeway_seconds: Clock-skew tolerance applied to ``exp``/``iat``.
    """

    def __init__(
        self,
        secret_key: str,
        expiry_seconds: int = 3600,
        leeway_seconds: int = 0,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must be a non-empty string")
        self.secret_key = secret_key
        self.expiry_seconds = int(expiry_seconds)
        self.leeway_seconds = int(leeway_seconds)

    def issue(self, user_id: int, email: str) -> str:
        """
        Create a signed token for the given identity.

        Args:
            user_id: Primary key of the user.  Must be a positive integer.
            email: The user's email.  Must be a non-empty string.

        Returns:
            A compact JWS string suitable for an ``Authorization: Bearer``
            header.

        Raises:
            ValueError: If *user_id* is not positive or *email* is blank.
        """
        if int(user_id) <= 0:
            raise ValueError("user_id must be a positive integer")
        if not isinstance(email, str) or not email.strip():
            raise ValueError("email must be a non-empty string")

        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(seconds=self.expiry_seconds)

        payload: dict[str, Any] = {
            "id": int(user_id),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self.secret_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> dict[str, Any] | None:
        """
        Decode and validate a token, returning the payload on success.

        Checks the signature, expiry, presence of all required claims, and
        that ``id`` is a positive integer and ``email`` a non-blank string.

        Returns:
            The decoded payload, or ``None`` if the token fails any check.
        """
        try:
            decoded = jwt.decode(
                token,
                self.secret_key,
                algorithms=[ALGORITHM],
                options={"require": REQUIRED_TOKEN_CLAIMS},
                leeway=self.leeway_seconds,
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            return None
        except jwt.InvalidTokenError as exc:
            logger.warning("Rejected invalid token: %s", exc)
            return None

        user_id = decoded.get("id")
        email = decoded.get("email")

        # bool is a subclass of int
        if not isinstance(user_id, int) or isinstance(user_id, bool) or user_id <= 0:
            return None
        if not isinstance(email, str) or not email.strip():
            return None
        return decoded


def current_signer() -> TokenSigner:
    """Return the signer configured for the active Flask application."""
    return current_app.extensions["token_signer"]
