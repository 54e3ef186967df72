"""
Authentication service.

Registers users, checks credentials, and issues bearer tokens through a
:class:`~task_api.tokens.TokenSigner`.  Failures are raised as
:class:`~task_api.errors.ConflictError` or
:class:`~task_api.errors.AuthenticationError`; the route layer never sees a
half-created user.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from . import db
from .errors import AuthenticationError, ConflictError
from .models import User
from .tokens import TokenSigner

logger = logging.getLogger(__name__)


def find_user_by_email(email: str) -> User | None:
    return db.session.scalar(select(User).where(User.email == email))


def register(email: str, password: str, signer: TokenSigner) -> str:
    """
    Create a user and issue a token for it.

    Args:
        email: Normalised email address.
        password: Plain-text password; only its hash is stored.
        signer: Token signer for the running application.

    Returns:
        A freshly signed token for the new user.

    Raises:
        ConflictError: If a user with *email* already exists.
    """
    if find_user_by_email(email) is not None:
        raise ConflictError("Email already exists")

    user = User(email=email)
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Another request registered the same email between lookup and commit
        db.session.rollback()
        raise ConflictError("Email already exists")

    logger.info("Registered user id=%s", user.id)
    return signer.issue(user.id, user.email)


def login(email: str, password: str, signer: TokenSigner) -> str:
    """
    Verify credentials and issue a token.

    The same message is used for an unknown email and a wrong password so the
    response does not reveal which accounts exist.

    Raises:
        AuthenticationError: If the credentials do not match a user.
    """
    user = find_user_by_email(email)
    if user is None or not user.check_password(password):
        logger.info("Failed login attempt")
        raise AuthenticationError("Invalid credentials")

    return signer.issue(user.id, user.email)


def profile(user_id: int, email: str) -> dict[str, Any]:
    """Return the public identity carried by an authenticated request."""
    return {"id": user_id, "email": email}
