"""
Unit tests for the auth service functions, called without the HTTP layer.
"""

from __future__ import annotations

import pytest

from task_api import auth_service
from task_api.errors import AuthenticationError, ConflictError

pytestmark = pytest.mark.unit


def test_register_returns_token_for_stored_user(db_session, signer):
    # Act
    token = auth_service.register("new@example.com", "pw", signer)

    # Assert
    user = auth_service.find_user_by_email("new@example.com")
    assert user is not None
    assert user.password_hash != "pw"
    payload = signer.verify(token)
    assert payload["id"] == user.id
    assert payload["email"] == "new@example.com"


def test_register_twice_raises_conflict(db_session, signer):
    auth_service.register("dup@example.com", "pw", signer)

    with pytest.raises(ConflictError):
        auth_service.register("dup@example.com", "other", signer)


def test_login_returns_token_for_matching_credentials(db_session, signer, user_factory):
    user = user_factory(email="login@example.com", password="pw")

    token = auth_service.login("login@example.com", "pw", signer)

    assert signer.verify(token)["id"] == user.id


@pytest.mark.parametrize(
    "email,password",
    [("login@example.com", "wrong"), ("nobody@example.com", "pw")],
)
def test_login_failures_raise_authentication_error(
    db_session, signer, user_factory, email, password
):
    user_factory(email="login@example.com", password="pw")

    with pytest.raises(AuthenticationError):
        auth_service.login(email, password, signer)


def test_profile_echoes_identity():
    assert auth_service.profile(4, "me@example.com") == {"id": 4, "email": "me@example.com"}
