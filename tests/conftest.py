"""
Shared pytest fixtures for the task manager test suite.

Provides the Flask application, test client, a clean database per test,
factories for users and tasks, and ready-made bearer tokens/headers.

Key Concepts Demonstrated:
- Session-scoped app vs function-scoped client and database
- Factory fixtures for flexible test-data creation
- Teardown that drops all tables to prevent test pollution
"""

from __future__ import annotations

import os
from collections.abc import Callable

import pytest
from faker import Faker

# Set testing environment before importing the app
os.environ["FLASK_ENV"] = "testing"
os.environ["TEST_JWT_SECRET_KEY"] = "test-jwt-secret-key-for-local-tests-123456"

from shared.test_helpers import auth_headers
from task_api import create_app, db
from task_api.models import Task, User

fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Provide the Flask application for the whole test session.

    Created once with the 'testing' config to avoid repeated startup cost.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """Provide a Flask test client scoped to a single test."""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Provide a clean database for each test.

    Creates all tables before the test, then rolls back and drops them
    afterwards so no rows leak into the next test.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


@pytest.fixture
def signer(app):
    """The token signer the running application uses."""
    return app.extensions["token_signer"]


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_factory(db_session) -> Callable[..., User]:
    """
    Factory that creates and persists User rows.

    Example:
        def test_something(user_factory):
            user = user_factory(email="a@x.com", password="p")
    """

    def _create_user(
        email: str = "testuser@example.com",
        password: str = "StrongPass123!",
    ) -> User:
        user = User(email=email)
        user.set_password(password)
        db_session.session.add(user)
        db_session.session.commit()
        return user

    return _create_user


@pytest.fixture
def task_factory(db_session) -> Callable[..., Task]:
    """Factory that creates Task rows with Faker-generated defaults."""

    def _create_task(
        title: str | None = None,
        description: str | None = None,
        completed: bool = False,
    ) -> Task:
        task = Task(
            title=title or fake.sentence(nb_words=4),
            description=description or fake.paragraph(),
            completed=completed,
        )
        db_session.session.add(task)
        db_session.session.commit()
        return task

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    return task_factory(
        title="Sample Task",
        description="This is a sample task for testing",
    )


@pytest.fixture
def multiple_tasks(task_factory) -> list[Task]:
    return [
        task_factory(title="Buy milk"),
        task_factory(title="Walk the dog", completed=True),
        task_factory(title="File taxes"),
    ]


# -----------------------------------------------------------------------------
# Auth Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def auth_token(signer) -> str:
    """A valid token for user id 1; the middleware does not look the user up."""
    return signer.issue(1, "user_one@example.com")


@pytest.fixture
def api_headers(auth_token) -> dict[str, str]:
    """Authorization and JSON headers for user id 1."""
    return auth_headers(auth_token)
