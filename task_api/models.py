"""
Database models for the task manager.

Defines the two tables the API owns: ``tasks`` and ``users``.  Passwords are
stored only as a salted one-way hash produced by Werkzeug, and
``Task.to_dict`` returns the wire representation used in JSON responses.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from . import db


def _to_utc_iso(value: datetime) -> str:
    """
    Serialize a datetime to an ISO-8601 UTC string.

    SQLite returns naive datetimes even for timezone-aware columns, so naive
    values are assumed to be UTC and aware values are converted.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat()


class Task(db.Model):
    """
    Task model representing a to-do item.

    Attributes:
        id: Store-assigned unique identifier.
        title: Short title describing the task.
        description: Optional free-text description.
        completed: Whether the task is done.
        created_at: Timestamp when the task was created (UTC).
    """

    __tablename__ = "tasks"

    id: int = db.Column(db.Integer, primary_key=True)
    title: str = db.Column(db.String(200), nullable=False)
    description: str | None = db.Column(db.Text, nullable=True)
    completed: bool = db.Column(db.Boolean, nullable=False, default=False)
    created_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": bool(self.completed),
            "createdAt": _to_utc_iso(self.created_at),
        }

    def __repr__(self) -> str:
        return f"<Task {self.id}: {self.title}>"


class User(db.Model):
    """
    Registered user.

    ``email`` is unique and indexed because registration and login both look
    users up by it.  Only the password hash is stored.
    """

    __tablename__ = "users"

    id: int = db.Column(db.Integer, primary_key=True)
    email: str = db.Column(db.String(254), unique=True, nullable=False, index=True)
    password_hash: str = db.Column(db.String(256), nullable=False)
    created_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def set_password(self, password: str) -> None:
        """Hash and store a plain-text password using a random salt."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Return True if *password* matches the stored hash."""
        return check_password_hash(self.password_hash, password)

    def __repr__(self) -> str:
        return f"<User {self.id}: {self.email}>"
