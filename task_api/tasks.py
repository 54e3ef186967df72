"""
Task repository access.

One function per CRUD operation on the ``tasks`` table.  Callers pass
already-validated field dicts (see :mod:`task_api.validation`); lookups of an
unknown id raise :class:`~task_api.errors.NotFoundError`.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select

from . import db
from .errors import NotFoundError
from .models import Task

logger = logging.getLogger(__name__)

# Largest id a signed 64-bit INTEGER primary key can hold
MAX_TASK_ID = 2**63 - 1


def list_tasks() -> list[Task]:
    """Return every task, oldest first."""
    return list(db.session.scalars(select(Task).order_by(Task.id.asc())).all())


def _find_task(task_id: int) -> Task | None:
    if not 0 < task_id <= MAX_TASK_ID:
        return None
    return db.session.get(Task, task_id)


def get_task(task_id: int) -> Task:
    task = _find_task(task_id)
    if task is None:
        raise NotFoundError("Task not found")
    return task


def create_task(fields: dict[str, Any]) -> Task:
    """
    Persist a new task.

    ``id`` and ``created_at`` are assigned by the store; ``completed``
    defaults to False.
    """
    task = Task(
        title=fields["title"],
        description=fields.get("description"),
        completed=fields.get("completed", False),
    )
    db.session.add(task)
    db.session.commit()
    logger.info("Created task id=%s", task.id)
    return task


def update_task(task_id: int, fields: dict[str, Any]) -> Task:
    """
    Apply *fields* to an existing task and return it.

    Only the supplied fields change, so repeating the same update leaves the
    task in the same state.
    """
    task = get_task(task_id)
    for name, value in fields.items():
        setattr(task, name, value)
    db.session.commit()
    logger.info("Updated task id=%s", task_id)
    return task


def delete_task(task_id: int) -> None:
    """Delete a task.  Deleting an id that does not exist is not an error."""
    task = _find_task(task_id)
    if task is None:
        return
    db.session.delete(task)
    db.session.commit()
    logger.info("Deleted task id=%s", task_id)
