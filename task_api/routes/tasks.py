"""
REST API endpoints for tasks.

Every route requires a bearer token.

Endpoints:
    GET    /tasks       - List all tasks
    GET    /tasks/<id>  - Get a single task
    POST   /tasks       - Create a task
    PUT    /tasks/<id>  - Update the supplied fields of a task
    DELETE /tasks/<id>  - Delete a task (204 whether or not it existed)
"""

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from .. import tasks
from ..middleware import require_auth
from ..validation import validate_task_data

tasks_bp = Blueprint("tasks", __name__)


@tasks_bp.route("/tasks", methods=["GET"])
@require_auth
def list_tasks() -> tuple[Response, int]:
    return jsonify([task.to_dict() for task in tasks.list_tasks()]), 200


@tasks_bp.route("/tasks/<int:task_id>", methods=["GET"])
@require_auth
def get_task(task_id: int) -> tuple[Response, int]:
    return jsonify(tasks.get_task(task_id).to_dict()), 200


@tasks_bp.route("/tasks", methods=["POST"])
@require_auth
def create_task() -> tuple[Response, int]:
    """
    Create a new task.

    Expects a JSON body with at least ``title``.  ``description`` and
    ``completed`` are optional; any other key is ignored.

    Returns:
        201 with the stored task, or 400 if the body is invalid.
    """
    fields = validate_task_data(request.get_json(silent=True))
    return jsonify(tasks.create_task(fields).to_dict()), 201


@tasks_bp.route("/tasks/<int:task_id>", methods=["PUT"])
@require_auth
def update_task(task_id: int) -> tuple[Response, int]:
    """
    Update an existing task.

    Only the fields present in the body change.

    Returns:
        200 with the updated task, 400 if the body is invalid, or 404 if
        the task does not exist.
    """
    fields = validate_task_data(request.get_json(silent=True), partial=True)
    return jsonify(tasks.update_task(task_id, fields).to_dict()), 200


@tasks_bp.route("/tasks/<int:task_id>", methods=["DELETE"])
@require_auth
def delete_task(task_id: int) -> tuple[str, int]:
    tasks.delete_task(task_id)
    return "", 204
