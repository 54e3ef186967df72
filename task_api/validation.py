"""
Request body validation.

Each validator takes the decoded JSON body and either returns a dict that
holds only the known, well-typed fields or raises
:class:`~task_api.errors.ValidationError`.  Fields the server owns (``id``,
``createdAt``) and unknown keys are dropped, so nothing the client sends is
bound to a model without passing through here.
"""

from __future__ import annotations

from typing import Any

from .errors import ValidationError

TITLE_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 254

TASK_FIELDS = ("title", "description", "completed")


def _require_object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def validate_task_data(data: Any, *, partial: bool = False) -> dict[str, Any]:
    """
    Validate a task payload.

    Args:
        data: The decoded JSON request body.
        partial: When True (updates) every field is optional but at least
            one known field must be present.  When False (creation)
            ``title`` is required.

    Returns:
        A dict containing only the supplied task fields.

    Raises:
        ValidationError: On a non-object body or any invalid field.
    """
    data = _require_object(data)
    fields = {name: data[name] for name in TASK_FIELDS if name in data}

    if not partial and "title" not in fields:
        raise ValidationError("'title' is required")
    if partial and not fields:
        raise ValidationError(f"At least one of {list(TASK_FIELDS)} is required")

    if "title" in fields:
        title = fields["title"]
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("'title' is required")
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(f"Title must be {TITLE_MAX_LENGTH} characters or less")

    if "description" in fields and fields["description"] is not None:
        if not isinstance(fields["description"], str):
            raise ValidationError("'description' must be a string")

    if "completed" in fields and not isinstance(fields["completed"], bool):
        raise ValidationError("'completed' must be a boolean")

    return fields


def validate_credentials(data: Any) -> tuple[str, str]:
    """
    Validate an ``{email, password}`` body.

    Returns:
        The normalised (stripped, lower-cased) email and the raw password.

    Raises:
        ValidationError: If either field is missing, blank, or not a string,
            or the email is too long or lacks an ``@``.
    """
    data = _require_object(data)
    for field in ("email", "password"):
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"'{field}' is required")

    email = data["email"].strip().lower()
    if len(email) > EMAIL_MAX_LENGTH:
        raise ValidationError(f"email must be {EMAIL_MAX_LENGTH} characters or less")
    if "@" not in email:
        raise ValidationError("email must be a valid email address")

    return email, data["password"]
