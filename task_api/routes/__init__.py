"""
Route blueprints for the task manager API.

This package contains:
- auth: registration, login, profile, and the health check
- tasks: task CRUD, every route protected by ``require_auth``
"""
