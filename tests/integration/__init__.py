"""
HTTP-level tests for the task manager API.

Tests use the Flask test client and cover:
- Auth endpoints (register, login, profile)
- Task CRUD operations behind bearer-token auth
- Error handling and response envelopes
"""
