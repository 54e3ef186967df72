"""
Test suite for the task manager API.

This package contains:
- unit/: token signer, middleware, validation, models, and configuration
- integration/: HTTP tests through the Flask test client
"""
