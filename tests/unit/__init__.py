"""Unit tests that exercise single modules with little or no HTTP plumbing."""
