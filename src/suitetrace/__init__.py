"""Versioning and traceability engine for test suite workspaces."""

__version__ = "0.1.0"
