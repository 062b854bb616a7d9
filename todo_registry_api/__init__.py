"""
Top‑level package for the Todo Registry API.

This file makes ``todo_registry_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``todo_registry_api.app.main``.  The HTTP client lives in the sibling
top-level module ``todo_client``.
"""

__all__ = []
