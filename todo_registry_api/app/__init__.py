"""
Application package initializer.

This package contains the FastAPI entrypoint for the todo registry and
all of its submodules: ``core`` (configuration, logging, the Ok/Err
result type and the registry lock), ``services`` (registry and call
dispatcher), ``schemas`` (wire models) and ``api`` (versioned routers).
"""

from .main import app, create_app  # noqa: F401
