"""
FastAPI dependencies giving handlers access to per-application state.

The registry and dispatcher are created by ``create_app`` and stored on
``app.state``; handlers receive them through ``Depends`` instead of
importing module-level globals, so each app instance (and each test)
works against its own registry.
"""

from fastapi import Request

from todo_registry_api.app.services.dispatcher import CallDispatcher
from todo_registry_api.app.services.registry import TodoRegistry


def get_registry(request: Request) -> TodoRegistry:
    return request.app.state.registry


def get_dispatcher(request: Request) -> CallDispatcher:
    return request.app.state.dispatcher
