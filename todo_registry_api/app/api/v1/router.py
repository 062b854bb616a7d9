"""
Top‑level router for version 1 of the API.

This router aggregates the todo resource routes, the raw query/update
call routes and the service information routes under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import calls, service, todos

router = APIRouter()

router.include_router(todos.router, prefix="/todos", tags=["todos"])
router.include_router(calls.router, prefix="/call", tags=["calls"])
# Service routes define their own paths (``/interface``, ``/health``).
router.include_router(service.router, tags=["service"])
