"""
Service information endpoints for API v1.

``GET /interface`` returns the Candid description of the todo service
so clients can discover method names, argument types and call classes.
``GET /health`` reports how full the registry is.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from todo_registry_api.app.api.deps import get_dispatcher, get_registry
from todo_registry_api.app.services.dispatcher import CallDispatcher
from todo_registry_api.app.services.registry import TodoRegistry

router = APIRouter()


@router.get("/interface", response_class=PlainTextResponse, summary="Service interface")
async def get_interface(dispatcher: CallDispatcher = Depends(get_dispatcher)) -> str:
    return dispatcher.describe()


@router.get("/health", response_model=Dict[str, Any], summary="Health probe")
async def get_health(registry: TodoRegistry = Depends(get_registry)) -> Dict[str, Any]:
    return {"status": "ok", "todos": len(registry), "capacity": registry.capacity}
