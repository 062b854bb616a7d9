"""
Todo endpoints for API v1.

These routes expose the five registry operations as resources under
``/todos``.  Every route answers HTTP 200 with an Ok/Err variant body;
clients must branch on the variant rather than on the status code.
Malformed input (an id outside the 16-bit range, a missing ``text``)
is rejected by FastAPI with HTTP 422 before the registry is touched.
"""

from fastapi import APIRouter, Depends, Path, Query

from todo_registry_api.app.api.deps import get_registry
from todo_registry_api.app.core.config import MAX_TODO_ID
from todo_registry_api.app.schemas.todo import (
    AddReply,
    DeleteReply,
    ReadAllReply,
    ReadReply,
    TodoText,
    UpdateReply,
    result_to_variant,
)
from todo_registry_api.app.services.registry import TodoRegistry

router = APIRouter()


@router.post("", response_model=AddReply, summary="Add a todo")
async def add_todo(
    todo_in: TodoText,
    registry: TodoRegistry = Depends(get_registry),
) -> dict:
    """Create a todo and return its id, or ``Err`` when the registry is full."""
    return result_to_variant(registry.add(todo_in.text))


@router.get("", response_model=ReadAllReply, summary="Read a page of todos")
async def read_all_todos(
    page: int = Query(1, ge=0, le=MAX_TODO_ID, description="1-based page number; 0 is read as 1"),
    registry: TodoRegistry = Depends(get_registry),
) -> dict:
    """Return one page of todo texts and the next page number.

    ``next`` is null on the last page.  A page with no items yields
    ``{"Err": "Invalid Page <page>"}``.
    """
    return result_to_variant(registry.read_all(page))


@router.get("/{todo_id}", response_model=ReadReply, summary="Read a todo")
async def read_todo(
    todo_id: int = Path(..., ge=0, le=MAX_TODO_ID, description="Todo id (nat16)"),
    registry: TodoRegistry = Depends(get_registry),
) -> dict:
    return result_to_variant(registry.read(todo_id))


@router.put("/{todo_id}", response_model=UpdateReply, summary="Replace a todo's text")
async def update_todo(
    todo_in: TodoText,
    todo_id: int = Path(..., ge=0, le=MAX_TODO_ID, description="Todo id (nat16)"),
    registry: TodoRegistry = Depends(get_registry),
) -> dict:
    return result_to_variant(registry.update(todo_id, todo_in.text))


@router.delete("/{todo_id}", response_model=DeleteReply, summary="Delete a todo")
async def delete_todo(
    todo_id: int = Path(..., ge=0, le=MAX_TODO_ID, description="Todo id (nat16)"),
    registry: TodoRegistry = Depends(get_registry),
) -> dict:
    return result_to_variant(registry.delete(todo_id))
