"""
Pydantic schemas for todo requests and variant replies.

Every reply is a single-key JSON object mirroring the Candid variant
of the operation: ``{"Ok": <payload>}`` on success or
``{"Err": "<message>"}`` on failure.  Unit successes are encoded as
``{"Ok": null}``.  All variant models forbid extra keys so a body can
only ever match one arm of a union.
"""

from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from todo_registry_api.app.core.config import MAX_TODO_ID
from todo_registry_api.app.core.result import Err, Ok


class TodoText(BaseModel):
    """Request body for ``add`` and ``update``."""

    text: str = Field(..., description="Content of the todo item")


class ErrReply(BaseModel):
    Err: str = Field(..., description="Error message")

    model_config = {"extra": "forbid"}


class IdReply(BaseModel):
    Ok: int = Field(..., ge=0, le=MAX_TODO_ID, description="Id of the created todo")

    model_config = {"extra": "forbid"}


class UnitReply(BaseModel):
    Ok: None

    model_config = {"extra": "forbid"}


class TextReply(BaseModel):
    Ok: str

    model_config = {"extra": "forbid"}


class TodoPageRead(BaseModel):
    """One page of todo texts plus the cursor of the following page."""

    items: List[str]
    next: Optional[int] = Field(None, description="Next page number, null on the last page")

    model_config = {"extra": "forbid"}


class PageReply(BaseModel):
    Ok: TodoPageRead

    model_config = {"extra": "forbid"}


AddReply = Union[IdReply, ErrReply]
DeleteReply = Union[UnitReply, ErrReply]
ReadReply = Union[TextReply, ErrReply]
ReadAllReply = Union[PageReply, ErrReply]
UpdateReply = Union[UnitReply, ErrReply]


def result_to_variant(result: Union[Ok[Any], Err]) -> Dict[str, Any]:
    """Encode a registry result as a JSON-ready variant mapping."""
    if isinstance(result, Err):
        return result.to_variant()
    value = result.value
    if is_dataclass(value):
        value = asdict(value)
    return {"Ok": value}
