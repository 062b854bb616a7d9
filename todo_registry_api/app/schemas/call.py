"""
Pydantic schemas for raw query/update calls.

A raw call names the method in the URL and sends its positional
arguments in ``args``.  The reply is the method's variant, left untyped
here because it depends on which method was called.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class CallRequest(BaseModel):
    args: List[Any] = Field(default_factory=list, description="Positional arguments of the call")


class CallReply(BaseModel):
    """Envelope returned by the raw call endpoints."""

    method: str
    mode: str
    reply: Dict[str, Any] = Field(..., description="Ok/Err variant returned by the method")
