"""
Ok/Err result type shared by every registry operation.

Expected failures (a missing todo, a full registry, an empty page) are
returned to the caller as ``Err`` values instead of being raised, so a
caller always branches on which variant it got back::

    result = registry.read(todo_id)
    if result.is_ok():
        print(result.value)
    else:
        print("failed:", result.error)

Both variants are frozen dataclasses and compare by value, which keeps
assertions like ``registry.read(7) == Err("not found")`` readable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying an operation-specific payload."""

    value: T = None  # type: ignore[assignment]

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def to_variant(self) -> Dict[str, Any]:
        return {"Ok": self.value}


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a human-readable message."""

    error: str

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def to_variant(self) -> Dict[str, Any]:
        return {"Err": self.error}


Result = Union[Ok[T], Err]


def from_variant(payload: Dict[str, Any]) -> Union[Ok[Any], Err]:
    """Decode a single-key ``{"Ok": ...}`` / ``{"Err": ...}`` mapping.

    Raises
    ------
    ValueError
        If ``payload`` is not a mapping with exactly one of the two keys.
    """
    if not isinstance(payload, dict) or len(payload) != 1:
        raise ValueError(f"Expected a single-key variant object, got {payload!r}")
    if "Ok" in payload:
        return Ok(payload["Ok"])
    if "Err" in payload:
        return Err(str(payload["Err"]))
    raise ValueError(f"Unknown variant tag in {payload!r}")
