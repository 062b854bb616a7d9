"""
Call dispatcher for the todo registry.

Incoming calls name an operation and carry a positional argument list,
the same shape a Candid RPC call has.  The dispatcher looks the
operation up in its method table, checks that the call class is
allowed (an update method may not be invoked as a query), validates the
arguments against the declared types and finally invokes the registry.

Problems with the call itself are reported by raising ``CallRejected``:
the call never reached the registry.  Everything that did reach the
registry comes back as the registry's own ``Ok``/``Err`` result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence, Tuple

from todo_registry_api.app.core.config import MAX_TODO_ID
from todo_registry_api.app.core.result import Result
from todo_registry_api.app.services.registry import TodoRegistry


logger = logging.getLogger(__name__)


class CallMode(str, Enum):
    QUERY = "query"
    UPDATE = "update"


class ArgType(str, Enum):
    """Candid argument types used by the todo interface."""

    ID = "id"
    TEXT = "text"


class CallRejected(Exception):
    """Raised when a call is refused before it reaches the registry.

    ``reason`` is one of ``"method_not_found"``, ``"wrong_call_mode"``
    or ``"invalid_arguments"``.
    """

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


@dataclass(frozen=True)
class MethodSpec:
    name: str
    mode: CallMode
    arg_types: Tuple[ArgType, ...]
    signature: str
    handler: Callable[..., Result[Any]]


class CallDispatcher:
    """Route named calls to a ``TodoRegistry``."""

    def __init__(self, registry: TodoRegistry) -> None:
        self.registry = registry
        self._methods: Dict[str, MethodSpec] = {}
        self._register(
            "add", CallMode.UPDATE, (ArgType.TEXT,),
            "(text) -> (variant { Ok: id; Err: text })",
            registry.add,
        )
        self._register(
            "delete", CallMode.UPDATE, (ArgType.ID,),
            "(id) -> (variant { Ok; Err: text })",
            registry.delete,
        )
        self._register(
            "read", CallMode.QUERY, (ArgType.ID,),
            "(id) -> (variant { Ok: text; Err: text }) query",
            registry.read,
        )
        self._register(
            "read_all", CallMode.QUERY, (ArgType.ID,),
            "(id) -> (variant { Ok: record { items: vec text; next: opt id }; Err: text }) query",
            registry.read_all,
        )
        self._register(
            "update", CallMode.UPDATE, (ArgType.ID, ArgType.TEXT),
            "(id, text) -> (variant { Ok; Err: text })",
            registry.update,
        )

    def _register(
        self,
        name: str,
        mode: CallMode,
        arg_types: Tuple[ArgType, ...],
        signature: str,
        handler: Callable[..., Result[Any]],
    ) -> None:
        self._methods[name] = MethodSpec(name, mode, arg_types, signature, handler)

    @property
    def methods(self) -> List[MethodSpec]:
        return list(self._methods.values())

    def mode_of(self, method: str) -> CallMode:
        return self._lookup(method).mode

    def call(self, method: str, args: Sequence[Any], mode: CallMode = CallMode.UPDATE) -> Result[Any]:
        """Dispatch ``method(*args)`` as a call of class ``mode``.

        Raises
        ------
        CallRejected
            If the method is unknown, an update method is called as a
            query, or the arguments do not match the method's types.
        """
        spec = self._lookup(method)
        try:
            mode = CallMode(mode)
        except ValueError:
            logger.warning("Rejected call to %s with unknown call mode %r", method, mode)
            raise CallRejected("wrong_call_mode", f"Unknown call mode {mode!r}") from None
        if mode is CallMode.QUERY and spec.mode is CallMode.UPDATE:
            logger.warning("Rejected query call to update method %s", method)
            raise CallRejected(
                "wrong_call_mode",
                f"Method '{method}' is an update method and cannot be called as a query",
            )
        decoded = self._decode_args(spec, args)
        logger.debug("Dispatching %s call %s%r", mode.value, method, tuple(decoded))
        return spec.handler(*decoded)

    def describe(self) -> str:
        """Render the service interface in Candid notation."""
        lines = ["type id = nat16;", "service : {"]
        for spec in self._methods.values():
            lines.append(f"  {spec.name} : {spec.signature};")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _lookup(self, method: str) -> MethodSpec:
        spec = self._methods.get(method)
        if spec is None:
            logger.warning("Rejected call to unknown method %s", method)
            raise CallRejected("method_not_found", f"Method '{method}' not found")
        return spec

    @staticmethod
    def _decode_args(spec: MethodSpec, args: Sequence[Any]) -> List[Any]:
        if len(args) != len(spec.arg_types):
            raise CallRejected(
                "invalid_arguments",
                f"Method '{spec.name}' expects {len(spec.arg_types)} argument(s), got {len(args)}",
            )
        decoded: List[Any] = []
        for position, (arg_type, value) in enumerate(zip(spec.arg_types, args)):
            if arg_type is ArgType.ID:
                # bool is an int subclass but never a valid id.
                if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_TODO_ID:
                    raise CallRejected(
                        "invalid_arguments",
                        f"Argument {position} of '{spec.name}' must be a nat16 (0-{MAX_TODO_ID}), got {value!r}",
                    )
            elif not isinstance(value, str):
                raise CallRejected(
                    "invalid_arguments",
                    f"Argument {position} of '{spec.name}' must be text, got {value!r}",
                )
            decoded.append(value)
        return decoded
