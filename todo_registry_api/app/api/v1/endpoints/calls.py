"""
Raw call endpoints for API v1.

These routes mirror the two call classes of the original RPC contract.
``POST /call/query/{method}`` runs a read-only call and refuses update
methods; ``POST /call/update/{method}`` runs any method.  Arguments are
passed positionally in the ``args`` list of the request body, e.g.::

    POST /api/v1/call/update/update
    {"args": [3, "walk the cat"]}

Rejected calls (unknown method, wrong call class, bad arguments) are
answered with an HTTP error.  Calls that reach the registry always
answer HTTP 200 with the method's Ok/Err variant inside ``reply``.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from todo_registry_api.app.api.deps import get_dispatcher
from todo_registry_api.app.schemas.call import CallReply, CallRequest
from todo_registry_api.app.schemas.todo import result_to_variant
from todo_registry_api.app.services.dispatcher import CallDispatcher, CallMode, CallRejected

router = APIRouter()

_REJECTION_STATUS = {
    "method_not_found": status.HTTP_404_NOT_FOUND,
    "wrong_call_mode": status.HTTP_400_BAD_REQUEST,
    "invalid_arguments": status.HTTP_400_BAD_REQUEST,
}


def _dispatch(dispatcher: CallDispatcher, method: str, call_in: CallRequest, mode: CallMode) -> CallReply:
    try:
        result = dispatcher.call(method, call_in.args, mode=mode)
    except CallRejected as exc:
        raise HTTPException(
            status_code=_REJECTION_STATUS.get(exc.reason, status.HTTP_400_BAD_REQUEST),
            detail=exc.message,
        )
    return CallReply(method=method, mode=mode.value, reply=result_to_variant(result))


@router.post("/query/{method}", response_model=CallReply, summary="Run a query call")
async def query_call(
    method: str,
    call_in: CallRequest,
    dispatcher: CallDispatcher = Depends(get_dispatcher),
) -> CallReply:
    """Run a read-only call.  Update methods are rejected with HTTP 400."""
    return _dispatch(dispatcher, method, call_in, CallMode.QUERY)


@router.post("/update/{method}", response_model=CallReply, summary="Run an update call")
async def update_call(
    method: str,
    call_in: CallRequest,
    dispatcher: CallDispatcher = Depends(get_dispatcher),
) -> CallReply:
    return _dispatch(dispatcher, method, call_in, CallMode.UPDATE)
