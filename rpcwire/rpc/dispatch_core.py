"""Per-element dispatch for JSON-RPC payloads.

process_element() handles one request or notification that has already
passed structural validation:
- Handler lookup, honoring strict method handling
- Handler invocation (sync or async)
- Success/error response generation
- Exception mapping to error objects

Notifications never produce a response, whatever happens.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any

from rpcwire.core.interfaces import Handler, RpcLogger
from rpcwire.rpc.classify import is_error_object
from rpcwire.rpc.errors import JsonRpcError
from rpcwire.rpc.protocol import (
    make_error,
    make_error_response,
    make_standard_error,
    make_success_response,
)
from rpcwire.rpc.types import MISSING, ErrorKind, ErrorObject, Notification, Request, Response


def error_object_from_exception(exc: BaseException) -> ErrorObject | None:
    """Return the error object an exception stands for, if it is error-shaped.

    JsonRpcError instances convert directly. Any other exception qualifies if
    it has a numeric ``code`` attribute and a str ``message`` attribute; a
    ``data`` attribute, if present, is carried along.

    Returns:
        The error object, or None for an ordinary exception.
    """
    if isinstance(exc, JsonRpcError):
        return exc.to_error_object()

    code = getattr(exc, "code", None)
    message = getattr(exc, "message", None)
    if not is_error_object({"code": code, "message": message}):
        return None
    return make_error(code, message, getattr(exc, "data", MISSING))


async def process_element(
    element: Request | Notification,
    handlers: Mapping[str, Handler],
    context: Any,
    *,
    strict_method_handling: bool,
    logger: RpcLogger,
) -> Response | None:
    """Dispatch one request or notification to its handler.

    Args:
        element: A structurally valid request or notification.
        handlers: Mapping of method names to handlers.
        context: Opaque value passed through to the handler.
        strict_method_handling: Answer unknown-method requests with
            Method not found instead of dropping them.
        logger: Logging collaborator.

    Returns:
        A response for requests, or None for notifications and for
        unknown-method requests in non-strict mode.
    """
    is_notification = "id" not in element
    request_id = None if is_notification else element["id"]
    method = element["method"]

    handler = handlers.get(method)
    if handler is None:
        if is_notification:
            logger.info("JSON-RPC notification for unknown method: %s", method)
            return None

        if strict_method_handling:
            logger.warning("JSON-RPC method not found: %s", method)
            return make_error_response(
                request_id, make_standard_error(ErrorKind.METHOD_NOT_FOUND)
            )

        # No response at all; a caller awaiting this id will wait forever
        logger.info("JSON-RPC method not found (non-strict mode): %s", method)
        return None

    try:
        result = handler(element.get("params"), context)
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        if is_notification:
            logger.error(
                "JSON-RPC notification method error in %s: %s", method, e, exc_info=True
            )
            return None

        error = error_object_from_exception(e)
        if error is not None:
            logger.warning("JSON-RPC method error in %s: %s", method, e)
            return make_error_response(request_id, error)

        logger.error("JSON-RPC internal error in %s: %s", method, e, exc_info=True)
        return make_error_response(
            request_id, make_standard_error(ErrorKind.INTERNAL_ERROR)
        )

    if is_notification:
        return None
    return make_success_response(request_id, result)
