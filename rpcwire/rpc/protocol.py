"""JSON-RPC 2.0 message construction and JSON encoding.

The make_* functions build well-formed messages. Optional members (params,
data) default to MISSING and are left out of the result entirely when not
given, so ``make_request("m", 1)`` and ``make_request("m", 1, None)`` produce
different objects.
"""

from __future__ import annotations

import json
from typing import Any

from rpcwire.core.errors import RpcwireError
from rpcwire.rpc.types import (
    JSONRPC_VERSION,
    MISSING,
    ErrorKind,
    ErrorObject,
    ErrorResponse,
    Notification,
    Request,
    RequestId,
    SuccessResponse,
)


class ParseError(RpcwireError):
    """Raised when a JSON-RPC payload is not valid JSON text."""


# JSON-RPC 2.0 error codes
PARSE_ERROR = ErrorKind.PARSE_ERROR.code
INVALID_REQUEST = ErrorKind.INVALID_REQUEST.code
METHOD_NOT_FOUND = ErrorKind.METHOD_NOT_FOUND.code
INVALID_PARAMS = ErrorKind.INVALID_PARAMS.code
INTERNAL_ERROR = ErrorKind.INTERNAL_ERROR.code
SERVER_ERROR = -32000  # Conventional start of the application range; not enforced


def make_request(method: str, request_id: RequestId, params: Any = MISSING) -> Request:
    """Create a request.

    Args:
        method: Name of the method to invoke.
        request_id: Correlation id, a string or number.
        params: Method parameters. Omitted from the message if not given.

    Returns:
        A Request dict.
    """
    request: Request = {"jsonrpc": JSONRPC_VERSION, "method": method, "id": request_id}
    if params is not MISSING:
        request["params"] = params
    return request


def make_notification(method: str, params: Any = MISSING) -> Notification:
    """Create a notification (a request without id)."""
    notification: Notification = {"jsonrpc": JSONRPC_VERSION, "method": method}
    if params is not MISSING:
        notification["params"] = params
    return notification


def make_success_response(request_id: RequestId, result: Any) -> SuccessResponse:
    """Create a success response.

    Args:
        request_id: The id from the original request.
        result: The result of the method call.

    Returns:
        A SuccessResponse dict.
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def make_error_response(request_id: RequestId | None, error: ErrorObject) -> ErrorResponse:
    """Create an error response.

    Args:
        request_id: The id from the original request, or None if unknown.
        error: The error object.

    Returns:
        An ErrorResponse dict.
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error}


def make_error(code: int, message: str, data: Any = MISSING) -> ErrorObject:
    """Create an error object.

    Args:
        code: JSON-RPC error code.
        message: Human-readable error message.
        data: Optional additional error data. Omitted if not given.

    Returns:
        An ErrorObject dict.
    """
    error: ErrorObject = {"code": code, "message": message}
    if data is not MISSING:
        error["data"] = data
    return error


def make_standard_error(kind: ErrorKind | str, data: Any = MISSING) -> ErrorObject:
    """Create one of the five reserved error objects.

    Args:
        kind: An ErrorKind, or its name such as "INVALID_PARAMS".
        data: Optional additional error data.

    Returns:
        An ErrorObject with the reserved code and its fixed message.

    Raises:
        ValueError: If kind is a string that names no ErrorKind.
    """
    if not isinstance(kind, ErrorKind):
        try:
            kind = ErrorKind[kind]
        except KeyError:
            raise ValueError(f"Unknown standard error: {kind!r}") from None
    return make_error(kind.code, kind.message, data)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode_payload(raw: Any) -> Any:
    """Decode a raw payload.

    Text (str, bytes, bytearray) is parsed as JSON. Any other value is
    assumed to be decoded already and is returned unchanged. The non-standard
    constants NaN, Infinity and -Infinity are rejected.

    Raises:
        ParseError: If text is not valid JSON or nests too deeply to decode.
    """
    if not isinstance(raw, (str, bytes, bytearray)):
        return raw
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:  # also JSONDecodeError, UnicodeDecodeError
        raise ParseError(f"Invalid JSON: {e}") from e


def serialize_message(message: Any) -> str:
    """Serialize a message or batch to compact JSON text (no trailing newline).

    Raises:
        TypeError: If a value has no JSON representation.
        ValueError: If a float is not finite or a container refers to itself.
    """
    return json.dumps(message, separators=(",", ":"), allow_nan=False)
