"""JSON-RPC 2.0 wire shapes for rpcwire.

Messages are plain dicts, exactly as they look once decoded from JSON. The
TypedDicts below document their fields; optional fields that were omitted are
absent from the dict rather than present with a None value.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final, Literal, NotRequired, TypedDict

JSONRPC_VERSION: Final = "2.0"

RequestId = str | int | float


class _Missing(Enum):
    """Marker type for an omitted optional field."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing.MISSING
"""Sentinel for "not given", distinct from None (JSON null)."""


class ErrorObject(TypedDict):
    """JSON-RPC 2.0 error object.

    Attributes:
        code: Error code; -32700 and -32600 to -32603 are reserved.
        message: Short description of the error.
        data: Optional additional information.
    """

    code: int
    message: str
    data: NotRequired[Any]


class Request(TypedDict):
    """JSON-RPC 2.0 request. Expects exactly one response."""

    jsonrpc: Literal["2.0"]
    method: str
    params: NotRequired[Any]
    id: RequestId


class Notification(TypedDict):
    """JSON-RPC 2.0 notification. Has no id and never gets a response."""

    jsonrpc: Literal["2.0"]
    method: str
    params: NotRequired[Any]


class SuccessResponse(TypedDict):
    """JSON-RPC 2.0 success response. The id echoes the request's id."""

    jsonrpc: Literal["2.0"]
    id: RequestId
    result: Any


class ErrorResponse(TypedDict):
    """JSON-RPC 2.0 error response.

    The id is None only when the error could not be tied to a request, e.g.
    the payload failed to parse.
    """

    jsonrpc: Literal["2.0"]
    id: RequestId | None
    error: ErrorObject


Response = SuccessResponse | ErrorResponse


class ErrorKind(Enum):
    """The five reserved JSON-RPC error codes and their fixed messages."""

    PARSE_ERROR = (-32700, "Parse error")
    INVALID_REQUEST = (-32600, "Invalid Request")
    METHOD_NOT_FOUND = (-32601, "Method not found")
    INVALID_PARAMS = (-32602, "Invalid params")
    INTERNAL_ERROR = (-32603, "Internal error")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class MessageKind(str, Enum):
    """Shape a decoded value was classified as."""

    REQUEST = "request"
    NOTIFICATION = "notification"
    SUCCESS_RESPONSE = "success_response"
    ERROR_RESPONSE = "error_response"
