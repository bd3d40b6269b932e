"""JSON-RPC 2.0 message model, factory and server-side dispatch.

Example usage:
    from rpcwire.rpc import Dispatcher

    dispatcher = Dispatcher({"ping": lambda params, context: "pong"})
    reply = await dispatcher.handle_text('{"jsonrpc":"2.0","method":"ping","id":1}')
    # '{"jsonrpc":"2.0","id":1,"result":"pong"}'
"""

from rpcwire.rpc.classify import (
    classify,
    is_error_object,
    is_error_response,
    is_notification,
    is_request,
    is_response,
    is_success_response,
    is_valid_payload,
)
from rpcwire.rpc.dispatch_core import error_object_from_exception, process_element
from rpcwire.rpc.dispatcher import Dispatcher
from rpcwire.rpc.errors import InvalidParamsError, JsonRpcError
from rpcwire.rpc.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    ParseError,
    decode_payload,
    make_error,
    make_error_response,
    make_notification,
    make_request,
    make_standard_error,
    make_success_response,
    serialize_message,
)
from rpcwire.rpc.types import (
    JSONRPC_VERSION,
    MISSING,
    ErrorKind,
    ErrorObject,
    ErrorResponse,
    MessageKind,
    Notification,
    Request,
    RequestId,
    Response,
    SuccessResponse,
)

__all__ = [
    # Types
    "JSONRPC_VERSION",
    "MISSING",
    "ErrorKind",
    "ErrorObject",
    "ErrorResponse",
    "MessageKind",
    "Notification",
    "Request",
    "RequestId",
    "Response",
    "SuccessResponse",
    # Classification
    "classify",
    "is_error_object",
    "is_error_response",
    "is_notification",
    "is_request",
    "is_response",
    "is_success_response",
    "is_valid_payload",
    # Factory and codec
    "make_error",
    "make_error_response",
    "make_notification",
    "make_request",
    "make_standard_error",
    "make_success_response",
    "decode_payload",
    "serialize_message",
    # Error codes
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
    # Dispatch
    "Dispatcher",
    "error_object_from_exception",
    "process_element",
    # Exceptions
    "InvalidParamsError",
    "JsonRpcError",
    "ParseError",
]
