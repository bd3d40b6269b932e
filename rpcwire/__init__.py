"""rpcwire: transport-agnostic JSON-RPC 2.0 client and server core.

The library builds and classifies JSON-RPC messages, correlates client calls
with their responses, and dispatches server payloads (single or batch) to
handlers. Moving bytes between the two sides is left to the application: the
client takes an async send function and the dispatcher takes a payload and
returns what to send back.

Example usage:
    from rpcwire import Dispatcher, JsonRpcClient

    dispatcher = Dispatcher({"add": lambda params, context: params["a"] + params["b"]})
    client = JsonRpcClient(dispatcher.handle_request)

    assert await client.call("add", {"a": 1, "b": 2}) == 3
"""

from rpcwire.client import CallCancelledError, CallTimeoutError, ClientError, JsonRpcClient
from rpcwire.config import ClientConfig, Config, DispatcherConfig, LoggingConfig, load_config
from rpcwire.core import ConfigError, RpcwireError, configure_logging, get_default_logger
from rpcwire.rpc import (
    MISSING,
    Dispatcher,
    ErrorKind,
    InvalidParamsError,
    JsonRpcError,
    MessageKind,
    ParseError,
    classify,
    is_error_object,
    is_error_response,
    is_notification,
    is_request,
    is_response,
    is_success_response,
    make_error,
    make_error_response,
    make_notification,
    make_request,
    make_standard_error,
    make_success_response,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "JsonRpcClient",
    "ClientError",
    "CallTimeoutError",
    "CallCancelledError",
    # Server
    "Dispatcher",
    # Message model
    "MISSING",
    "ErrorKind",
    "MessageKind",
    "classify",
    "is_error_object",
    "is_error_response",
    "is_notification",
    "is_request",
    "is_response",
    "is_success_response",
    # Factory
    "make_error",
    "make_error_response",
    "make_notification",
    "make_request",
    "make_standard_error",
    "make_success_response",
    # Errors
    "RpcwireError",
    "ConfigError",
    "JsonRpcError",
    "InvalidParamsError",
    "ParseError",
    # Configuration and logging
    "Config",
    "ClientConfig",
    "DispatcherConfig",
    "LoggingConfig",
    "load_config",
    "configure_logging",
    "get_default_logger",
]
