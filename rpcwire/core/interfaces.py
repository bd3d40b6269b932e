"""Core interfaces (protocols) for rpcwire.

The client and dispatcher never depend on concrete implementations of their
collaborators. A transport, a handler and a logger are all described here as
Protocols so that plain functions, ``unittest.mock`` objects and
``logging.Logger`` instances satisfy them structurally.
"""

from collections.abc import Awaitable
from typing import Any, Protocol


class RpcLogger(Protocol):
    """Protocol for the logging collaborator.

    A ``logging.Logger`` satisfies this protocol. Arguments follow the
    ``logging`` calling convention: a printf-style message, its arguments,
    and keyword options such as ``exc_info``.

    Example:
        class PrintLogger:
            def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
                print("INFO", msg % args)

            def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
                print("WARN", msg % args)

            def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
                print("ERROR", msg % args)
    """

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


class Transport(Protocol):
    """Protocol for the client's send function.

    Receives a request, a notification, or a list of them, and resolves to a
    response or a list of responses. Failures must be raised, never returned
    as a malformed success value.

    Example:
        async def send(payload):
            async with httpx.AsyncClient() as http:
                reply = await http.post(url, json=payload)
                return reply.json()
    """

    def __call__(self, payload: Any, /) -> Awaitable[Any]: ...


class Handler(Protocol):
    """Protocol for a method handler.

    Called with the request's ``params`` (None when omitted) and the opaque
    context passed to ``Dispatcher.handle_request``. May return a value or an
    awaitable resolving to one.
    """

    def __call__(self, params: Any, context: Any, /) -> Any: ...
