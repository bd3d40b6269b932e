"""JSON-RPC payload dispatcher for rpcwire servers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from rpcwire.config.schema import DispatcherConfig
from rpcwire.core.interfaces import Handler, RpcLogger
from rpcwire.core.log import get_default_logger
from rpcwire.rpc.classify import is_valid_payload
from rpcwire.rpc.dispatch_core import process_element
from rpcwire.rpc.protocol import (
    ParseError,
    decode_payload,
    make_error_response,
    make_standard_error,
    serialize_message,
)
from rpcwire.rpc.types import ErrorKind, Response

H = TypeVar("H", bound=Callable[..., Any])


class Dispatcher:
    """Turns incoming JSON-RPC payloads into responses.

    The dispatcher is stateless across payloads. Each call to
    handle_request() parses and validates one payload, runs the handlers it
    names, and returns a single response, a list of responses for a batch,
    or None when nothing should be sent back.

    Example:
        dispatcher = Dispatcher()

        @dispatcher.method("add")
        def add(params, context):
            return params["a"] + params["b"]

        response = await dispatcher.handle_request(
            '{"jsonrpc":"2.0","method":"add","params":{"a":1,"b":2},"id":1}'
        )
        # {"jsonrpc": "2.0", "id": 1, "result": 3}
    """

    def __init__(
        self,
        handlers: Mapping[str, Handler] | None = None,
        *,
        strict_method_handling: bool = True,
        logger: RpcLogger | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            handlers: Mapping of method names to handlers. Names match
                exactly and case-sensitively.
            strict_method_handling: If True (default), requests for unknown
                methods get a Method not found error. If False they are
                logged and dropped without a response, which leaves the
                calling client waiting indefinitely.
            logger: Logging collaborator. Defaults to the rpcwire stderr logger.
        """
        self._handlers: dict[str, Handler] = dict(handlers or {})
        self._strict_method_handling = strict_method_handling
        self._logger: RpcLogger = logger or get_default_logger(__name__)

    @classmethod
    def from_config(
        cls,
        handlers: Mapping[str, Handler] | None,
        config: DispatcherConfig,
        logger: RpcLogger | None = None,
    ) -> Dispatcher:
        """Create a dispatcher from a validated DispatcherConfig."""
        return cls(
            handlers,
            strict_method_handling=config.strict_method_handling,
            logger=logger,
        )

    @property
    def strict_method_handling(self) -> bool:
        return self._strict_method_handling

    @property
    def methods(self) -> Mapping[str, Handler]:
        """Read-only view of the registered handlers."""
        return MappingProxyType(self._handlers)

    def register(self, name: str, handler: Handler) -> None:
        """Register (or replace) the handler for a method name."""
        self._handlers[name] = handler

    def method(self, name: str | None = None) -> Callable[[H], H]:
        """Decorator registering a function as a method handler.

        Args:
            name: Method name. Defaults to the function's __name__.
        """

        def register(func: H) -> H:
            self.register(name or func.__name__, func)
            return func

        return register

    async def handle_request(
        self, payload: Any, context: Any = None
    ) -> Response | list[Response] | None:
        """Process one incoming payload.

        Never raises for a bad payload: parse failures, invalid structure,
        empty batches, unknown methods and handler failures all become error
        responses (or None).

        Args:
            payload: Raw JSON text (str or bytes) or an already decoded value.
            context: Opaque value passed to every handler invoked.

        Returns:
            A response for a single request, a list of responses for a
            batch, or None if there is nothing to send back (notifications,
            all-notification batches, non-strict unknown methods).
        """
        try:
            decoded = decode_payload(payload)
        except ParseError as e:
            self._logger.error("JSON-RPC parse error: %s", e)
            return make_error_response(None, make_standard_error(ErrorKind.PARSE_ERROR))

        if not is_valid_payload(decoded):
            self._logger.warning("JSON-RPC invalid request structure: %r", decoded)
            return make_error_response(None, make_standard_error(ErrorKind.INVALID_REQUEST))

        if isinstance(decoded, list):
            if not decoded:
                self._logger.warning("JSON-RPC empty batch request")
                return make_error_response(
                    None, make_standard_error(ErrorKind.INVALID_REQUEST)
                )

            responses: list[Response] = []
            for element in decoded:
                response = await self._process(element, context)
                if response is not None:
                    responses.append(response)
            return responses or None

        return await self._process(decoded, context)

    async def handle_text(self, payload: Any, context: Any = None) -> str | None:
        """Process one payload and return the outcome as JSON text.

        A response whose result or error data has no JSON representation
        (a set, a non-finite float, a self-referencing container) is replaced by an
        Internal error response for the same id. In a batch only the
        offending responses are replaced.

        Returns:
            Compact JSON text, or None if there is nothing to send back.
        """
        outcome = await self.handle_request(payload, context)
        if outcome is None:
            return None
        if isinstance(outcome, list):
            return "[" + ",".join(self._serialize(response) for response in outcome) + "]"
        return self._serialize(outcome)

    def _serialize(self, response: Response) -> str:
        try:
            return serialize_message(response)
        except (TypeError, ValueError, RecursionError) as e:
            self._logger.error(
                "JSON-RPC response serialization error for id %r: %s",
                response["id"],
                e,
                exc_info=True,
            )
            return serialize_message(
                make_error_response(
                    response["id"], make_standard_error(ErrorKind.INTERNAL_ERROR)
                )
            )

    async def _process(self, element: Any, context: Any) -> Response | None:
        return await process_element(
            element,
            self._handlers,
            context,
            strict_method_handling=self._strict_method_handling,
            logger=self._logger,
        )
