"""Async JSON-RPC client that correlates responses with pending calls."""

from __future__ import annotations

import asyncio
from typing import Any

from rpcwire.config.schema import ClientConfig
from rpcwire.core.errors import RpcwireError
from rpcwire.core.interfaces import RpcLogger, Transport
from rpcwire.core.log import get_default_logger
from rpcwire.rpc.classify import is_error_response, is_success_response
from rpcwire.rpc.errors import JsonRpcError
from rpcwire.rpc.protocol import make_notification, make_request
from rpcwire.rpc.types import MISSING, RequestId


class ClientError(RpcwireError):
    """Exception for client-side failures that are not JSON-RPC errors."""


class CallTimeoutError(ClientError):
    """Raised when a call gets no response before its deadline."""


class CallCancelledError(ClientError):
    """Raised to a caller whose pending call was cancelled locally."""


class JsonRpcClient:
    """Transport-agnostic JSON-RPC client.

    Each call() gets the next id from a per-client counter, is registered as
    pending under that id, and is handed to the transport. Whatever the
    transport resolves to (one response or a list of them) is routed by id;
    responses for ids that are not pending are dropped. A transport failure
    rejects the call with the transport's own exception.

    Usage:
        async def transport(payload):
            return await server.handle_request(payload)

        async with JsonRpcClient(transport) as client:
            total = await client.call("add", {"a": 1, "b": 2})
            client.notify("log", {"message": "added"})

    All methods must be used from the event loop the client runs on.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        logger: RpcLogger | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            transport: Async callable sending a message (or list of messages)
                and resolving to the response(s).
            logger: Logging collaborator. Defaults to the rpcwire stderr logger.
            config: Client settings. Defaults to ClientConfig().
        """
        self._transport = transport
        self._logger: RpcLogger = logger or get_default_logger(__name__)
        self._config = config or ClientConfig()
        self._request_id = 0
        self._pending: dict[RequestId, asyncio.Future[Any]] = {}
        self._sends: dict[RequestId, asyncio.Future[None]] = {}
        self._notifications: set[asyncio.Future[None]] = set()

    async def __aenter__(self) -> JsonRpcClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    @property
    def pending_ids(self) -> tuple[RequestId, ...]:
        """Ids of calls still awaiting a response, oldest first."""
        return tuple(self._pending)

    def _next_id(self) -> int:
        self._request_id += 1
        return self._request_id

    async def call(self, method: str, params: Any = MISSING, *, timeout: float | None = None) -> Any:
        """Call a remote method and wait for its result.

        Args:
            method: Method name.
            params: Method parameters. Omitted from the request if not given.
            timeout: Seconds to wait before giving up. Defaults to
                ClientConfig.call_timeout; None waits until a response or a
                transport failure.

        Returns:
            The result member of the matching success response.

        Raises:
            JsonRpcError: If the matching response is an error response.
            CallTimeoutError: If the deadline passes first.
            CallCancelledError: If cancel() was called for this id.
            Exception: Whatever the transport raised, unchanged.
        """
        loop = asyncio.get_running_loop()
        deadline = timeout if timeout is not None else self._config.call_timeout

        request_id = self._next_id()
        request = make_request(method, request_id, params)
        future: asyncio.Future[Any] = loop.create_future()
        self._pending[request_id] = future

        try:
            sent = self._transport(request)
        except Exception as e:
            self._complete(request_id, exception=e)
        else:
            send = asyncio.ensure_future(self._settle(request_id, sent))
            self._sends[request_id] = send
            send.add_done_callback(lambda _: self._sends.pop(request_id, None))

        timer = None
        if deadline is not None:
            timer = loop.call_later(
                deadline,
                self.cancel,
                request_id,
                CallTimeoutError(f"Call to '{method}' timed out after {deadline}s"),
            )

        try:
            return await future
        except BaseException:
            # Stop waiting on the transport once the caller has given up
            send = self._sends.get(request_id)
            if send is not None:
                send.cancel()
            raise
        finally:
            if timer is not None:
                timer.cancel()
            if self._pending.get(request_id) is future:
                del self._pending[request_id]

    def notify(self, method: str, params: Any = MISSING) -> None:
        """Send a notification without waiting for the transport.

        Transport failures are logged and never raised.

        Args:
            method: Method name.
            params: Method parameters. Omitted from the notification if not given.

        Raises:
            RuntimeError: If no event loop is running. The transport is not
                invoked in that case.
        """
        loop = asyncio.get_running_loop()
        notification = make_notification(method, params)
        try:
            sent = self._transport(notification)
        except Exception as e:
            self._logger.warning("JSON-RPC notification transport error: %s", e)
            return

        task = loop.create_task(self._settle_notification(sent))
        self._notifications.add(task)
        task.add_done_callback(self._notifications.discard)

    def receive(self, message: Any) -> None:
        """Route a response, or a list of responses, to pending calls.

        Used internally for whatever the transport returns; call it directly
        for responses that arrive out of band. Values that are not responses,
        responses with a null id, and responses for ids that are not pending
        are ignored.
        """
        if isinstance(message, list):
            for item in message:
                self._route(item)
        else:
            self._route(message)

    def cancel(self, request_id: RequestId, exc: BaseException | None = None) -> bool:
        """Stop waiting for a pending call.

        The caller of that call() is rejected with exc, or with
        CallCancelledError if exc is None. A response arriving later for the
        same id is dropped.

        Returns:
            True if a pending call was cancelled, False if none was pending.
        """
        if exc is None:
            exc = CallCancelledError(f"Call {request_id!r} was cancelled")
        return self._complete(request_id, exception=exc)

    def cancel_all(self, exc: BaseException | None = None) -> int:
        """Cancel every pending call. Returns how many were cancelled."""
        return sum(self.cancel(request_id, exc) for request_id in list(self._pending))

    async def drain(self) -> None:
        """Wait until every notification handed to the transport has settled."""
        if self._notifications:
            await asyncio.gather(*self._notifications, return_exceptions=True)

    async def close(self) -> None:
        """Settle outstanding notifications and reject all pending calls."""
        await self.drain()
        self.cancel_all(ClientError("Client closed"))

    async def _settle(self, request_id: RequestId, sent: Any) -> None:
        try:
            response = await sent
        except Exception as e:
            self._complete(request_id, exception=e)
        else:
            self.receive(response)

    async def _settle_notification(self, sent: Any) -> None:
        try:
            await sent
        except Exception as e:
            self._logger.warning("JSON-RPC notification transport error: %s", e)

    def _route(self, response: Any) -> None:
        if is_success_response(response):
            self._complete(response["id"], result=response["result"])
        elif is_error_response(response) and response["id"] is not None:
            self._complete(
                response["id"],
                exception=JsonRpcError.from_error_object(response["error"]),
            )

    def _complete(
        self,
        request_id: RequestId,
        *,
        result: Any = None,
        exception: BaseException | None = None,
    ) -> bool:
        """Finish a pending call exactly once; later completions are no-ops."""
        future = self._pending.pop(request_id, None)
        if future is None or future.done():
            return False
        if exception is not None:
            future.set_exception(exception)
        else:
            future.set_result(result)
        return True
