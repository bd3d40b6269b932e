"""Client and dispatcher wired together through in-process transports."""

import asyncio
import json

import pytest

from rpcwire.client import CallTimeoutError, JsonRpcClient
from rpcwire.rpc.dispatcher import Dispatcher
from rpcwire.rpc.errors import InvalidParamsError, JsonRpcError


def make_dispatcher(logger, **kwargs) -> Dispatcher:
    dispatcher = Dispatcher(logger=logger, **kwargs)

    @dispatcher.method("math.add")
    def add(params, context):
        if not isinstance(params, dict) or not {"a", "b"} <= params.keys():
            raise InvalidParamsError({"required": ["a", "b"]})
        return params["a"] + params["b"]

    @dispatcher.method("whoami")
    async def whoami(params, context):
        await asyncio.sleep(0)
        return context["user"]

    @dispatcher.method("explode")
    def explode(params, context):
        raise KeyError("internal detail")

    return dispatcher


class TestObjectTransport:
    """The dispatcher is used directly as the client's transport."""

    @pytest.mark.asyncio
    async def test_round_trip(self, mock_logger):
        """Results, application errors and internal errors reach the caller."""
        dispatcher = make_dispatcher(mock_logger)

        async def transport(payload):
            return await dispatcher.handle_request(payload, {"user": "alice"})

        client = JsonRpcClient(transport, logger=mock_logger)

        assert await client.call("math.add", {"a": 2, "b": 3}) == 5
        assert await client.call("whoami") == "alice"

        with pytest.raises(JsonRpcError) as invalid:
            await client.call("math.add", {"a": 2})
        assert invalid.value.code == -32602
        assert invalid.value.data == {"required": ["a", "b"]}

        with pytest.raises(JsonRpcError) as internal:
            await client.call("explode")
        assert internal.value.code == -32603
        assert internal.value.message == "Internal error"

        with pytest.raises(JsonRpcError) as missing:
            await client.call("nope")
        assert missing.value.code == -32601


class TestTextTransport:
    """Messages cross the boundary as JSON text."""

    @pytest.mark.asyncio
    async def test_round_trip_over_text(self, mock_logger):
        """Serialized requests and responses correlate correctly."""
        dispatcher = make_dispatcher(mock_logger)
        received: list[str] = []

        async def transport(payload):
            text = json.dumps(payload)
            received.append(text)
            reply = await dispatcher.handle_text(text, {"user": "bob"})
            return None if reply is None else json.loads(reply)

        client = JsonRpcClient(transport, logger=mock_logger)

        results = await asyncio.gather(
            client.call("math.add", {"a": 1, "b": 1}),
            client.call("whoami"),
        )
        client.notify("math.add", {"a": 0, "b": 0})
        await client.drain()

        assert results == [2, "bob"]
        assert len(received) == 3
        assert "id" not in json.loads(received[-1])

    @pytest.mark.asyncio
    async def test_non_strict_unknown_method_times_out(self, mock_logger):
        """With strict handling off, a call to an unknown method never resolves."""
        dispatcher = make_dispatcher(mock_logger, strict_method_handling=False)

        async def transport(payload):
            return await dispatcher.handle_request(payload, {"user": "carol"})

        client = JsonRpcClient(transport, logger=mock_logger)

        with pytest.raises(CallTimeoutError):
            await client.call("typo", timeout=0.05)
