"""Unit tests for the rpcwire exception hierarchy."""

from rpcwire.client import CallCancelledError, CallTimeoutError, ClientError
from rpcwire.core.errors import ConfigError, LoadError, RpcwireError
from rpcwire.rpc.errors import InvalidParamsError, JsonRpcError
from rpcwire.rpc.protocol import ParseError
from rpcwire.rpc.types import MISSING


class TestRpcwireError:
    """Tests for RpcwireError base class."""

    def test_accepts_message(self):
        """RpcwireError stores its message."""
        err = RpcwireError("Something went wrong")
        assert err.message == "Something went wrong"
        assert str(err) == "Something went wrong"

    def test_subclasses(self):
        """Every library error can be caught as RpcwireError."""
        for cls in (ConfigError, LoadError, ParseError, JsonRpcError, ClientError):
            assert issubclass(cls, RpcwireError)
        assert issubclass(CallTimeoutError, ClientError)
        assert issubclass(CallCancelledError, ClientError)


class TestJsonRpcError:
    """Tests for JsonRpcError."""

    def test_exposes_code_message_data(self):
        """code, message and data are attributes."""
        err = JsonRpcError(-32001, "custom", {"detail": 1})
        assert err.code == -32001
        assert err.message == "custom"
        assert err.data == {"detail": 1}
        assert err.has_data

    def test_data_defaults_to_none(self):
        """Without data, data reads as None and has_data is False."""
        err = JsonRpcError(-32001, "custom")
        assert err.data is None
        assert not err.has_data

    def test_to_error_object_omits_missing_data(self):
        """The wire object has no data key unless data was given."""
        assert JsonRpcError(-32001, "custom").to_error_object() == {
            "code": -32001,
            "message": "custom",
        }

    def test_to_error_object_keeps_null_data(self):
        """An explicit None data is kept as null."""
        assert JsonRpcError(-32001, "custom", None).to_error_object() == {
            "code": -32001,
            "message": "custom",
            "data": None,
        }

    def test_from_error_object(self):
        """from_error_object restores code, message and data."""
        err = JsonRpcError.from_error_object({"code": 7, "message": "m", "data": [1]})
        assert (err.code, err.message, err.data) == (7, "m", [1])

        bare = JsonRpcError.from_error_object({"code": 7, "message": "m"})
        assert bare.has_data is False

    def test_repr_shows_data_only_when_present(self):
        """repr includes data, even null data, but not absent data."""
        assert repr(JsonRpcError(7, "m")) == "JsonRpcError(code=7, message='m')"
        assert repr(JsonRpcError(7, "m", None)) == (
            "JsonRpcError(code=7, message='m', data=None)"
        )


class TestInvalidParamsError:
    """Tests for InvalidParamsError."""

    def test_fixed_code_and_message(self):
        """InvalidParamsError always carries -32602 / Invalid params."""
        err = InvalidParamsError({"field": "a"})
        assert isinstance(err, JsonRpcError)
        assert err.to_error_object() == {
            "code": -32602,
            "message": "Invalid params",
            "data": {"field": "a"},
        }

    def test_without_data(self):
        """InvalidParamsError without data omits the key."""
        assert "data" not in InvalidParamsError().to_error_object()
        assert InvalidParamsError(MISSING).has_data is False
