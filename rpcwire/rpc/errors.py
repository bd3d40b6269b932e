"""JSON-RPC exceptions.

JsonRpcError is the bridge between Python exceptions and JSON-RPC error
objects in both directions: the client raises it when an error response
arrives, and handlers raise it to send an application-defined error.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rpcwire.core.errors import RpcwireError
from rpcwire.rpc.protocol import make_error
from rpcwire.rpc.types import MISSING, ErrorKind, ErrorObject


class JsonRpcError(RpcwireError):
    """A JSON-RPC error object carried as an exception.

    Attributes:
        code: JSON-RPC error code.
        message: Error message.
        data: Additional error data, or None if the error carried none.
    """

    def __init__(self, code: int, message: str, data: Any = MISSING) -> None:
        super().__init__(message)
        self.code = code
        self._data = data

    @property
    def data(self) -> Any:
        return None if self._data is MISSING else self._data

    @property
    def has_data(self) -> bool:
        """True if the error carried a data member (even a null one)."""
        return self._data is not MISSING

    def to_error_object(self) -> ErrorObject:
        """Return the wire error object; data is omitted if it was never given."""
        return make_error(self.code, self.message, self._data)

    @classmethod
    def from_error_object(cls, error: Mapping[str, Any]) -> JsonRpcError:
        """Build an exception from a wire error object."""
        return cls(error["code"], error["message"], error.get("data", MISSING))

    def __repr__(self) -> str:
        data = f", data={self._data!r}" if self.has_data else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{data})"


class InvalidParamsError(JsonRpcError):
    """Raised by handlers when method parameters are invalid."""

    def __init__(self, data: Any = MISSING) -> None:
        super().__init__(ErrorKind.INVALID_PARAMS.code, ErrorKind.INVALID_PARAMS.message, data)
