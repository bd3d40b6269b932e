"""Structural classification of decoded JSON-RPC values.

Every predicate here is total: it accepts any Python value, including None,
numbers, strings, lists and mappings of any shape, and answers True or False
without raising. Classification looks only at which keys are present and the
types of their values; there is no explicit discriminator on the wire.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from rpcwire.rpc.types import JSONRPC_VERSION, MessageKind


def _is_number(value: Any) -> bool:
    # bool is an int subclass, but JSON true/false are not numbers
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int) and not isinstance(value, bool)


def _is_id(value: Any) -> bool:
    return isinstance(value, str) or _is_number(value)


def _has_version(value: Any) -> bool:
    if not isinstance(value, Mapping):
        return False
    version = value.get("jsonrpc")
    return isinstance(version, str) and version == JSONRPC_VERSION


def _has_method(value: Mapping[str, Any]) -> bool:
    return isinstance(value.get("method"), str)


def is_request(value: Any) -> bool:
    """Return True if value is a request: version, str method, str/number id."""
    return (
        _has_version(value)
        and _has_method(value)
        and "id" in value
        and _is_id(value["id"])
    )


def is_notification(value: Any) -> bool:
    """Return True if value is a notification: a request whose id key is absent."""
    return _has_version(value) and _has_method(value) and "id" not in value


def is_error_object(value: Any) -> bool:
    """Return True if value has a numeric code and a str message."""
    return (
        isinstance(value, Mapping)
        and _is_number(value.get("code"))
        and isinstance(value.get("message"), str)
    )


def is_success_response(value: Any) -> bool:
    """Return True if value carries a result, a str/number id and no error key."""
    return (
        _has_version(value)
        and "result" in value
        and "error" not in value
        and "id" in value
        and _is_id(value["id"])
    )


def is_error_response(value: Any) -> bool:
    """Return True if value carries an error object, an id (may be None) and no result key."""
    return (
        _has_version(value)
        and "error" in value
        and "result" not in value
        and is_error_object(value["error"])
        and "id" in value
        and (value["id"] is None or _is_id(value["id"]))
    )


def is_response(value: Any) -> bool:
    """Return True if value is a success or error response."""
    return is_success_response(value) or is_error_response(value)


def classify(value: Any) -> MessageKind | None:
    """Classify a decoded value into one of the four message shapes.

    Shapes are tried in a fixed order: request, notification, success
    response, error response. The shapes are mutually exclusive, so the order
    only matters for speed.

    Args:
        value: Any decoded JSON value.

    Returns:
        The matching MessageKind, or None if the value is none of them.
    """
    if is_request(value):
        return MessageKind.REQUEST
    if is_notification(value):
        return MessageKind.NOTIFICATION
    if is_success_response(value):
        return MessageKind.SUCCESS_RESPONSE
    if is_error_response(value):
        return MessageKind.ERROR_RESPONSE
    return None


def is_valid_payload(value: Any) -> bool:
    """Return True if value is acceptable input for a dispatcher.

    That is a single request or notification, or a list whose every element
    is one. An empty list passes this check; rejecting empty batches is the
    dispatcher's job.
    """
    if isinstance(value, list):
        return all(is_request(item) or is_notification(item) for item in value)
    return is_request(value) or is_notification(value)
