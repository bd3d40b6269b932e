"""Typed exception hierarchy for rpcwire."""

from __future__ import annotations


class RpcwireError(Exception):
    """Base class for all rpcwire errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(RpcwireError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class LoadError(ConfigError):
    """Raised when a config file is missing, unreadable or not a JSON object."""
