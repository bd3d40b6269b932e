"""Core errors, interfaces and logging setup."""

from rpcwire.core.errors import ConfigError, LoadError, RpcwireError
from rpcwire.core.interfaces import Handler, RpcLogger, Transport
from rpcwire.core.log import LOGGER_NAMESPACE, configure_logging, get_default_logger

__all__ = [
    "RpcwireError",
    "ConfigError",
    "LoadError",
    "Handler",
    "RpcLogger",
    "Transport",
    "LOGGER_NAMESPACE",
    "configure_logging",
    "get_default_logger",
]
