"""Configuration loading and validation."""

from rpcwire.config.loader import load_config, load_config_optional
from rpcwire.config.schema import ClientConfig, Config, DispatcherConfig, LoggingConfig

__all__ = [
    "ClientConfig",
    "Config",
    "DispatcherConfig",
    "LoggingConfig",
    "load_config",
    "load_config_optional",
]
