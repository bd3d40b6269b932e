"""Pydantic models for rpcwire configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DispatcherConfig(BaseModel):
    """Configuration for the server-side Dispatcher.

    Example in config.json:
        "dispatcher": {
            "strict_method_handling": false
        }
    """

    model_config = ConfigDict(extra="forbid")

    strict_method_handling: bool = True
    """Answer requests for unknown methods with Method not found.

    When False, such requests are logged and dropped without any response,
    so a client awaiting them never completes.
    """


class ClientConfig(BaseModel):
    """Configuration for the JsonRpcClient.

    Example in config.json:
        "client": {
            "call_timeout": 30.0
        }
    """

    model_config = ConfigDict(extra="forbid")

    call_timeout: float | None = Field(default=None, gt=0)
    """Default deadline in seconds for call(). None waits indefinitely."""


class LoggingConfig(BaseModel):
    """Configuration for the rpcwire namespace logger."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    """Minimum level written to the stream."""

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    """logging.Formatter format string."""

    datefmt: str = "%H:%M:%S"
    """logging.Formatter date format."""


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    dispatcher: DispatcherConfig = Field(default_factory=DispatcherConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
