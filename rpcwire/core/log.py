"""Logging configuration for rpcwire.

Everything in the library logs under the ``rpcwire`` namespace logger. The
client and dispatcher take a logger collaborator at construction time; when
none is given they use :func:`get_default_logger`, which writes to stderr.

Usage:
    from rpcwire.core.log import configure_logging
    from rpcwire.config.schema import LoggingConfig

    configure_logging(LoggingConfig(level="DEBUG"))
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rpcwire.config.schema import LoggingConfig

LOGGER_NAMESPACE = "rpcwire"


def configure_logging(
    config: LoggingConfig | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Install a stream handler on the rpcwire namespace logger.

    Existing handlers are removed first, so calling this again reconfigures
    instead of duplicating output.

    Args:
        config: Level and format. Defaults to ``LoggingConfig()`` (INFO).
        stream: Destination stream. Defaults to ``sys.stderr``.

    Returns:
        The configured namespace logger.
    """
    config = config or LoggingConfig()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.datefmt))

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(config.level)

    # Remove any existing handlers to avoid duplicates on reconfigure
    namespace_logger.handlers.clear()
    namespace_logger.addHandler(handler)

    # Don't propagate to root logger
    namespace_logger.propagate = False

    return namespace_logger


def get_default_logger(name: str = LOGGER_NAMESPACE) -> logging.Logger:
    """Return a logger under the rpcwire namespace that reaches stderr.

    If the namespace logger has not been configured yet, it is configured
    with defaults first.

    Args:
        name: Logger name; must be ``rpcwire`` or a dotted child of it.

    Returns:
        The requested logger.
    """
    if name != LOGGER_NAMESPACE and not name.startswith(LOGGER_NAMESPACE + "."):
        raise ValueError(f"Logger name must be under {LOGGER_NAMESPACE!r}, got: {name!r}")

    if not logging.getLogger(LOGGER_NAMESPACE).handlers:
        configure_logging()
    return logging.getLogger(name)
