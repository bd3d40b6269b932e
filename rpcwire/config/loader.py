"""Configuration loading with fail-fast behavior.

A missing path means "use defaults". A path that is given must exist,
contain a JSON object and validate against :class:`Config`; anything else is
a ConfigError rather than a silent fallback. Problems with the file itself
raise LoadError, a ConfigError subclass.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rpcwire.config.schema import Config
from rpcwire.core.errors import ConfigError, LoadError

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None) -> Config:
    """Load and validate configuration.

    Args:
        path: Config file path. If None, returns the pydantic defaults.

    Returns:
        Validated Config object.

    Raises:
        LoadError: If the file doesn't exist, can't be read or doesn't hold a
            JSON object.
        ConfigError: If the contents fail validation.
    """
    if path is None:
        logger.debug("No config path given, using Pydantic defaults")
        return Config()

    if not path.is_file():
        raise LoadError(f"Config file not found: {path}")
    return _validate(_read_object(path), path)


def load_config_optional(path: Path) -> Config:
    """Load configuration from path if the file exists, else defaults.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    if not path.is_file():
        logger.debug("Config file not found, using defaults: %s", path)
        return Config()
    return _validate(_read_object(path), path)


def _read_object(path: Path) -> dict[str, Any]:
    # utf-8-sig tolerates editors that write a BOM; blank means "all defaults"
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Failed to read config file {path}: {e}") from e

    if not text.strip():
        return {}

    try:
        data = json.loads(text)
    except ValueError as e:
        raise LoadError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise LoadError(
            f"Expected object in config file {path}, got {type(data).__name__}"
        )
    return data


def _validate(data: dict[str, Any], path: Path) -> Config:
    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {path}: {e}") from e
    logger.info("Config loaded from: %s", path)
    return config
