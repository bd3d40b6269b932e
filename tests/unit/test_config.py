"""Unit tests for rpcwire.config."""

import json

import pytest
from pydantic import ValidationError

from rpcwire.config.loader import load_config, load_config_optional
from rpcwire.config.schema import ClientConfig, Config, DispatcherConfig, LoggingConfig
from rpcwire.core.errors import ConfigError, LoadError


class TestSchema:
    """Tests for the pydantic models."""

    def test_defaults(self):
        """Config() has a default for every section."""
        config = Config()
        assert config.dispatcher.strict_method_handling is True
        assert config.client.call_timeout is None
        assert config.logging.level == "INFO"

    def test_sections_are_independent(self):
        """Default sections are not shared between instances."""
        assert Config().dispatcher is not Config().dispatcher

    def test_rejects_unknown_keys(self):
        """Unknown keys fail validation."""
        with pytest.raises(ValidationError):
            DispatcherConfig(strict=False)

    def test_rejects_non_positive_timeout(self):
        """call_timeout must be positive."""
        with pytest.raises(ValidationError):
            ClientConfig(call_timeout=0)
        assert ClientConfig(call_timeout=2.5).call_timeout == 2.5

    def test_rejects_unknown_level(self):
        """Only the standard level names are accepted."""
        with pytest.raises(ValidationError, match="Input should be"):
            LoggingConfig(level="VERBOSE")


class TestLoadConfig:
    """Tests for load_config()."""

    def test_no_path_returns_defaults(self):
        """No path means pydantic defaults."""
        assert load_config() == Config()

    def test_loads_file(self, tmp_path):
        """A valid file is loaded and validated."""
        path = tmp_path / "rpcwire.json"
        path.write_text(
            json.dumps(
                {
                    "dispatcher": {"strict_method_handling": False},
                    "client": {"call_timeout": 30},
                    "logging": {"level": "DEBUG"},
                }
            )
        )

        config = load_config(path)

        assert config.dispatcher.strict_method_handling is False
        assert config.client.call_timeout == 30.0
        assert config.logging.level == "DEBUG"

    def test_empty_file_is_defaults(self, tmp_path):
        """An empty file loads as defaults."""
        path = tmp_path / "rpcwire.json"
        path.write_text("")
        assert load_config(path) == Config()

    def test_bom_is_tolerated(self, tmp_path):
        """A UTF-8 BOM does not break parsing."""
        path = tmp_path / "rpcwire.json"
        path.write_bytes(b"\xef\xbb\xbf" + b'{"client": {"call_timeout": 1}}')
        assert load_config(path).client.call_timeout == 1.0

    def test_missing_file(self, tmp_path):
        """A given path that doesn't exist is an error."""
        with pytest.raises(LoadError, match="Config file not found"):
            load_config(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        """Invalid JSON is a ConfigError."""
        path = tmp_path / "rpcwire.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_non_object(self, tmp_path):
        """A JSON array is rejected."""
        path = tmp_path / "rpcwire.json"
        path.write_text("[]")
        with pytest.raises(ConfigError, match="Expected object"):
            load_config(path)

    def test_undecodable_file(self, tmp_path):
        """Bytes that are not UTF-8 are a LoadError."""
        path = tmp_path / "rpcwire.json"
        path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(LoadError, match="Failed to read config file"):
            load_config(path)

    def test_directory_is_not_a_file(self, tmp_path):
        """A directory path is reported as a missing config file."""
        with pytest.raises(LoadError, match="Config file not found"):
            load_config(tmp_path)

    def test_load_errors_are_config_errors(self, tmp_path):
        """Callers can catch every loading failure as ConfigError."""
        path = tmp_path / "rpcwire.json"
        path.write_text("[]")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert isinstance(exc_info.value, LoadError)

    def test_validation_failure(self, tmp_path):
        """Schema violations are reported as ConfigError."""
        path = tmp_path / "rpcwire.json"
        path.write_text('{"dispatcher": {"strict_method_handling": "sometimes"}}')
        with pytest.raises(ConfigError, match="Config validation failed"):
            load_config(path)


class TestLoadConfigOptional:
    """Tests for load_config_optional()."""

    def test_missing_file_is_defaults(self, tmp_path):
        """A missing file falls back to defaults."""
        assert load_config_optional(tmp_path / "absent.json") == Config()

    def test_existing_file_is_loaded(self, tmp_path):
        """An existing file is validated like load_config()."""
        path = tmp_path / "rpcwire.json"
        path.write_text('{"dispatcher": {"strict_method_handling": false}}')
        assert load_config_optional(path).dispatcher.strict_method_handling is False

    def test_invalid_file_still_fails(self, tmp_path):
        """An existing but invalid file is still an error."""
        path = tmp_path / "rpcwire.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config_optional(path)
