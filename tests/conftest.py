"""Shared pytest fixtures for rpcwire tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger collaborator that records info/warning/error calls."""
    return MagicMock(spec=["info", "warning", "error"])
