"""Unit test fixtures."""

from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from hephy_limits import CommanderProtocol


@pytest.fixture
def commander() -> MagicMock:
    """Fake commander recording every call."""
    return MagicMock(spec=CommanderProtocol)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration environment variables out of tests."""
    monkeypatch.delenv("DEIS_LIMITS_OUTPUT", raising=False)
    monkeypatch.delenv("DEIS_LIMITS_LOG_LEVEL", raising=False)
