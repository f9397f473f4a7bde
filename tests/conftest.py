"""Pytest configuration and shared fixtures."""

import pytest

from taskr.core.config import Settings
from taskr.core.logging import configure_logfire


@pytest.fixture(scope="session", autouse=True)
def _configure_logfire():
    """Configure Logfire once per session, without console output or export."""
    configure_logfire(config=Settings(logfire_token=None, environment="test"), console=False)
