"""Tests for configuration validation."""

import pytest
from pydantic import ValidationError

from taskr.core.config import Settings


def test_defaults() -> None:
    """Test settings fall back to the in-memory backend without a Logfire token."""
    settings = Settings(_env_file=None)

    assert settings.repository_backend == "memory"
    assert settings.service_name == "taskr"
    assert settings.logfire_token is None


def test_reads_prefixed_environment(monkeypatch) -> None:
    """Test settings are read from TASKR_ environment variables."""
    monkeypatch.setenv("TASKR_ENVIRONMENT", "staging")
    monkeypatch.setenv("TASKR_LOGFIRE_TOKEN", "token123")

    settings = Settings(_env_file=None)

    assert settings.environment == "staging"
    assert settings.logfire_token == "token123"


def test_unknown_backend_rejected() -> None:
    """Test only known repository backends are accepted."""
    with pytest.raises(ValidationError, match="repository_backend"):
        Settings(_env_file=None, repository_backend="postgres")

