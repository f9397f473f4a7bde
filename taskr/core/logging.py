"""Logging and observability configuration using Pydantic Logfire.

All modules should use Python's standard logging library (logging.getLogger(__name__)).
Logfire is configured once by the composition root (see taskr.main).

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Message", extra={"key": "value"})

Structured logging utilities:
    log_with_context(logger, "warning", "Task not found", task_id="123")
"""

import logging

import logfire

from taskr import __version__
from taskr.core.config import Settings, settings


def configure_logfire(*, config: Settings | None = None, console: bool = True) -> None:
    """Configure Pydantic Logfire with token from environment.

    Args:
        config: Settings to read the token and service labels from (defaults to global settings)
        console: Whether spans and logs are echoed to the console
    """
    config = config or settings
    logfire.configure(
        token=config.logfire_token,
        service_name=config.service_name,
        service_version=__version__,
        environment=config.environment,
        send_to_logfire="if-token-present",
        console=None if console else False,
    )

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def span(name: str) -> logfire.LogfireSpan:
    """Create a custom span for service layer functions.

    Usage:
        with span("create_task_service.execute"):
            # Your service logic here
            pass
    """
    return logfire.span(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: object,
) -> None:
    """Log a message with structured context fields.

    Args:
        logger: Logger instance to use
        level: Log level ("debug", "info", "warning", "error", "critical")
        message: Log message
        **context: Additional context fields (task_id, operation_type, etc.)

    Usage:
        log_with_context(logger, "info", "Task created", task_id="123", operation_type="create")
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)
