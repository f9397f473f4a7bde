"""Error taxonomy and classification utilities for task use cases.

Invalid input is reported through ``pydantic.ValidationError`` raised by the
value objects; every other failure is a ``TaskrError`` subclass defined here.
"""

from enum import Enum

from pydantic import BaseModel, ValidationError


class TaskrError(Exception):
    """Base class for all taskr errors."""


class RepositoryError(TaskrError):
    """A task repository backend failed."""


class NotFoundError(RepositoryError):
    """No task is stored under the requested id."""

    def __init__(self, task_id: object) -> None:
        self.task_id = str(task_id)
        super().__init__(f"Not found TaskId='{self.task_id}'")


class DuplicateIdError(TaskrError):
    """A freshly created task collided with an already stored id."""

    def __init__(self, task_id: object) -> None:
        self.task_id = str(task_id)
        super().__init__(f"Already TaskId='{self.task_id}'")


class MissingDueDateError(TaskrError):
    """A task without a due date was requested where one is required."""

    def __init__(self, task_id: object) -> None:
        self.task_id = str(task_id)
        super().__init__(f"Task '{self.task_id}' has no due date")


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCode:
    """Error codes for specific error conditions."""

    # Input errors
    ERR_VALIDATION = "ERR_VALIDATION"

    # Task errors
    ERR_TASK_NOT_FOUND = "ERR_TASK_NOT_FOUND"
    ERR_DUPLICATE_TASK_ID = "ERR_DUPLICATE_TASK_ID"
    ERR_MISSING_DUE_DATE = "ERR_MISSING_DUE_DATE"

    # Storage errors
    ERR_REPOSITORY = "ERR_REPOSITORY"

    # Generic errors
    ERR_UNKNOWN = "ERR_UNKNOWN"


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


def _first_validation_message(exception: ValidationError) -> str:
    """Return the message of the first validation failure, without pydantic's prefix."""
    errors = exception.errors()
    if not errors:
        return str(exception)
    message = str(errors[0].get("msg", ""))
    return message.removeprefix("Value error, ")


def classify_error_with_response(exception: Exception) -> ErrorResponse:
    """Classify an error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised while executing a use case

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    if isinstance(exception, ValidationError):
        return ErrorResponse(
            code=ErrorCode.ERR_VALIDATION,
            message=_first_validation_message(exception),
            suggestion="Correct the task details and try again.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, NotFoundError):
        return ErrorResponse(
            code=ErrorCode.ERR_TASK_NOT_FOUND,
            message=f"I couldn't find task {exception.task_id}.",
            suggestion="Check the task ID and try again.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, MissingDueDateError):
        return ErrorResponse(
            code=ErrorCode.ERR_MISSING_DUE_DATE,
            message=f"Task {exception.task_id} has no due date.",
            suggestion="Set a due date on the task before viewing its details.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, DuplicateIdError):
        return ErrorResponse(
            code=ErrorCode.ERR_DUPLICATE_TASK_ID,
            message="A task with the same ID already exists.",
            suggestion="Please try again. If the problem persists, contact support.",
            severity=ErrorSeverity.CRITICAL,
        )

    if isinstance(exception, RepositoryError):
        return ErrorResponse(
            code=ErrorCode.ERR_REPOSITORY,
            message="The task store failed to complete the request.",
            suggestion="Please try again later.",
            severity=ErrorSeverity.HIGH,
        )

    return ErrorResponse(
        code=ErrorCode.ERR_UNKNOWN,
        message="An unexpected error occurred.",
        suggestion="Please try again later. If the problem persists, contact support.",
        severity=ErrorSeverity.MEDIUM,
    )
