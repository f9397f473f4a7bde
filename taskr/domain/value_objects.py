"""Task value objects and enums."""

import uuid
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import ConfigDict, RootModel, field_validator


# Constants for validation (UTF-8 bytes)
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


def _utf8_length(value: str) -> int:
    return len(value.encode("utf-8"))


class TaskId(RootModel[str]):
    """Opaque task identifier, unique per task."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def generate(cls) -> "TaskId":
        """Return a new random (UUID4) task identifier."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)


class Title(RootModel[str]):
    """Non-empty task title of at most MAX_TITLE_LENGTH UTF-8 bytes."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def validate_length(cls, v: str) -> str:
        """Validate title is present and not too long."""
        if not v:
            raise ValueError("Title cannot be empty.")

        if _utf8_length(v) > MAX_TITLE_LENGTH:
            raise ValueError(f"Title is too long (max {MAX_TITLE_LENGTH} characters)")

        return v

    def __str__(self) -> str:
        return self.root


class Description(RootModel[str]):
    """Free-form task description of at most MAX_DESCRIPTION_LENGTH UTF-8 bytes."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def validate_length(cls, v: str) -> str:
        """Validate description is not too long."""
        if _utf8_length(v) > MAX_DESCRIPTION_LENGTH:
            raise ValueError(f"Description is too long (max {MAX_DESCRIPTION_LENGTH} characters)")
        return v

    def __str__(self) -> str:
        return self.root


class DueDate(RootModel[datetime]):
    """Task deadline as a UTC instant."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        """Interpret naive datetimes as UTC and convert aware ones to UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)

    def __str__(self) -> str:
        return self.root.isoformat()


class Priority(StrEnum):
    """How urgent a task is."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Category(StrEnum):
    """Which area of life a task belongs to."""

    WORK = "Work"
    PERSONAL = "Personal"
    STUDY = "Study"
    OTHER = "Other"


class Status(StrEnum):
    """Task lifecycle state."""

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
