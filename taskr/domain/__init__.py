"""Domain models, value objects and the repository contract."""

from taskr.domain.repository import TaskRepository
from taskr.domain.service import TaskDomainService
from taskr.domain.task import Task
from taskr.domain.value_objects import (
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    Category,
    Description,
    DueDate,
    Priority,
    Status,
    TaskId,
    Title,
)


__all__ = [
    "MAX_DESCRIPTION_LENGTH",
    "MAX_TITLE_LENGTH",
    "Category",
    "Description",
    "DueDate",
    "Priority",
    "Status",
    "Task",
    "TaskDomainService",
    "TaskId",
    "TaskRepository",
    "Title",
]
