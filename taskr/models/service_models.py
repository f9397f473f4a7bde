"""Pydantic models for service layer inputs and return types.

Commands carry the raw input of a use case; TaskDTO is the string-rendered
projection of a task handed to presentation layers.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from taskr.core.errors import MissingDueDateError
from taskr.domain.task import Task
from taskr.domain.value_objects import Category, Priority, Status


class CreateTaskCommand(BaseModel):
    """Input for creating a task."""

    title: str = Field(..., description="Task title")
    description: str = Field(default="", description="Detailed task description")
    priority: Priority = Field(..., description="Task priority")
    category: Category = Field(..., description="Task category")
    due_date: datetime | None = Field(default=None, description="Optional deadline")


class FindTaskCommand(BaseModel):
    """Input for looking up a task."""

    task_id: str = Field(..., description="ID of the task to find")


class UpdateTaskCommand(BaseModel):
    """Input for moving a task through its lifecycle or changing its priority."""

    task_id: str = Field(..., description="ID of the task to update")
    priority: Priority | None = Field(default=None, description="New priority, if changing")
    status: Status | None = Field(default=None, description="New status, if changing")

    @field_validator("status")
    @classmethod
    def validate_status_reachable(cls, v: Status | None) -> Status | None:
        """Validate the requested status can be reached by a transition."""
        if v == Status.TODO:
            raise ValueError("Tasks cannot be moved back to Todo")
        return v


class DeleteTaskCommand(BaseModel):
    """Input for deleting a task."""

    task_id: str = Field(..., description="ID of the task to delete")


class TaskDTO(BaseModel):
    """Task rendered as display strings."""

    id: str
    title: str
    description: str
    priority: str
    category: str
    due_date: str
    status: str

    @classmethod
    def from_task(cls, task: Task) -> "TaskDTO":
        """Render a task that has a due date.

        Raises:
            MissingDueDateError: If the task has no due date
        """
        if task.due_date is None:
            raise MissingDueDateError(task.id)

        return cls(
            id=str(task.id),
            title=str(task.title),
            description=str(task.description),
            priority=str(task.priority),
            category=str(task.category),
            due_date=str(task.due_date),
            status=str(task.status),
        )
