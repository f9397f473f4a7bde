"""Task aggregate root."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from taskr.domain.value_objects import Category, Description, DueDate, Priority, Status, TaskId, Title


class Task(BaseModel):
    """Task entity.

    Tasks are immutable: transitions return a new version of the task with a
    single field changed, and the repository stores whichever version is saved.
    """

    model_config = ConfigDict(frozen=True)

    id: TaskId = Field(..., description="Unique task ID")
    title: Title = Field(..., description="Task title")
    description: Description = Field(..., description="Detailed task description")
    priority: Priority = Field(..., description="High, Medium or Low")
    category: Category = Field(..., description="Work, Personal, Study or Other")
    due_date: DueDate | None = Field(default=None, description="Optional deadline (UTC)")
    status: Status = Field(default=Status.TODO, description="Current lifecycle state")

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        priority: Priority,
        category: Category,
        due_date: datetime | None = None,
    ) -> "Task":
        """Create a new task in the Todo state with a freshly generated ID.

        Args:
            title: Task title (1-100 characters)
            description: Task description (up to 500 characters, may be empty)
            priority: Task priority
            category: Task category
            due_date: Optional deadline; naive datetimes are treated as UTC

        Returns:
            The new task

        Raises:
            pydantic.ValidationError: If the title or description is invalid
                (the title is checked first)
        """
        # Validate in order so title errors win over description errors
        valid_title = Title(title)
        valid_description = Description(description)

        return cls(
            id=TaskId.generate(),
            title=valid_title,
            description=valid_description,
            priority=priority,
            category=category,
            due_date=DueDate(due_date) if due_date is not None else None,
            status=Status.TODO,
        )

    def mark_in_progress(self) -> "Task":
        """Return a copy of this task in the InProgress state."""
        return self.model_copy(update={"status": Status.IN_PROGRESS})

    def mark_completed(self) -> "Task":
        """Return a copy of this task in the Completed state."""
        return self.model_copy(update={"status": Status.COMPLETED})

    def mark_high_priority(self) -> "Task":
        """Return a copy of this task with High priority."""
        return self.model_copy(update={"priority": Priority.HIGH})

    def mark_medium_priority(self) -> "Task":
        """Return a copy of this task with Medium priority."""
        return self.model_copy(update={"priority": Priority.MEDIUM})

    def mark_low_priority(self) -> "Task":
        """Return a copy of this task with Low priority."""
        return self.model_copy(update={"priority": Priority.LOW})
