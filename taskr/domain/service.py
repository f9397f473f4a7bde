"""Domain service for rules spanning the task repository."""

from taskr.domain.repository import TaskRepository
from taskr.domain.value_objects import TaskId


class TaskDomainService:
    """Task rules that need the repository rather than a single task."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def existed(self, task_id: TaskId | str) -> bool:
        """Return True if a task is already stored under task_id."""
        if not isinstance(task_id, TaskId):
            task_id = TaskId(task_id)
        return self._repository.exists(task_id)
