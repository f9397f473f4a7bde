"""Task repository contract."""

from abc import ABC, abstractmethod

from taskr.core.errors import NotFoundError
from taskr.domain.task import Task
from taskr.domain.value_objects import TaskId


class TaskRepository(ABC):
    """Abstract task storage.

    Backends own the stored tasks; read operations hand out independent copies,
    so changing a returned task never affects stored state until it is saved.
    Backend-specific failures are raised as taskr.core.errors.RepositoryError.
    """

    @abstractmethod
    def save(self, task: Task) -> None:
        """Insert or overwrite the task stored under task.id."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: TaskId) -> Task:
        """Return the task stored under task_id.

        Raises:
            NotFoundError: If no task is stored under task_id
        """
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Task]:
        """Return every stored task, in no particular order."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: TaskId) -> None:
        """Remove the task stored under task_id.

        Raises:
            NotFoundError: If no task is stored under task_id
        """
        raise NotImplementedError

    def exists(self, task_id: TaskId) -> bool:
        """Return True if a task is stored under task_id."""
        try:
            self.find_by_id(task_id)
        except NotFoundError:
            return False
        return True
