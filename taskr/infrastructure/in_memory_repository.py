"""Pure Python in-memory task repository."""

import logging
import threading

from taskr.core.errors import NotFoundError
from taskr.domain.repository import TaskRepository
from taskr.domain.task import Task
from taskr.domain.value_objects import TaskId


logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """In-memory implementation of TaskRepository.

    Keeps tasks in a dict keyed by TaskId. A single lock guards the dict so a
    save followed by a read always observes the whole saved task. Nothing is
    persisted beyond the lifetime of the instance.
    """

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._tasks: dict[TaskId, Task] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def save(self, task: Task) -> None:
        """Store the task, replacing any task already stored under the same ID.

        Args:
            task: Task to store
        """
        with self._lock:
            replaced = task.id in self._tasks
            self._tasks[task.id] = task.model_copy(deep=True)

        logger.debug("Saved task %s (replaced=%s)", task.id, replaced)

    def find_by_id(self, task_id: TaskId) -> Task:
        """Get a copy of the task stored under task_id.

        Args:
            task_id: ID of the task to retrieve

        Returns:
            The stored task

        Raises:
            NotFoundError: If no task is stored under task_id
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise NotFoundError(task_id)
            return task.model_copy(deep=True)

    def find_all(self) -> list[Task]:
        """Get copies of all stored tasks."""
        with self._lock:
            return [task.model_copy(deep=True) for task in self._tasks.values()]

    def delete(self, task_id: TaskId) -> None:
        """Remove the task stored under task_id.

        Args:
            task_id: ID of the task to remove

        Raises:
            NotFoundError: If no task is stored under task_id
        """
        with self._lock:
            if self._tasks.pop(task_id, None) is None:
                raise NotFoundError(task_id)

        logger.debug("Deleted task %s", task_id)
