"""Use case: change a task's status or priority."""

import logging

from taskr.core.logging import span
from taskr.domain.repository import TaskRepository
from taskr.domain.task import Task
from taskr.domain.value_objects import Priority, Status, TaskId
from taskr.models.service_models import UpdateTaskCommand


logger = logging.getLogger(__name__)


_PRIORITY_TRANSITIONS = {
    Priority.HIGH: Task.mark_high_priority,
    Priority.MEDIUM: Task.mark_medium_priority,
    Priority.LOW: Task.mark_low_priority,
}

_STATUS_TRANSITIONS = {
    Status.IN_PROGRESS: Task.mark_in_progress,
    Status.COMPLETED: Task.mark_completed,
}


class UpdateTaskService:
    """Applies lifecycle and priority transitions to stored tasks."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, command: UpdateTaskCommand) -> Task:
        """Apply the requested transitions and store the new task version.

        Args:
            command: Task ID plus the new priority and/or status

        Returns:
            The stored task after all transitions

        Raises:
            NotFoundError: If no task is stored under the requested ID
        """
        with span("update_task_service.execute"):
            task = self._repository.find_by_id(TaskId(command.task_id))

            if command.priority is not None:
                task = _PRIORITY_TRANSITIONS[command.priority](task)

            if command.status is not None:
                task = _STATUS_TRANSITIONS[command.status](task)

            self._repository.save(task)
            logger.info(
                "Updated task %s (priority: %s, status: %s)",
                command.task_id,
                task.priority,
                task.status,
            )

            return task
