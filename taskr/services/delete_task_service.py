"""Use case: delete a task."""

import logging

from taskr.core.logging import span
from taskr.domain.repository import TaskRepository
from taskr.domain.value_objects import TaskId
from taskr.models.service_models import DeleteTaskCommand


logger = logging.getLogger(__name__)


class DeleteTaskService:
    """Removes tasks from the repository."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, command: DeleteTaskCommand) -> None:
        """Delete a task.

        Raises:
            NotFoundError: If no task is stored under the requested ID
        """
        with span("delete_task_service.execute"):
            self._repository.delete(TaskId(command.task_id))
            logger.info("Deleted task %s", command.task_id)
