"""Use case: look up a task and render it for display."""

import logging

from taskr.core.errors import MissingDueDateError, NotFoundError
from taskr.core.logging import log_with_context, span
from taskr.domain.repository import TaskRepository
from taskr.domain.value_objects import TaskId
from taskr.models.service_models import FindTaskCommand, TaskDTO


logger = logging.getLogger(__name__)


class FindTaskService:
    """Finds a task by ID and returns its display form."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, command: FindTaskCommand) -> TaskDTO:
        """Find a task and render it as a TaskDTO.

        Args:
            command: ID of the task to find

        Returns:
            The task with every field rendered as a display string

        Raises:
            NotFoundError: If no task is stored under the requested ID
            MissingDueDateError: If the task has no due date to render
        """
        with span("find_task_service.execute"):
            try:
                task = self._repository.find_by_id(TaskId(command.task_id))
            except NotFoundError:
                log_with_context(logger, "warning", "Task not found", task_id=command.task_id)
                raise

            try:
                dto = TaskDTO.from_task(task)
            except MissingDueDateError:
                log_with_context(logger, "warning", "Task has no due date", task_id=command.task_id)
                raise

            logger.info("Found task %s", command.task_id)
            return dto
