"""Use case: create a task."""

import logging

from taskr.core.errors import DuplicateIdError
from taskr.core.logging import log_with_context, span
from taskr.domain.repository import TaskRepository
from taskr.domain.service import TaskDomainService
from taskr.domain.task import Task
from taskr.models.service_models import CreateTaskCommand


logger = logging.getLogger(__name__)


class CreateTaskService:
    """Creates tasks and stores them in the repository."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository
        self._domain_service = TaskDomainService(repository)

    def execute(self, command: CreateTaskCommand) -> Task:
        """Create a new task in the Todo state.

        Args:
            command: Title, description, priority, category and optional due date

        Returns:
            The created and stored task

        Raises:
            pydantic.ValidationError: If the title or description is invalid
                (raised before the repository is touched)
            DuplicateIdError: If the generated ID is already stored
            RepositoryError: If the repository fails to store the task
        """
        with span("create_task_service.execute"):
            task = Task.create(
                title=command.title,
                description=command.description,
                priority=command.priority,
                category=command.category,
                due_date=command.due_date,
            )

            if self._domain_service.existed(task.id):
                log_with_context(logger, "error", "Generated task ID already stored", task_id=str(task.id))
                raise DuplicateIdError(task.id)

            self._repository.save(task)
            logger.info("Created task: %s (id: %s)", task.title, task.id)

            return task
