"""taskr composition root: builds the repository and the task use cases."""

import logging
from dataclasses import dataclass

from taskr.core.config import Settings, settings
from taskr.core.logging import configure_logfire
from taskr.domain.repository import TaskRepository
from taskr.infrastructure.in_memory_repository import InMemoryTaskRepository
from taskr.services import CreateTaskService, DeleteTaskService, FindTaskService, UpdateTaskService


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskServices:
    """All task use cases, sharing one repository."""

    repository: TaskRepository
    create: CreateTaskService
    find: FindTaskService
    update: UpdateTaskService
    delete: DeleteTaskService


def build_repository(config: Settings) -> TaskRepository:
    """Build the repository backend selected in settings.

    Raises:
        ValueError: If the configured backend is unknown
    """
    if config.repository_backend == "memory":
        return InMemoryTaskRepository()
    raise ValueError(f"Unsupported repository backend: {config.repository_backend}")


def create_services(config: Settings | None = None) -> TaskServices:
    """Wire every task use case to a single freshly built repository."""
    config = config or settings
    repository = build_repository(config)
    services = TaskServices(
        repository=repository,
        create=CreateTaskService(repository),
        find=FindTaskService(repository),
        update=UpdateTaskService(repository),
        delete=DeleteTaskService(repository),
    )
    logger.info("Task services ready (backend: %s)", config.repository_backend)
    return services


def main() -> TaskServices:
    """Configure logging and wire the task services."""
    configure_logfire()
    return create_services()


if __name__ == "__main__":
    main()
