"""Tests for service wiring."""

import pytest

from taskr.core.config import Settings
from taskr.domain.value_objects import Category, Priority, Status
from taskr.infrastructure.in_memory_repository import InMemoryTaskRepository
from taskr.main import build_repository, create_services
from taskr.models.service_models import CreateTaskCommand, DeleteTaskCommand, UpdateTaskCommand


@pytest.mark.unit
class TestCreateServices:
    """Tests for create_services and build_repository."""

    def test_build_memory_repository(self):
        """Test the memory backend builds an empty in-memory repository."""
        repository = build_repository(Settings(_env_file=None))

        assert isinstance(repository, InMemoryTaskRepository)
        assert len(repository) == 0

    def test_services_share_one_repository(self):
        """Test a task created by one service is visible to the others."""
        services = create_services(Settings(_env_file=None))

        task = services.create.execute(
            CreateTaskCommand(title="Read book", priority=Priority.LOW, category=Category.STUDY)
        )
        services.update.execute(UpdateTaskCommand(task_id=str(task.id), status=Status.COMPLETED))

        assert services.repository.find_by_id(task.id).status == Status.COMPLETED

        services.delete.execute(DeleteTaskCommand(task_id=str(task.id)))

        assert services.repository.find_all() == []

    def test_each_call_builds_a_fresh_repository(self):
        """Test separate wirings do not share state."""
        first = create_services(Settings(_env_file=None))
        second = create_services(Settings(_env_file=None))

        assert first.repository is not second.repository
