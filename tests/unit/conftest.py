"""Pytest configuration and fixtures for unit tests."""

from datetime import UTC, datetime

import pytest

from taskr.domain.task import Task
from taskr.domain.value_objects import Category, Priority
from taskr.infrastructure.in_memory_repository import InMemoryTaskRepository
from taskr.models.service_models import CreateTaskCommand
from taskr.services import CreateTaskService, DeleteTaskService, FindTaskService, UpdateTaskService


DUE = datetime(2030, 1, 15, 9, 30, tzinfo=UTC)


@pytest.fixture
def repository():
    """Provides a fresh InMemoryTaskRepository for each test."""
    return InMemoryTaskRepository()


@pytest.fixture
def task():
    """A valid Todo task with a due date."""
    return Task.create(
        title="Write report",
        description="Quarterly numbers",
        priority=Priority.MEDIUM,
        category=Category.WORK,
        due_date=DUE,
    )


@pytest.fixture
def create_command():
    """A valid create command with a due date."""
    return CreateTaskCommand(
        title="Write report",
        description="Quarterly numbers",
        priority=Priority.MEDIUM,
        category=Category.WORK,
        due_date=DUE,
    )


@pytest.fixture
def create_service(repository):
    """CreateTaskService bound to the test repository."""
    return CreateTaskService(repository)


@pytest.fixture
def find_service(repository):
    """FindTaskService bound to the test repository."""
    return FindTaskService(repository)


@pytest.fixture
def update_service(repository):
    """UpdateTaskService bound to the test repository."""
    return UpdateTaskService(repository)


@pytest.fixture
def delete_service(repository):
    """DeleteTaskService bound to the test repository."""
    return DeleteTaskService(repository)
