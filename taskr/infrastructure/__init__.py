"""Task repository backends."""

from taskr.infrastructure.in_memory_repository import InMemoryTaskRepository


__all__ = [
    "InMemoryTaskRepository",
]
