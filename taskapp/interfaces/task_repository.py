"""
Task repository interface.

Defines the contract between the HTTP layer and task persistence.
"""
from abc import ABC, abstractmethod
from typing import List

from taskapp.models.task import Task


class ITaskRepository(ABC):
    """Namespace-scoped task persistence."""

    @property
    @abstractmethod
    def namespace(self) -> str:
        """Namespace every operation is restricted to."""

    @abstractmethod
    async def list(self) -> List[Task]:
        """Return every task in the namespace, oldest first."""

    @abstractmethod
    async def add(self, description: str) -> Task:
        """Create a task and return it with its store-assigned id."""

    @abstractmethod
    async def mark_done(self, task_id: str) -> None:
        """Set ``done`` to True for the given task."""

    @abstractmethod
    async def mark_undone(self, task_id: str) -> None:
        """Set ``done`` to False for the given task."""

    @abstractmethod
    async def delete(self, task_id: str) -> None:
        """Remove the given task. Unknown ids are not an error."""

    @abstractmethod
    def close(self) -> None:
        """Release the store connection."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
