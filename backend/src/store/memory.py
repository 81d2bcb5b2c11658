"""
Task Store - In-memory implementation.

Provides TaskStoreBase (the contract the web layer depends on) and
InMemoryTaskStore, a dict-backed table guarded by a reader/writer lock:
- create/update/delete hold the lock exclusively
- get/list_all share the lock with other readers
- callers always receive copies, never the stored records
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List

from .locks import ReadWriteLock
from .schema import Task

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """Raised when an operation targets a task ID that is not stored."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found")


class TaskStoreBase(ABC):
    """
    Base class for task storage.

    Contract:
    - len(store) -> number of stored tasks
    - create(title, description) -> Task
    - list_all() -> list[Task]
    - get(task_id) -> Task
    - update(task_id, title, description, completed) -> Task
    - delete(task_id) -> None

    get/update/delete raise TaskNotFoundError for unknown IDs. Input
    validation (non-empty title etc.) belongs to the caller.
    """

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored tasks."""
        ...

    @abstractmethod
    def create(self, title: str, description: str) -> Task:
        """Store a new task with the next ID and completed=False."""
        ...

    @abstractmethod
    def list_all(self) -> List[Task]:
        """Return every stored task. Callers must not rely on ordering."""
        ...

    @abstractmethod
    def get(self, task_id: int) -> Task:
        """Return the task with the given ID."""
        ...

    @abstractmethod
    def update(self, task_id: int, title: str, description: str, completed: bool) -> Task:
        """Overwrite all mutable fields of a task."""
        ...

    @abstractmethod
    def delete(self, task_id: int) -> None:
        """Remove a task permanently."""
        ...


class InMemoryTaskStore(TaskStoreBase):
    """
    Process-local task table.

    IDs start at 1 and grow by one per create; deleted IDs are never
    handed out again. The table and the ID counter share one lock.

    Usage:
        store = InMemoryTaskStore()
        task = store.create("Buy groceries", "Milk, bread, vegetables")
        store.update(task.id, task.title, task.description, True)
        store.delete(task.id)
    """

    def __init__(self) -> None:
        self._tasks: Dict[int, Task] = {}
        self._last_id = 0
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._tasks)

    def create(self, title: str, description: str) -> Task:
        with self._lock.write():
            self._last_id += 1
            task = Task(id=self._last_id, title=title, description=description, completed=False)
            self._tasks[task.id] = task
            logger.debug("Created task %d", task.id)
            return task.model_copy()

    def list_all(self) -> List[Task]:
        # dict order is an implementation detail; sort for stable output
        with self._lock.read():
            return [self._tasks[task_id].model_copy() for task_id in sorted(self._tasks)]

    def get(self, task_id: int) -> Task:
        with self._lock.read():
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task.model_copy()

    def update(self, task_id: int, title: str, description: str, completed: bool) -> Task:
        with self._lock.write():
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)

            task.title = title
            task.description = description
            task.completed = completed
            logger.debug("Updated task %d (completed=%s)", task_id, completed)
            return task.model_copy()

    def delete(self, task_id: int) -> None:
        with self._lock.write():
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]
            logger.debug("Deleted task %d", task_id)
