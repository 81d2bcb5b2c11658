"""
Store module for task records.

Provides a thread-safe in-memory table for:
- Creating tasks with monotonically increasing IDs
- Reading single tasks and the full task list
- Replacing and deleting tasks

Usage:
    from backend.src.store import InMemoryTaskStore, TaskNotFoundError

    store = InMemoryTaskStore()
    task = store.create("Title", "Description")

    try:
        store.get(42)
    except TaskNotFoundError:
        ...
"""

from .locks import ReadWriteLock
from .memory import InMemoryTaskStore, TaskNotFoundError, TaskStoreBase
from .schema import Task

__all__ = [
    # Store
    "TaskStoreBase",
    "InMemoryTaskStore",
    "TaskNotFoundError",
    # Models
    "Task",
    # Locking
    "ReadWriteLock",
]
