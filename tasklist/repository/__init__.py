"""Repository package for database access.

Exports:
- `TaskRepository`, the sole mediator between Task objects and the store.
"""

from .tasks import TaskRepository

__all__ = [
    "TaskRepository",
]
