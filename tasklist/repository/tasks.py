"""Task repository backed by the SQLite connection pool.

Store errors (``sqlite3.Error``, pool ``TimeoutError``) are not translated
here; callers decide how to handle them.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from ..database_pool import SQLiteConnectionPool
from ..errors import TaskNotFoundError
from ..models import Task

logger = logging.getLogger(__name__)

FIND_ALL_TASKS = "SELECT id, name FROM tasks ORDER BY id"
FIND_TASK_BY_ID = "SELECT id, name FROM tasks WHERE id = ?"
INSERT_TASK = "INSERT INTO tasks (name) VALUES (?)"
DELETE_TASK_BY_ID = "DELETE FROM tasks WHERE id = ?"


def _row_to_task(row: sqlite3.Row) -> Task:
    return Task(name=row["name"], id=row["id"])


class TaskRepository:
    """Sole gateway between Task objects and the ``tasks`` table."""

    def __init__(self, pool: SQLiteConnectionPool):
        self._pool = pool

    def get_all_tasks(self) -> List[Task]:
        logger.info("Finding all tasks.")
        with self._pool.connection() as conn:
            rows = conn.execute(FIND_ALL_TASKS).fetchall()
        return [_row_to_task(row) for row in rows]

    def persist_task(self, task: Task) -> Task:
        """Insert a transient task and give it the id chosen by the store.

        The same instance is returned, now carrying its id.
        """
        logger.info("Persisting the new task %r.", task)
        if task.is_persisted:
            raise ValueError(f"{task!r} is already persisted")
        with self._pool.connection() as conn:
            cursor = conn.execute(INSERT_TASK, (task.name,))
            task.assign_id(cursor.lastrowid)
        return task

    def find_task_by_id(self, task_id: int) -> Optional[Task]:
        logger.info("Finding the task with id %s.", task_id)
        with self._pool.connection() as conn:
            row = conn.execute(FIND_TASK_BY_ID, (task_id,)).fetchone()
        return _row_to_task(row) if row else None

    def remove_task_by_id(self, task_id: int) -> None:
        """Delete the task with ``task_id``.

        Raises:
            TaskNotFoundError: no task has that id
        """
        logger.info("Removing a task %s.", task_id)
        with self._pool.connection() as conn:
            cursor = conn.execute(DELETE_TASK_BY_ID, (task_id,))
            deleted = cursor.rowcount
        if deleted == 0:
            raise TaskNotFoundError(task_id)
