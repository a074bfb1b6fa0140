"""Request-scoped controller behind the task list page."""

import logging
import re
import sqlite3
from typing import List, Optional

from ..errors import InvalidIdentifierFormat, TaskNotFoundError
from ..models import Task
from ..repository import TaskRepository

# store unreachable, locked, constraint violations, pool exhausted
PERSISTENCE_ERRORS = (sqlite3.Error, TimeoutError)

SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1
_TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_task_id(raw: Optional[str]) -> int:
    """Parse a task identifier received as text.

    Only an optional sign followed by ASCII digits is accepted, and the
    value must fit a SQLite INTEGER.

    Raises:
        InvalidIdentifierFormat: the text is not such an integer
    """
    if not isinstance(raw, str) or not _TASK_ID_PATTERN.fullmatch(raw):
        raise InvalidIdentifierFormat(raw)
    task_id = int(raw)
    if not SQLITE_INTEGER_MIN <= task_id <= SQLITE_INTEGER_MAX:
        raise InvalidIdentifierFormat(raw)
    return task_id


class TaskList:
    """Holds the pending task name and the last fetched list of tasks.

    One instance serves a single request. No method raises: failures are
    logged and the snapshot simply does not reflect the intended change.
    """

    def __init__(self, repository: TaskRepository, logger: Optional[logging.Logger] = None):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)
        self.name: Optional[str] = None
        self._task_list: Optional[List[Task]] = None

        try:
            self._load_tasks()
        except PERSISTENCE_ERRORS as exc:
            self._logger.error("Error calling get_all_tasks(): %s", exc, extra={"error": repr(exc)})

    @property
    def task_list(self) -> Optional[List[Task]]:
        return self._task_list

    def _load_tasks(self) -> None:
        self._logger.info("Retrieving tasks now...")
        self._task_list = self._repository.get_all_tasks()

    def _refresh(self) -> None:
        try:
            self._load_tasks()
        except PERSISTENCE_ERRORS as exc:
            self._logger.error("Error refreshing task list: %s", exc, extra={"error": repr(exc)})

    def add_task(self) -> None:
        task = Task(self.name)
        try:
            self._repository.persist_task(task)
        except PERSISTENCE_ERRORS as exc:
            self._logger.error(
                "Error creating task %r: %s",
                task,
                exc,
                extra={"task_name": task.name, "error": repr(exc)},
            )
        self.name = None
        self._refresh()

    def delete_task(self, task_id: Optional[str]) -> None:
        try:
            self._repository.remove_task_by_id(parse_task_id(task_id))
        except (InvalidIdentifierFormat, TaskNotFoundError) as exc:
            self._logger.error(
                "Error calling delete_task() for task_id %r: %s",
                task_id,
                exc.message,
                extra={"task_id": task_id, "error": repr(exc)},
            )
        except PERSISTENCE_ERRORS as exc:
            self._logger.error(
                "Error calling delete_task() for task_id %r: %s",
                task_id,
                exc,
                extra={"task_id": task_id, "error": repr(exc)},
            )
        self._refresh()
