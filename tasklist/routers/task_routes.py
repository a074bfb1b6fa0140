"""
Task list endpoints.

Every request builds its own TaskList controller; list, add and delete
always answer with the refreshed view and never fail because of the store.
"""

import sqlite3

from fastapi import APIRouter, Depends, Request

from ..errors import DatabaseError, ErrorCode, TaskNotFoundError
from ..models import TaskCreate, TaskListView, TaskOut
from ..repository import TaskRepository
from ..web import TaskList, parse_task_id

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_repository(request: Request) -> TaskRepository:
    return request.app.state.task_repository


def get_task_list(repository: TaskRepository = Depends(get_task_repository)) -> TaskList:
    return TaskList(repository)


def _render(task_list: TaskList) -> TaskListView:
    tasks = task_list.task_list
    return TaskListView(
        name=task_list.name,
        tasks=None if tasks is None else [TaskOut.model_validate(task) for task in tasks],
    )


@router.get("", response_model=TaskListView)
def list_tasks(task_list: TaskList = Depends(get_task_list)):
    return _render(task_list)


@router.post("", response_model=TaskListView)
def add_task(payload: TaskCreate, task_list: TaskList = Depends(get_task_list)):
    """Add a task named ``payload.name`` and return the refreshed list."""
    task_list.name = payload.name
    task_list.add_task()
    return _render(task_list)


@router.delete("/{task_id}", response_model=TaskListView)
def delete_task(task_id: str, task_list: TaskList = Depends(get_task_list)):
    """Delete by id; unknown or malformed ids leave the list unchanged."""
    task_list.delete_task(task_id)
    return _render(task_list)


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: str, repository: TaskRepository = Depends(get_task_repository)):
    parsed_id = parse_task_id(task_id)
    try:
        task = repository.find_task_by_id(parsed_id)
    except sqlite3.Error as exc:
        raise DatabaseError(
            message="Failed to load task",
            operation="find_task_by_id",
            table_name="tasks",
            error_code=ErrorCode.QUERY_EXECUTION_FAILED,
            cause=exc,
        ) from exc
    if task is None:
        raise TaskNotFoundError(parsed_id)
    return TaskOut.model_validate(task)
