from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Task:
    """A persisted to-do item.

    ``id`` is assigned by the store on insert and cannot change afterwards.
    Two tasks are equal only when both carry the same id; a task that has
    not been stored yet is equal to nothing but itself.
    """

    __slots__ = ("_id", "name")

    def __init__(self, name: Optional[str] = None, id: Optional[int] = None):
        self._id = id
        self.name = name

    @property
    def id(self) -> Optional[int]:
        return self._id

    def assign_id(self, task_id: int) -> None:
        if self._id is not None:
            raise ValueError(f"{self!r} already has an id")
        self._id = task_id

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Task[id={self._id}, name={self.name}]"


class TaskCreate(BaseModel):
    name: str = Field(..., min_length=1)


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class TaskListView(BaseModel):
    """What the task page renders: the pending input and the current tasks."""

    name: Optional[str] = None
    tasks: Optional[List[TaskOut]] = None
