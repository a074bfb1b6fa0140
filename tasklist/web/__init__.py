"""Presentation-layer controllers."""

from .task_list import TaskList, parse_task_id

__all__ = ["TaskList", "parse_task_id"]
