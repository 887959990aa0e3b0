# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ..users.user_models import User


class TaskStatus(IntEnum):
    """
    Task lifecycle status.

    Notes:
    - values are what tasks.csv / logs.csv store
    - the only legal moves are one step forward: 0 -> 1 -> 2
    """

    UNSTARTED = 0
    IN_PROGRESS = 1
    DONE = 2


@dataclass(slots=True)
class Task:
    code: int
    name: str
    status: TaskStatus
    assignee_code: int

    # Resolved from users.csv at read time (None when the code no longer resolves).
    assignee: User | None = None


@dataclass(frozen=True, slots=True)
class TaskView:
    """Read-only row for task listings."""

    task: Task
    assignee_name: str
    is_mine: bool
