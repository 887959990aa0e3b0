# audit/audit_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..tasks.task_models import TaskStatus


@dataclass(frozen=True, slots=True)
class LogEntry:
    task_code: int
    # Status the task was set to by this event (UNSTARTED on creation).
    status: TaskStatus
    actor_code: int
    date: date
