# src/taskapp/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..audit.audit_store import AuditStore
from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore
from ..users.user_store import UserStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same fields).
    settings: object

    users: UserStore
    tasks: TaskStore
    audit: AuditStore
    service: TaskService
