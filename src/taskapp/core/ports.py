# src/taskapp/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the lifecycle service.

The service depends on Protocols instead of the CSV stores,
so tests can drive it with in-memory repositories.
"""

from typing import Protocol

from ..audit.audit_models import LogEntry
from ..tasks.task_models import Task
from ..users.user_models import User


class UserRepo(Protocol):
    def find_by_code(self, code: int) -> User | None: ...
    def find_by_email_and_password(self, email: str, password: str) -> User | None: ...
    def find_all(self) -> list[User]: ...


class TaskRepo(Protocol):
    def find_all(self) -> list[Task]: ...
    def find_by_code(self, code: int) -> Task | None: ...
    def save(self, task: Task) -> None: ...
    def update(self, task: Task) -> None: ...


class AuditRepo(Protocol):
    # Append-only.
    def save(self, entry: LogEntry) -> None: ...
