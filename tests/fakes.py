# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field, replace

from taskapp.audit.audit_models import LogEntry
from taskapp.core.errors import StorageError
from taskapp.tasks.task_models import Task
from taskapp.users.user_models import User


class FakeUserRepo:
    """In-memory UserRepo."""

    def __init__(self, users: list[User]) -> None:
        self.users = list(users)

    def find_by_code(self, code: int) -> User | None:
        return next((u for u in self.users if u.code == code), None)

    def find_by_email_and_password(self, email: str, password: str) -> User | None:
        return next(
            (u for u in self.users if u.email == email and u.password == password), None
        )

    def find_all(self) -> list[User]:
        return list(self.users)


@dataclass(slots=True)
class FakeTaskRepo:
    """
    In-memory TaskRepo.

    Keeps rows in insertion order and records which method wrote them,
    so tests can assert save vs update.
    """

    rows: list[Task] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)

    def find_all(self) -> list[Task]:
        return [replace(t) for t in self.rows]

    def find_by_code(self, code: int) -> Task | None:
        for t in self.rows:
            if t.code == code:
                return replace(t)
        return None

    def save(self, task: Task) -> None:
        self.calls.append("save")
        self.rows.append(replace(task))

    def update(self, task: Task) -> None:
        self.calls.append("update")
        for i, t in enumerate(self.rows):
            if t.code == task.code:
                self.rows[i] = replace(task)
                return
        self.rows.append(replace(task))


@dataclass(slots=True)
class FakeAuditRepo:
    entries: list[LogEntry] = field(default_factory=list)
    fail: bool = False

    def save(self, entry: LogEntry) -> None:
        if self.fail:
            raise StorageError("disk full")
        self.entries.append(entry)
