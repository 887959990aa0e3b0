# src/taskapp/tasks/task_service.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..audit.audit_models import LogEntry
from ..core.errors import (
    InvalidTransitionError,
    StorageError,
    TaskNotFoundError,
    UserReferenceError,
)
from ..core.ports import AuditRepo, TaskRepo, UserRepo
from ..users.user_models import User
from .task_models import Task, TaskStatus, TaskView

logger = logging.getLogger(__name__)


class TaskService:
    """
    Task lifecycle: create, advance status, list.

    Status moves one step at a time:
      UNSTARTED -> IN_PROGRESS -> DONE
    DONE is terminal.

    Every create/transition appends one audit entry after the task write.
    The task file is authoritative: if the audit append fails, the error is
    logged and the task change stands.
    """

    def __init__(
        self,
        users: UserRepo,
        tasks: TaskRepo,
        audit: AuditRepo,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._users = users
        self._tasks = tasks
        self._audit = audit
        self._today = today

    def _append_audit(self, task: Task, actor: User) -> None:
        entry = LogEntry(
            task_code=task.code,
            status=task.status,
            actor_code=actor.code,
            date=self._today(),
        )
        try:
            self._audit.save(entry)
        except StorageError:
            logger.exception(
                "Audit append failed task=%s status=%s actor=%s",
                task.code,
                int(task.status),
                actor.code,
            )

    # ---- public API ----

    def create(self, code: int, name: str, assignee_code: int, acting_user: User) -> Task:
        assignee = self._users.find_by_code(assignee_code)
        if assignee is None:
            raise UserReferenceError(f"User with code {assignee_code} does not exist.")

        task = Task(
            code=code,
            name=name,
            status=TaskStatus.UNSTARTED,
            assignee_code=assignee.code,
            assignee=assignee,
        )
        self._tasks.save(task)
        self._append_audit(task, acting_user)

        logger.info(
            "Task created code=%s assignee=%s by=%s", task.code, assignee.code, acting_user.code
        )
        return task

    def transition(self, code: int, requested_status: int, acting_user: User) -> Task:
        task = self._tasks.find_by_code(code)
        if task is None:
            raise TaskNotFoundError(f"Task with code {code} does not exist.")

        current = task.status
        if int(requested_status) - int(current) != 1:
            raise InvalidTransitionError(
                f"Task {code} is {current.name}; status can only move one step forward."
            )
        try:
            new_status = TaskStatus(int(requested_status))
        except ValueError:
            raise InvalidTransitionError(
                f"Task {code} is {current.name}; no further status exists."
            ) from None

        task.status = new_status
        self._tasks.update(task)
        self._append_audit(task, acting_user)

        logger.info(
            "Task transitioned code=%s %s->%s by=%s",
            code,
            current.name,
            new_status.name,
            acting_user.code,
        )
        return task

    def list_all(self, viewing_user: User) -> list[TaskView]:
        views: list[TaskView] = []
        for task in self._tasks.find_all():
            assignee_name = task.assignee.name if task.assignee is not None else ""
            views.append(
                TaskView(
                    task=task,
                    assignee_name=assignee_name,
                    is_mine=task.assignee_code == viewing_user.code,
                )
            )
        return views

    def find_task(self, code: int) -> Task | None:
        return self._tasks.find_by_code(code)
