# tasks/task_store.py

from __future__ import annotations

import logging
from pathlib import Path

from ..core.ports import UserRepo
from ..storage.csv_file import CsvFile, Row, parse_int
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

TASKS_HEADER = ("code", "name", "status", "assignedUserCode")


class TaskStore:
    """
    CSV task store.

    Layout: code,name,status,assignedUserCode (positional, header row first).

    Reads are lossy on purpose:
    - a row with the wrong field count is dropped
    - so is a row whose code/status/user code does not parse
    Every task read resolves its assignee through the user store;
    an unknown user code gives assignee=None.

    Updates rewrite the whole file (temp file + atomic replace).
    """

    def __init__(self, csv_path: str | Path, users: UserRepo) -> None:
        self._file = CsvFile(csv_path, TASKS_HEADER)
        self._users = users
        try:
            total = len(self._file.read_rows())
        except Exception:
            total = -1
        logger.info("TaskStore ready path=%s rows=%s", self._file.path, total)

    @property
    def path(self) -> Path:
        return self._file.path

    def ensure_file(self) -> None:
        self._file.ensure()

    # ---- low-level helpers ----

    @staticmethod
    def _parse_row(row: Row) -> tuple[int, str, TaskStatus, int] | None:
        if len(row) != len(TASKS_HEADER):
            return None
        code = parse_int(row[0])
        raw_status = parse_int(row[2])
        user_code = parse_int(row[3])
        if code is None or raw_status is None or user_code is None:
            return None
        try:
            status = TaskStatus(raw_status)
        except ValueError:
            return None
        return code, row[1], status, user_code

    def _to_task(self, parsed: tuple[int, str, TaskStatus, int]) -> Task:
        code, name, status, user_code = parsed
        return Task(
            code=code,
            name=name,
            status=status,
            assignee_code=user_code,
            assignee=self._users.find_by_code(user_code),
        )

    @staticmethod
    def _task_to_row(task: Task) -> list[object]:
        return [task.code, task.name, int(task.status), task.assignee_code]

    # ---- public API ----

    def find_all(self) -> list[Task]:
        out: list[Task] = []
        for row in self._file.iter_rows():
            parsed = self._parse_row(row)
            if parsed is None:
                logger.debug("Skipping malformed task row: %r", row)
                continue
            out.append(self._to_task(parsed))
        return out

    def find_by_code(self, code: int) -> Task | None:
        for row in self._file.iter_rows():
            parsed = self._parse_row(row)
            if parsed is None or parsed[0] != code:
                continue
            return self._to_task(parsed)
        return None

    def save(self, task: Task) -> None:
        """Append one row. Duplicate codes are not checked."""
        self._file.append_row(self._task_to_row(task))
        logger.debug(
            "Task saved code=%s status=%s assignee=%s",
            task.code,
            int(task.status),
            task.assignee_code,
        )

    def update(self, task: Task) -> None:
        """
        Read every row, replace the first one with task.code, write everything back.

        Rows that do not match (malformed ones included) are written back as parsed;
        blank lines are dropped.
        If no row matches, the task is appended.
        """
        rows: list[list[object]] = []
        replaced = False
        for row in self._file.iter_rows():
            if not replaced:
                parsed = self._parse_row(row)
                if parsed is not None and parsed[0] == task.code:
                    rows.append(self._task_to_row(task))
                    replaced = True
                    continue
            rows.append(list(row))

        if not replaced:
            rows.append(self._task_to_row(task))

        self._file.rewrite(rows)
        logger.debug(
            "Task updated code=%s status=%s replaced=%s",
            task.code,
            int(task.status),
            replaced,
        )
