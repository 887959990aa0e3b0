# audit/audit_store.py

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from ..storage.csv_file import CsvFile, Row, parse_int
from ..tasks.task_models import TaskStatus
from .audit_models import LogEntry

logger = logging.getLogger(__name__)

LOGS_HEADER = ("taskCode", "status", "changeUserCode", "date")


class AuditStore:
    """
    Append-only status-change log (logs.csv).

    Rows: taskCode,status,changeUserCode,date (ISO-8601 date).
    Existing rows are never rewritten.
    """

    def __init__(self, csv_path: str | Path) -> None:
        self._file = CsvFile(csv_path, LOGS_HEADER)
        logger.info("AuditStore ready path=%s", self._file.path)

    @property
    def path(self) -> Path:
        return self._file.path

    def ensure_file(self) -> None:
        self._file.ensure()

    def save(self, entry: LogEntry) -> None:
        self._file.append_row(
            [entry.task_code, int(entry.status), entry.actor_code, entry.date.isoformat()]
        )
        logger.debug(
            "Log saved task=%s status=%s actor=%s",
            entry.task_code,
            int(entry.status),
            entry.actor_code,
        )

    # ---- read helpers (console /log) ----

    @staticmethod
    def _row_to_entry(row: Row) -> LogEntry | None:
        if len(row) != len(LOGS_HEADER):
            return None
        task_code = parse_int(row[0])
        raw_status = parse_int(row[1])
        actor_code = parse_int(row[2])
        if task_code is None or raw_status is None or actor_code is None:
            return None
        try:
            return LogEntry(
                task_code=task_code,
                status=TaskStatus(raw_status),
                actor_code=actor_code,
                date=date.fromisoformat(row[3].strip()),
            )
        except ValueError:
            return None

    def find_all(self) -> list[LogEntry]:
        out: list[LogEntry] = []
        for row in self._file.iter_rows():
            entry = self._row_to_entry(row)
            if entry is None:
                logger.debug("Skipping malformed log row: %r", row)
                continue
            out.append(entry)
        return out

    def find_by_task_code(self, task_code: int) -> list[LogEntry]:
        return [e for e in self.find_all() if e.task_code == task_code]
