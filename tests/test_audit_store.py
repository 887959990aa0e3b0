# tests/test_audit_store.py

from __future__ import annotations

from datetime import date
from pathlib import Path

from taskapp.audit.audit_models import LogEntry
from taskapp.audit.audit_store import AuditStore
from taskapp.tasks.task_models import TaskStatus


def test_save_appends_in_insertion_order(tmp_path: Path) -> None:
    store = AuditStore(tmp_path / "logs.csv")

    store.save(LogEntry(1, TaskStatus.UNSTARTED, 1, date(2024, 5, 1)))
    store.save(LogEntry(1, TaskStatus.IN_PROGRESS, 2, date(2024, 5, 2)))

    assert store.path.read_text(encoding="utf-8").splitlines() == [
        "taskCode,status,changeUserCode,date",
        "1,0,1,2024-05-01",
        "1,1,2,2024-05-02",
    ]


def test_reads_skip_malformed_and_filter_by_task(tmp_path: Path) -> None:
    path = tmp_path / "logs.csv"
    path.write_text(
        "taskCode,status,changeUserCode,date\n"
        "1,0,1,2024-05-01\n"
        "2,0,1,not-a-date\n"
        "2,0,1,2024-05-01\n"
        "1,1,1\n"
        "1,1,2,2024-05-03\n",
        encoding="utf-8",
    )
    store = AuditStore(path)

    assert len(store.find_all()) == 3
    entries = store.find_by_task_code(1)
    assert [e.status for e in entries] == [TaskStatus.UNSTARTED, TaskStatus.IN_PROGRESS]
    assert entries[1].actor_code == 2
    assert entries[1].date == date(2024, 5, 3)
