# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskapp.audit.audit_store import AuditStore
from taskapp.core.state import AppState
from taskapp.tasks.task_service import TaskService
from taskapp.tasks.task_store import TaskStore
from taskapp.users.user_models import User
from taskapp.users.user_store import UserStore

TODAY = date(2024, 5, 1)

USERS_CSV = (
    "code,name,email,password\n"
    "1,Alice,alice@example.com,alice-pass\n"
    "2,Bob,bob@example.com,bob-pass\n"
    "42,Carol,carol@example.com,carol-pass\n"
)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskapp-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        users_csv_path=tmp_path / "users.csv",
        tasks_csv_path=tmp_path / "tasks.csv",
        logs_csv_path=tmp_path / "logs.csv",
        task_name_max_length=10,
    )


@pytest.fixture()
def users_csv(settings: SimpleNamespace) -> Path:
    path: Path = settings.users_csv_path
    path.write_text(USERS_CSV, encoding="utf-8")
    return path


@pytest.fixture()
def alice() -> User:
    return User(code=1, name="Alice", email="alice@example.com", password="alice-pass")


@pytest.fixture()
def bob() -> User:
    return User(code=2, name="Bob", email="bob@example.com", password="bob-pass")


@pytest.fixture()
def state(settings: SimpleNamespace, users_csv: Path) -> AppState:
    """
    AppState wired with the real CSV stores in a tmp dir and a fixed "today".

    NOTE: We keep real file stores here because their on-disk format is part
    of what we want to test.
    """
    users = UserStore(settings.users_csv_path)
    tasks = TaskStore(settings.tasks_csv_path, users)
    audit = AuditStore(settings.logs_csv_path)
    return AppState(
        settings=settings,
        users=users,
        tasks=tasks,
        audit=audit,
        service=TaskService(users, tasks, audit, today=lambda: TODAY),
    )
