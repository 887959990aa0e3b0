# src/taskapp/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory and CSV files exist,
- wires the stores and the lifecycle service into AppState.
"""

from __future__ import annotations

import logging

from ..audit.audit_store import AuditStore
from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore
from ..users.user_store import UserStore

logger = logging.getLogger(__name__)


def _ensure_local_files(state: AppState) -> None:
    state.settings.data_dir.mkdir(parents=True, exist_ok=True)  # type: ignore[attr-defined]
    state.users.ensure_file()
    state.tasks.ensure_file()
    state.audit.ensure_file()


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    users = UserStore(settings.users_csv_path)
    tasks = TaskStore(settings.tasks_csv_path, users)
    audit = AuditStore(settings.logs_csv_path)

    state = AppState(
        settings=settings,
        users=users,
        tasks=tasks,
        audit=audit,
        service=TaskService(users, tasks, audit),
    )
    _ensure_local_files(state)

    if not users.find_all():
        logger.warning("No users found in %s; nobody will be able to log in.", users.path)
    return state
