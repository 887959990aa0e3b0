# src/taskapp/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- All data files live under one local directory unless overridden.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKAPP"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Data files ----
    data_dir: Path
    users_csv_path: Path
    tasks_csv_path: Path
    logs_csv_path: Path

    # ---- Input limits ----
    task_name_max_length: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskapp")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskapp"))
        users_csv_path = _env_path(_k("USERS_CSV_PATH"), data_dir / "users.csv")
        tasks_csv_path = _env_path(_k("TASKS_CSV_PATH"), data_dir / "tasks.csv")
        logs_csv_path = _env_path(_k("LOGS_CSV_PATH"), data_dir / "logs.csv")

        task_name_max_length = _env_int(_k("TASK_NAME_MAX_LENGTH"), 10)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            users_csv_path=users_csv_path,
            tasks_csv_path=tasks_csv_path,
            logs_csv_path=logs_csv_path,
            task_name_max_length=task_name_max_length,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
