# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKAPP_APP_NAME": "App display name (default: taskapp).",
    "TASKAPP_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Paths (gitignored)
    "TASKAPP_DATA_DIR": "Local data directory (default: .local/taskapp).",
    "TASKAPP_USERS_CSV_PATH": "Users file, code,name,email,password (default: <data_dir>/users.csv).",
    "TASKAPP_TASKS_CSV_PATH": "Tasks file, code,name,status,assignedUserCode (default: <data_dir>/tasks.csv).",
    "TASKAPP_LOGS_CSV_PATH": "Status log, taskCode,status,changeUserCode,date (default: <data_dir>/logs.csv).",
    # Input limits
    "TASKAPP_TASK_NAME_MAX_LENGTH": "Max characters in a task name (default: 10).",
}
