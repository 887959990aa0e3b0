# src/taskapp/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import StorageError, TaskAppError
from ..core.state import AppState
from ..tasks.task_models import TaskStatus
from ..users.user_models import User

CommandHandler = Callable[[AppState, list[str], User], str]

logger = logging.getLogger(__name__)

STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.UNSTARTED: "Unstarted",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.DONE: "Done",
}


def status_label(status: TaskStatus) -> str:
    return STATUS_LABELS.get(status, str(int(status)))


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, user: User) -> str | None:
        """
        Handle a string like "/command args" for the logged-in user.
        Returns a reply string or None if not a command.

        Domain errors become the reply; storage errors are logged and reported
        as a failed operation.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args, user)
        except StorageError as e:
            logger.error("Command /%s failed on storage: %s", name, e.message)
            return f"Operation failed: {e.message}"
        except TaskAppError as e:
            return e.message

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /logout - Log out and exit.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_code(raw: str) -> int | None:
    # Half-width digits only; no sign.
    if not raw.isascii() or not raw.isdigit():
        return None
    return int(raw)


def cmd_help(state: AppState, args: list[str], user: User) -> str:
    return registry.build_help()


def cmd_whoami(state: AppState, args: list[str], user: User) -> str:
    return f"Logged in as {user.name} (code {user.code}, {user.email})."


def cmd_list(state: AppState, args: list[str], user: User) -> str:
    views = state.service.list_all(user)
    if not views:
        return "No tasks yet. Use /new to create one."

    lines = ["Tasks:"]
    for v in views:
        if v.is_mine:
            who = "you"
        else:
            who = v.assignee_name or f"unknown user {v.task.assignee_code}"
        lines.append(
            f"  {v.task.code}. {v.task.name} | assignee: {who} | status: {status_label(v.task.status)}"
        )
    return "\n".join(lines)


def cmd_users(state: AppState, args: list[str], user: User) -> str:
    users = state.users.find_all()
    if not users:
        return "No users."
    lines = ["Users:"]
    for u in users:
        lines.append(f"  {u.code}. {u.name}")
    return "\n".join(lines)


def cmd_new(state: AppState, args: list[str], user: User) -> str:
    """
    /new <code> <assigneeCode> <name>
    """
    usage = "Usage: /new <code> <assigneeCode> <name>"
    if len(args) < 3:
        return usage

    code = _parse_code(args[0])
    if code is None:
        return "Task code must be a number."

    assignee_code = _parse_code(args[1])
    if assignee_code is None:
        return "Assignee code must be a number."

    name = " ".join(args[2:]).strip()
    max_len = int(getattr(state.settings, "task_name_max_length", 10))
    if not name:
        return usage
    if len(name) > max_len:
        return f"Task name must be at most {max_len} characters."

    task = state.service.create(code, name, assignee_code, user)
    return f"Task '{task.name}' registered."


def cmd_status(state: AppState, args: list[str], user: User) -> str:
    """
    /status <code> 1   -> In progress
    /status <code> 2   -> Done
    """
    usage = "Usage: /status <code> <1|2>  (1 = In progress, 2 = Done)"
    if len(args) != 2:
        return usage

    code = _parse_code(args[0])
    if code is None:
        return "Task code must be a number."

    requested = _parse_code(args[1])
    if requested not in (TaskStatus.IN_PROGRESS, TaskStatus.DONE):
        return "Status must be 1 or 2."

    task = state.service.transition(code, requested, user)
    return f"Task '{task.name}' is now {status_label(task.status)}."


def cmd_log(state: AppState, args: list[str], user: User) -> str:
    """
    /log          -> every status change
    /log <code>   -> changes of one task
    """
    if args:
        code = _parse_code(args[0])
        if code is None:
            return "Task code must be a number."
        entries = state.audit.find_by_task_code(code)
    else:
        entries = state.audit.find_all()

    if not entries:
        return "No log entries."

    lines = ["Status log:"]
    for e in entries:
        lines.append(
            f"  {e.date.isoformat()} task {e.task_code} -> {status_label(e.status)} "
            f"(by user {e.actor_code})"
        )
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("new", cmd_new, help_text="Create a task: /new <code> <assigneeCode> <name>.")
registry.register(
    "status", cmd_status, help_text="Advance a task: /status <code> <1|2> (1 = In progress, 2 = Done)."
)
registry.register("log", cmd_log, help_text="Show the status log: /log [taskCode].")
registry.register("users", cmd_users, help_text="List users that can be assigned.")
registry.register("whoami", cmd_whoami, help_text="Show the logged-in user.")
