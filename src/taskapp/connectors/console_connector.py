# src/taskapp/connectors/console_connector.py

from __future__ import annotations

import getpass
import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.errors import AuthenticationError, StorageError
from ..core.state import AppState
from ..users.user_api import login
from ..users.user_models import User

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]


def _login_loop(state: AppState, read_line: ReadLine, read_secret: ReadLine, write: WriteLine) -> User:
    """Ask for credentials until they match a user. EOF/Ctrl+C propagate to the caller."""
    while True:
        email = read_line("Email: ").strip()
        password = read_secret("Password: ")
        try:
            return login(state.users, email, password)
        except AuthenticationError as e:
            write(e.message)
        except StorageError as e:
            logger.error("Login lookup failed: %s", e.message)
            write(f"Operation failed: {e.message}")
        write("")


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    read_secret: ReadLine = getpass.getpass,
    write: WriteLine = print,
) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskapp"))
    logger.info("Console connector started.")
    write(f"Welcome to {app_name}!")

    try:
        user = _login_loop(state, read_line, read_secret, write)
    except (EOFError, KeyboardInterrupt):
        logger.info("Console closed before login.")
        write("")
        return

    write(f"Hello, {user.name}. Use /help for commands, /logout to quit.")

    while True:
        try:
            line = read_line(f"{user.name}> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line:
            continue

        if line.lower() in ("/logout", "/exit", "/quit"):
            logger.info("Console logout user_code=%s.", user.code)
            write("Logged out.")
            break

        try:
            reply = command_registry.handle(state, line, user)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list available commands."
        write(reply)

    logger.info("Console connector finished.")
