# src/taskapp/core/errors.py

"""
Typed failures raised by the stores and the lifecycle service.

Domain errors (everything except StorageError) are expected outcomes:
the console shows the message and asks again.
StorageError means the operation failed on disk; the process keeps running.
"""

from __future__ import annotations


class TaskAppError(Exception):
    """Base class for all taskapp failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserReferenceError(TaskAppError):
    """A referenced user code does not exist."""


class TaskNotFoundError(TaskAppError):
    """A referenced task code does not exist."""


class InvalidTransitionError(TaskAppError):
    """Requested status is not exactly one step ahead of the current one."""


class AuthenticationError(TaskAppError):
    """Email/password pair does not match any user."""


class StorageError(TaskAppError):
    """Underlying file could not be read or written."""
