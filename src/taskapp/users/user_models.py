# users/user_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    code: int
    name: str
    email: str
    # Stored as-is in users.csv; compared verbatim on login.
    password: str
