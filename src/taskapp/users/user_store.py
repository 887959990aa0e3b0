# users/user_store.py

from __future__ import annotations

import logging
from pathlib import Path

from ..storage.csv_file import CsvFile, Row, parse_int
from .user_models import User

logger = logging.getLogger(__name__)

USERS_HEADER = ("code", "name", "email", "password")


class UserStore:
    """
    Read-only user lookups over users.csv.

    Rows with the wrong number of fields or a non-numeric code are skipped.
    """

    def __init__(self, csv_path: str | Path = "users.csv") -> None:
        self._file = CsvFile(csv_path, USERS_HEADER)
        logger.info("UserStore ready path=%s", self._file.path)

    @property
    def path(self) -> Path:
        return self._file.path

    def ensure_file(self) -> None:
        self._file.ensure()

    @staticmethod
    def _row_to_user(row: Row) -> User | None:
        if len(row) != len(USERS_HEADER):
            return None
        code = parse_int(row[0])
        if code is None:
            return None
        return User(code=code, name=row[1], email=row[2], password=row[3])

    def find_all(self) -> list[User]:
        out: list[User] = []
        for row in self._file.iter_rows():
            user = self._row_to_user(row)
            if user is None:
                logger.debug("Skipping malformed user row: %r", row)
                continue
            out.append(user)
        return out

    def find_by_code(self, code: int) -> User | None:
        for row in self._file.iter_rows():
            user = self._row_to_user(row)
            if user is not None and user.code == code:
                return user
        return None

    def find_by_email_and_password(self, email: str, password: str) -> User | None:
        for row in self._file.iter_rows():
            user = self._row_to_user(row)
            if user is not None and user.email == email and user.password == password:
                return user
        return None
