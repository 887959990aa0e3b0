# storage/csv_file.py

from __future__ import annotations

import contextlib
import csv
import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from ..core.errors import StorageError

logger = logging.getLogger(__name__)

Row = list[str]

# Unreadable bytes and csv.Error (e.g. field size limit) count as storage failures.
_IO_ERRORS = (OSError, UnicodeError, csv.Error)


class CsvFile:
    """
    One comma-separated file with a header row.

    - reads skip the header and yield raw rows (no schema check here)
    - a missing file reads as empty
    - appends create the file (with header) on first write
    - rewrite goes through a sibling temp file + os.replace,
      so a failed write never truncates the existing file

    Every OSError, decode error or csv.Error is re-raised as StorageError.
    """

    def __init__(self, path: str | Path, header: Sequence[str]) -> None:
        self._path = Path(path)
        self._header = list(header)

    @property
    def path(self) -> Path:
        return self._path

    def ensure(self) -> None:
        """Create parent dirs and write the header if the file is missing or empty."""
        try:
            if self._path.exists() and self._path.stat().st_size > 0:
                return
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8", newline="") as f:
                csv.writer(f, lineterminator="\n").writerow(self._header)
        except OSError as exc:
            raise StorageError(f"Cannot create {self._path}: {exc}") from exc
        logger.info("Created %s", self._path)

    def iter_rows(self) -> Iterator[Row]:
        if not self._path.exists():
            return
        try:
            with self._path.open("r", encoding="utf-8", newline="") as f:
                reader = csv.reader(f)
                next(reader, None)  # header
                for row in reader:
                    if not row:
                        continue
                    yield row
        except _IO_ERRORS as exc:
            raise StorageError(f"Cannot read {self._path}: {exc}") from exc

    def read_rows(self) -> list[Row]:
        return list(self.iter_rows())

    def append_row(self, row: Sequence[object]) -> None:
        self.ensure()
        try:
            with self._path.open("a", encoding="utf-8", newline="") as f:
                csv.writer(f, lineterminator="\n").writerow(row)
        except _IO_ERRORS as exc:
            raise StorageError(f"Cannot append to {self._path}: {exc}") from exc

    def rewrite(self, rows: Sequence[Sequence[object]]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerow(self._header)
                writer.writerows(rows)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        except _IO_ERRORS as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Cannot rewrite {self._path}: {exc}") from exc
        logger.debug("Rewrote %s rows=%d", self._path, len(rows))


def parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None
