"""A single JSON file holding the rows of one table.

Every repository reads the whole file per call and rewrites it per
write, like a remote table that is fetched fresh on each request. I/O
and decoding failures surface as StoreReadError / StoreWriteError,
including rows that are missing fields or hold values that do not
parse back into domain objects.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from backoffice.domain.exceptions import StoreReadError, StoreWriteError, ValidationError

logger = logging.getLogger("backoffice.store")

_MALFORMED_ROW = (KeyError, TypeError, ValueError, ArithmeticError, ValidationError)


class JsonTable:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def name(self) -> str:
        return self._file_path.stem

    def load(self) -> list[dict]:
        try:
            rows = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreReadError(f"cannot read table '{self.name}': {exc}") from exc
        if not isinstance(rows, list):
            raise StoreReadError(f"table '{self.name}' is not a list of rows")
        return rows

    def persist(self, rows: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(rows, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except (OSError, TypeError, ValueError) as exc:
            raise StoreWriteError(f"cannot write table '{self.name}': {exc}") from exc
        logger.debug("Table '%s' written (%d rows)", self.name, len(rows))

    @contextmanager
    def decoding(self) -> Iterator[None]:
        """Report a bad row inside the block as StoreReadError."""
        try:
            yield
        except _MALFORMED_ROW as exc:
            logger.warning("Malformed row in table '%s': %r", self.name, exc)
            raise StoreReadError(f"malformed row in '{self.name}': {exc!r}") from exc

    def next_id(self, rows: list[dict]) -> int:
        if not rows:
            return 1
        with self.decoding():
            return max(int(row["id"]) for row in rows) + 1

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StoreWriteError(f"cannot create table '{self.name}': {exc}") from exc
