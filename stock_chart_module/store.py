"""SQLite record store seeded with a fixed ``users`` table."""
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import List, Tuple, Union

from .config import DEFAULT_STORE_PATH, STORE_SCRIPT
from .errors import StoreError

logger = logging.getLogger(__name__)


class RecordStore:
    """Small wrapper around a local SQLite file."""

    def __init__(self, path: Union[str, Path] = DEFAULT_STORE_PATH) -> None:
        self.path = Path(path)

    def _connect(self) -> sqlite3.Connection:
        try:
            return sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise StoreError(f"Unable to open record store {str(self.path)!r}: {exc}") from exc

    def initialize(self) -> None:
        """Create the ``users`` table and insert the two seed rows.

        The script runs in a single transaction. Running it against a file that
        already holds the table fails with ``StoreError`` and changes nothing.
        """

        conn = self._connect()
        try:
            conn.executescript("BEGIN;" + STORE_SCRIPT + "COMMIT;")
        except sqlite3.Error as exc:
            if conn.in_transaction:
                conn.rollback()
            raise StoreError(f"Failed to initialise record store {str(self.path)!r}: {exc}") from exc
        finally:
            conn.close()
        logger.debug("Initialised record store %s", self.path)

    def fetch_users(self) -> List[Tuple[str, int]]:
        """Return every ``(name, age)`` row in insertion order."""

        conn = self._connect()
        try:
            return [tuple(row) for row in conn.execute("SELECT name, age FROM users ORDER BY rowid")]
        except sqlite3.Error as exc:
            raise StoreError(f"Failed to read users from {str(self.path)!r}: {exc}") from exc
        finally:
            conn.close()
