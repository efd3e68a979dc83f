"""SQLite connection shared by the repositories."""

import logging
import sqlite3
from contextlib import contextmanager
from threading import RLock

logger = logging.getLogger(__name__)


class Database:
    """Owns the SQLite connection and the commit/rollback boundary."""

    def __init__(self, path: str = ":memory:"):
        """
        Open the database.

        Args:
            path: SQLite database file, or ":memory:"
        """
        self.conn = sqlite3.connect(path, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self._lock = RLock()
        self._depth = 0

    @property
    def in_transaction(self) -> bool:
        """True while inside a transaction() block."""
        return self._depth > 0

    @contextmanager
    def transaction(self):
        """
        Run the enclosed writes as one unit: commit on success, rollback on error.

        One thread at a time holds the block; nested blocks on the same thread
        join the outermost one, which alone commits or rolls back.
        """
        with self._lock:
            self._depth += 1
            try:
                yield self
            except Exception:
                self._depth -= 1
                if self._depth == 0:
                    self.conn.rollback()
                    logger.warning("Rolled back database transaction")
                raise
            else:
                self._depth -= 1
                if self._depth == 0:
                    self.conn.commit()

    def create_tables(self) -> None:
        """Create the Accounts and Transactions tables if they don't exist."""
        with self.transaction():
            self._create_tables()

    def _create_tables(self) -> None:
        cursor = self.conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS Accounts (
                id TEXT PRIMARY KEY,
                AccountNumber TEXT UNIQUE NOT NULL,
                OwnerName TEXT,
                Balance REAL
            )
        """
        )
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS Transactions (
                seq INTEGER PRIMARY KEY AUTOINCREMENT,
                id TEXT UNIQUE NOT NULL,
                Type TEXT,
                Amount REAL,
                Fee REAL,
                Timestamp TEXT,
                Description TEXT,
                AccountId TEXT REFERENCES Accounts(id)
            )
        """
        )

    def close(self) -> None:
        self.conn.close()
