import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator

from utils.app_config import LedgerConfig

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the single sqlite connection for the app's lifetime.

    Callers never hold the connection directly; they borrow it through
    connection(), which commits on success and rolls back on any error.
    """

    def __init__(self, config: LedgerConfig | None = None):
        self.config = config or LedgerConfig()
        self.db_path = self.config.db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.RLock()

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(
                self.db_path,
                timeout=self.config.timeout,
                check_same_thread=False,
            )
            self._conn.row_factory = sqlite3.Row
            if self.db_path != ":memory:":
                self._conn.execute("PRAGMA journal_mode = WAL")
            logger.debug("Opened ledger database at %s", self.db_path)
        return self._conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        with self._lock:
            conn = self.get_connection()
            try:
                yield conn
            except Exception:
                conn.rollback()
                raise
            else:
                conn.commit()

    def initialize(self):
        """Create schema if missing. Safe to call on every startup."""
        with self.connection() as conn:
            self._create_schema(conn)

    def _create_schema(self, conn: sqlite3.Connection):
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS transactions (
                id            INTEGER PRIMARY KEY AUTOINCREMENT,
                amount        REAL    NOT NULL CHECK(amount > 0),
                description   TEXT    NOT NULL,
                category      TEXT    NOT NULL,
                is_income     INTEGER NOT NULL CHECK(is_income IN (0, 1)),
                date_created  TEXT    NOT NULL
                              DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now'))
            );

            CREATE INDEX IF NOT EXISTS idx_transactions_date_created
                ON transactions(date_created);
        """)

    def close(self):
        with self._lock:
            if self._conn:
                self._conn.close()
                self._conn = None
