"""
SQLite connection pool.

The pool is the store session handle handed to repositories: callers borrow
a connection with ``pool.connection()`` and it is returned when the block
exits.
"""

import logging
import queue
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


class SQLiteConnectionPool:
    """
    Thread-safe pool of SQLite connections.

    Keeps ``pool_size`` long-lived connections and hands out up to
    ``max_overflow`` extra ones when the pool is drained; overflow
    connections are closed when returned.
    """

    def __init__(
        self,
        db_path: str,
        pool_size: int = 5,
        max_overflow: int = 3,
        timeout: float = 30.0,
    ):
        """
        Args:
            db_path: Path to the SQLite database file
            pool_size: Number of connections kept in the pool
            max_overflow: Additional connections allowed beyond pool_size
            timeout: Seconds to wait for a free connection
        """
        if db_path == MEMORY_DB:
            # every :memory: connection is a separate database
            raise ValueError("SQLiteConnectionPool requires a file-backed database")

        self.db_path = db_path
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.timeout = timeout

        self._pool: "queue.Queue[sqlite3.Connection]" = queue.Queue(maxsize=pool_size)
        self._overflow = set()
        self._lock = threading.Lock()
        self._closed = False

        for _ in range(pool_size):
            self._pool.put(self._create_connection())

        logger.info("SQLite connection pool initialized: %s connections for %s", pool_size, db_path)

    def _create_connection(self) -> sqlite3.Connection:
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(
            self.db_path,
            check_same_thread=False,
            timeout=self.timeout,
            isolation_level=None,  # autocommit
        )
        conn.row_factory = sqlite3.Row

        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA foreign_keys=ON")
        conn.execute("PRAGMA synchronous=NORMAL")
        conn.execute("PRAGMA busy_timeout=5000")

        return conn

    def get_connection(self) -> sqlite3.Connection:
        """
        Borrow a connection.

        Raises:
            sqlite3.ProgrammingError: If the pool has been closed
            TimeoutError: If no connection becomes available within timeout
        """
        if self._closed:
            raise sqlite3.ProgrammingError("Connection pool is closed")
        try:
            return self._pool.get_nowait()
        except queue.Empty:
            pass

        with self._lock:
            if len(self._overflow) < self.max_overflow:
                conn = self._create_connection()
                self._overflow.add(id(conn))
                logger.debug("Creating overflow connection (%s/%s)", len(self._overflow), self.max_overflow)
                return conn

        try:
            return self._pool.get(timeout=self.timeout)
        except queue.Empty:
            raise TimeoutError(f"Could not get connection within {self.timeout} seconds") from None

    def return_connection(self, conn: sqlite3.Connection) -> None:
        with self._lock:
            is_overflow = id(conn) in self._overflow
            self._overflow.discard(id(conn))

        if is_overflow or self._closed:
            conn.close()
            logger.debug("Closed overflow connection")
            return
        try:
            self._pool.put_nowait(conn)
        except queue.Full:
            conn.close()
            logger.debug("Pool full, closed connection")

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """
        Borrow a connection for the duration of a ``with`` block.

        Usage:
            with pool.connection() as conn:
                rows = conn.execute("SELECT id, name FROM tasks").fetchall()
        """
        conn = self.get_connection()
        try:
            yield conn
        except Exception as e:
            logger.error("Database operation failed: %s", e)
            if conn.in_transaction:
                try:
                    conn.rollback()
                except sqlite3.Error as rollback_error:
                    logger.warning("Rollback failed: %s", rollback_error)
            raise
        finally:
            self.return_connection(conn)

    def close_pool(self) -> None:
        logger.info("Closing connection pool...")
        self._closed = True
        while True:
            try:
                conn = self._pool.get_nowait()
            except queue.Empty:
                break
            conn.close()
        logger.info("Connection pool closed")

    def get_stats(self) -> dict:
        return {
            "pool_size": self.pool_size,
            "available_connections": self._pool.qsize(),
            "overflow_connections": len(self._overflow),
            "max_overflow": self.max_overflow,
        }

