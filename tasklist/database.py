"""Schema initialisation for the task store."""

from __future__ import annotations

import logging
from typing import Optional

from .database_pool import SQLiteConnectionPool

logger = logging.getLogger(__name__)

TASKS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL CHECK (length(name) > 0)
)
"""


def init_db(pool: SQLiteConnectionPool) -> None:
    """Create the tasks table if it does not exist yet."""
    with pool.connection() as conn:
        conn.execute(TASKS_TABLE_DDL)
    logger.info("Task store schema ready at %s", pool.db_path)


def integrity_check(pool: SQLiteConnectionPool) -> Optional[str]:
    """Run ``PRAGMA integrity_check`` and return its first result row."""
    with pool.connection() as conn:
        row = conn.execute("PRAGMA integrity_check").fetchone()
    return row[0] if row is not None else None
