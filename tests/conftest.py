"""
Shared test fixtures.

Each test gets its own SQLite file under ``tmp_path``.
"""

import pytest
from fastapi.testclient import TestClient

from tasklist.database import init_db
from tasklist.database_pool import SQLiteConnectionPool
from tasklist.main import create_app
from tasklist.repository import TaskRepository
from tasklist.settings import AppSettings


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "tasks.db")


@pytest.fixture
def pool(db_path):
    """Pool with an initialised schema."""
    pool = SQLiteConnectionPool(db_path, pool_size=2, max_overflow=1, timeout=1.0)
    init_db(pool)
    yield pool
    pool.close_pool()


@pytest.fixture
def repo(pool):
    return TaskRepository(pool)


@pytest.fixture
def settings(db_path):
    return AppSettings(
        _env_file=None,
        database_path=db_path,
        db_pool_size=2,
        db_max_overflow=1,
        db_timeout=1.0,
        log_format="plain",
    )


@pytest.fixture
def client(settings):
    """FastAPI test client; entering it runs the application lifespan."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
