"""Pytest configuration and fixtures."""

import logging
import sqlite3
from collections.abc import Iterator

import pytest
import structlog

from person_db import logging_config
from person_db.config import Settings, reset_settings
from person_db.dao import PersonDao
from person_db.db import connect, init_schema, seed


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from PERSON_DB_* variables and the cached settings."""
    for name in ("DATABASE_PATH", "SEED", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"PERSON_DB_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def clean_logging() -> Iterator[None]:
    """Drop logging configuration made during a test (CLI callbacks configure it)."""
    yield
    structlog.reset_defaults()
    for handler in logging.root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            logging.root.removeHandler(handler)
    logging_config._configured = False


@pytest.fixture
def empty_conn() -> Iterator[sqlite3.Connection]:
    """In-memory connection with the schema but no rows."""
    conn = connect(":memory:")
    init_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def conn(empty_conn: sqlite3.Connection) -> sqlite3.Connection:
    """In-memory connection seeded with persons 10001..10003."""
    seed(empty_conn)
    return empty_conn


@pytest.fixture
def dao(conn: sqlite3.Connection) -> PersonDao:
    """PersonDao over the seeded connection."""
    return PersonDao(conn)


@pytest.fixture
def file_settings(tmp_path) -> Settings:
    """Settings pointing at a database file under tmp_path."""
    return Settings(database_path=str(tmp_path / "data" / "person.db"))
