"""SQLite connection and schema bootstrap."""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

from person_db.config import Settings, get_settings
from person_db.logging_config import configure_logging

logger = structlog.get_logger(__name__)

SQL_DIR = Path(__file__).parent / "sql"
SCHEMA_FILE = SQL_DIR / "schema.sql"
DATA_FILE = SQL_DIR / "data.sql"


def connect(database: str | Path) -> sqlite3.Connection:
    """
    Open a connection to the given database.

    The connection runs in autocommit mode so every statement is applied on
    its own, and returns sqlite3.Row rows for name-based column access.
    """
    database = str(database)
    if database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(database, isolation_level=None)
    conn.row_factory = sqlite3.Row
    logger.debug("database_connected", database=database)
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the person table if it does not exist yet."""
    conn.executescript(SCHEMA_FILE.read_text())
    logger.debug("schema_ready", schema=SCHEMA_FILE.name)


def seed(conn: sqlite3.Connection) -> int:
    """
    Load the seed rows into an empty person table.

    Returns:
        Number of rows seeded (0 if the table already had data)
    """
    existing = conn.execute("SELECT COUNT(*) FROM person").fetchone()[0]
    if existing:
        logger.debug("seed_skipped", existing_rows=existing)
        return 0

    conn.executescript(DATA_FILE.read_text())
    seeded = conn.execute("SELECT COUNT(*) FROM person").fetchone()[0]
    logger.info("seed_loaded", rows=seeded)
    return seeded


def open_database(settings: Settings | None = None) -> sqlite3.Connection:
    """Connect using settings, then create the schema and seed when enabled."""
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, format=settings.log_format)
    conn = connect(settings.database_path)
    init_schema(conn)
    if settings.seed:
        seed(conn)
    return conn


@contextmanager
def database(settings: Settings | None = None) -> Iterator[sqlite3.Connection]:
    """Context manager yielding an initialized connection, closed on exit."""
    conn = open_database(settings)
    try:
        yield conn
    finally:
        conn.close()


def reset_db(settings: Settings | None = None) -> bool:
    """
    Delete the database file.

    Returns:
        True if a file was removed
    """
    settings = settings or get_settings()
    if settings.in_memory:
        return False

    path = Path(settings.database_path)
    if not path.exists():
        return False

    path.unlink()
    logger.info("database_reset", database=str(path))
    return True
