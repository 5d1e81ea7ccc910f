"""Tests for connection and schema bootstrap."""

import sqlite3

from person_db.config import Settings
from person_db.db import connect, database, init_schema, open_database, reset_db, seed
from person_db.logging_config import is_configured


class TestConnect:
    """Tests for connect()."""

    def test_rows_support_column_names(self):
        conn = connect(":memory:")
        row = conn.execute("SELECT 1 AS answer").fetchone()
        assert row["answer"] == 1
        conn.close()

    def test_statements_commit_immediately(self, tmp_path):
        path = tmp_path / "person.db"
        writer = connect(path)
        init_schema(writer)
        writer.execute("INSERT INTO person VALUES (1, 'Ann', 'Oslo', '2000-01-01 00:00:00')")

        reader = sqlite3.connect(path)
        assert reader.execute("SELECT COUNT(*) FROM person").fetchone()[0] == 1
        reader.close()
        writer.close()

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "person.db"
        connect(path).close()
        assert path.exists()


class TestSchemaAndSeed:
    """Tests for init_schema() and seed()."""

    def test_init_schema_is_idempotent(self, empty_conn):
        init_schema(empty_conn)
        columns = [row["name"] for row in empty_conn.execute("PRAGMA table_info(person)")]
        assert columns == ["id", "name", "location", "birth_date"]

    def test_seed_loads_three_rows(self, empty_conn):
        assert seed(empty_conn) == 3
        ids = [row["id"] for row in empty_conn.execute("SELECT id FROM person ORDER BY id")]
        assert ids == [10001, 10002, 10003]

    def test_seed_skips_non_empty_table(self, conn):
        assert seed(conn) == 0
        assert conn.execute("SELECT COUNT(*) FROM person").fetchone()[0] == 3


class TestOpenDatabase:
    """Tests for open_database(), database() and reset_db()."""

    def test_open_database_seeds_by_default(self, file_settings: Settings):
        conn = open_database(file_settings)
        assert conn.execute("SELECT COUNT(*) FROM person").fetchone()[0] == 3
        conn.close()

    def test_open_database_without_seed(self, tmp_path):
        settings = Settings(database_path=str(tmp_path / "person.db"), seed=False)
        conn = open_database(settings)
        assert conn.execute("SELECT COUNT(*) FROM person").fetchone()[0] == 0
        conn.close()

    def test_file_database_keeps_changes(self, file_settings: Settings):
        with database(file_settings) as conn:
            conn.execute("DELETE FROM person WHERE id = 10002")

        with database(file_settings) as conn:
            assert conn.execute("SELECT COUNT(*) FROM person").fetchone()[0] == 2

    def test_reset_removes_file(self, file_settings: Settings):
        open_database(file_settings).close()
        assert reset_db(file_settings) is True
        assert reset_db(file_settings) is False

    def test_reset_in_memory_is_noop(self):
        assert reset_db(Settings()) is False

    def test_open_database_configures_logging(self, capsys):
        conn = open_database(Settings())
        conn.close()

        assert is_configured()
        captured = capsys.readouterr()
        assert "database_connected" not in captured.out
        assert "database_connected" not in captured.err
