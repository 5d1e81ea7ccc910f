"""Person data-access object - fixed SQL statements and row mapping."""

import sqlite3
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

import structlog

from person_db.exceptions import IncorrectResultSizeError, RowMappingError
from person_db.models import Person

logger = structlog.get_logger(__name__)

COLUMNS = ("id", "name", "location", "birth_date")

SELECT_ALL = "SELECT * FROM person"
SELECT_BY_ID = "SELECT * FROM person WHERE id = ?"
DELETE_BY_ID = "DELETE FROM person WHERE id = ?"
INSERT = "INSERT INTO person (id, name, location, birth_date) VALUES (?, ?, ?, ?)"
UPDATE = "UPDATE person SET name = ?, location = ?, birth_date = ? WHERE id = ?"


def to_timestamp(value: date | None) -> str | None:
    """Convert a datetime (or a plain date, as midnight) to the stored timestamp text."""
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    return value.isoformat(sep=" ")


def from_timestamp(value: str | None) -> datetime | None:
    """Parse stored timestamp text back into a datetime."""
    if value is None:
        return None
    return datetime.fromisoformat(value)


def row_to_person(row: sqlite3.Row | Mapping[str, Any]) -> Person:
    """Map a result row to a Person, column by column."""
    keys = set(row.keys())
    missing = [column for column in COLUMNS if column not in keys]
    if missing:
        raise RowMappingError(missing)

    return Person(
        id=row["id"],
        name=row["name"],
        location=row["location"],
        birth_date=from_timestamp(row["birth_date"]),
    )


def person_to_params(person: Person) -> tuple[Any, ...]:
    """Map a Person to INSERT parameters, in column order."""
    return (person.id, person.name, person.location, to_timestamp(person.birth_date))


class PersonDao:
    """
    Data access for the person table.

    Each method issues exactly one statement on the connection it was
    constructed with. Driver errors propagate unchanged.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def find_all(self) -> list[Person]:
        """Return every person, in the order the store yields them."""
        rows = self.conn.execute(SELECT_ALL).fetchall()
        return [row_to_person(row) for row in rows]

    def find_by_id(self, person_id: int) -> Person:
        """
        Return the person with the given id.

        Raises:
            IncorrectResultSizeError: If zero or several rows match
        """
        rows = self.conn.execute(SELECT_BY_ID, (person_id,)).fetchall()
        if len(rows) != 1:
            raise IncorrectResultSizeError(expected=1, actual=len(rows), query=SELECT_BY_ID)
        return row_to_person(rows[0])

    def delete_by_id(self, person_id: int) -> int:
        """Delete a person by id. Returns rows affected (0 if absent)."""
        cursor = self.conn.execute(DELETE_BY_ID, (person_id,))
        logger.debug("delete_executed", id=person_id, rows=cursor.rowcount)
        return cursor.rowcount

    def insert(self, person: Person) -> int:
        """
        Insert a new person. Returns rows affected.

        Raises:
            sqlite3.IntegrityError: If the id already exists
        """
        cursor = self.conn.execute(INSERT, person_to_params(person))
        logger.debug("insert_executed", id=person.id, rows=cursor.rowcount)
        return cursor.rowcount

    def update(self, person: Person) -> int:
        """Replace name, location and birth_date of the row with person.id."""
        cursor = self.conn.execute(
            UPDATE,
            (person.name, person.location, to_timestamp(person.birth_date), person.id),
        )
        logger.debug("update_executed", id=person.id, rows=cursor.rowcount)
        return cursor.rowcount
