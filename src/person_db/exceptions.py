"""
Person DB exceptions.

Driver errors (sqlite3.IntegrityError for a duplicate id, for example) are
not wrapped and propagate as raised by the driver. The types here cover the
conditions the driver itself does not report.
"""


class PersonDbError(Exception):
    """Base class for person_db errors."""


class IncorrectResultSizeError(PersonDbError):
    """A single-row query matched zero or several rows."""

    def __init__(self, expected: int, actual: int, query: str | None = None):
        self.expected = expected
        self.actual = actual
        self.query = query
        message = f"Incorrect result size: expected {expected}, actual {actual}"
        if query:
            message = f"{message} ({query})"
        super().__init__(message)


class RowMappingError(PersonDbError):
    """A result row lacks columns required to build an entity."""

    def __init__(self, missing_columns: list[str]):
        self.missing_columns = missing_columns
        super().__init__(f"Row is missing columns: {', '.join(missing_columns)}")
