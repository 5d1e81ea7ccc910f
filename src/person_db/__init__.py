"""
Person DB - CRUD demonstration against a relational ``person`` table.

Components:
- models: the Person entity
- dao: PersonDao issuing the fixed SQL statements
- runner: start-up routine that exercises the DAO and logs each result
- cli: Typer entry point (``person-db``)
"""

__version__ = "0.1.0"

from person_db.dao import PersonDao
from person_db.exceptions import IncorrectResultSizeError, PersonDbError, RowMappingError
from person_db.models import Person

__all__ = [
    "IncorrectResultSizeError",
    "Person",
    "PersonDao",
    "PersonDbError",
    "RowMappingError",
    "__version__",
]
