"""
Start-up routine.

Runs the DAO operations in a fixed order and logs each result. There is no
error handling here: any failure propagates to the caller and aborts the run.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import structlog

from person_db.dao import PersonDao
from person_db.models import Person

logger = structlog.get_logger(__name__)


@dataclass
class RunReport:
    """Results of one start-up run, one attribute per step."""

    all_persons: list[Person] = field(default_factory=list)
    found: Person | None = None
    deleted: int = 0
    inserted: int = 0
    updated: int = 0


def run(
    dao: PersonDao,
    *,
    birth_date: datetime | None = None,
    log: Any = None,
) -> RunReport:
    """
    Execute find_all, find_by_id, delete_by_id, insert and update in order.

    Args:
        dao: Data-access object bound to an initialized database
        birth_date: Birth date for the inserted and updated person (default: now)
        log: Logger to write results to (default: module logger)

    Returns:
        RunReport with each operation's result
    """
    log = log or logger
    birth_date = birth_date or datetime.now()
    report = RunReport()

    report.all_persons = dao.find_all()
    log.info("all_persons", persons=[str(p) for p in report.all_persons])

    report.found = dao.find_by_id(10001)
    log.info("person_by_id", id=10001, person=str(report.found))

    report.deleted = dao.delete_by_id(10002)
    log.info("person_deleted", id=10002, rows_deleted=report.deleted)

    report.inserted = dao.insert(Person(10004, "Mark", "Amsterdam", birth_date))
    log.info("person_inserted", id=10004, rows_inserted=report.inserted)

    report.updated = dao.update(Person(10004, "Jill", "Berlin", birth_date))
    log.info("person_updated", id=10004, rows_updated=report.updated)

    return report
