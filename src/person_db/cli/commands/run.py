"""Start-up routine command."""

from person_db.dao import PersonDao
from person_db.db import database
from person_db.runner import run

from ..ui import render_info_panel


def run_command() -> None:
    """Run find-all, find, delete, insert and update against the database."""
    with database() as conn:
        report = run(PersonDao(conn))

    render_info_panel(
        title="Run Complete",
        content={
            "persons_found": len(report.all_persons),
            "rows_deleted": report.deleted,
            "rows_inserted": report.inserted,
            "rows_updated": report.updated,
        },
    )
