"""Allow ``python -m person_db``."""

from person_db.cli import cli_main

cli_main()
