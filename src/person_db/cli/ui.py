"""Rich UI components for panels and tables."""

from typing import Any

from rich.panel import Panel
from rich.table import Table

from person_db.models import Person

from .console import console


def render_error_panel(title: str, message: str, details: list[str] | None = None) -> None:
    """Render error panel."""
    lines = [message]

    if details:
        lines.append("")
        for detail in details:
            lines.append(f"  • {detail}")

    panel = Panel("\n".join(lines), title=title, border_style="red")
    console.print(panel)


def render_info_panel(title: str, message: str | None = None, content: dict[str, Any] | None = None) -> None:
    """Render informational panel."""
    lines = []

    if message:
        lines.append(message)

    if content:
        for key, value in content.items():
            display_key = key.replace("_", " ").title()
            lines.append(f"{display_key}: {value}")

    panel = Panel("\n".join(lines), title=title, border_style="cyan")
    console.print(panel)


def render_persons_table(persons: list[Person], title: str = "Persons") -> None:
    """Render persons as a table."""
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name")
    table.add_column("Location")
    table.add_column("Birth Date", style="dim")

    for person in persons:
        birth_date = person.birth_date.isoformat(sep=" ") if person.birth_date else ""
        table.add_row(str(person.id), person.name, person.location or "", birth_date)

    console.print(table)
