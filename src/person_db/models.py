"""Entity models."""

from dataclasses import dataclass
from datetime import date, datetime, time


@dataclass
class Person:
    """
    One row of the ``person`` table.

    Attributes:
        id: Caller-assigned identifier (primary key)
        name: Display name
        location: City or place of residence
        birth_date: Birth timestamp; a plain date is stored as midnight
    """

    id: int
    name: str
    location: str
    birth_date: datetime | None

    def __post_init__(self) -> None:
        if isinstance(self.birth_date, date) and not isinstance(self.birth_date, datetime):
            self.birth_date = datetime.combine(self.birth_date, time())

    def __str__(self) -> str:
        birth_date = self.birth_date.isoformat(sep=" ") if self.birth_date else None
        return (
            f"Person[id={self.id}, name={self.name}, location={self.location}, "
            f"birth_date={birth_date}]"
        )
