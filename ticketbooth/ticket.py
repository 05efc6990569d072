"""Booked tickets."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import ClassVar

from ticketbooth.dates import DateTime
from ticketbooth.records import Storable, upsert_record


def _current_timestamp() -> str:
    return DateTime.now().to_string()


@dataclass(eq=False)
class Ticket(Storable):
    """A seat booked by a user for an event."""

    FILE_NAME: ClassVar[str] = "tickets.txt"

    id: int
    event_id: int
    user_id: int
    price: float
    booking_time: str = field(default_factory=_current_timestamp)
    is_active: bool = True

    @property
    def status(self) -> str:
        return "active" if self.is_active else "canceled"

    def to_line(self) -> str:
        """The tab-separated record for the tickets file."""
        return "\t".join(
            [
                str(self.id),
                str(self.event_id),
                str(self.user_id),
                f"{self.price:g}",
                self.booking_time,
                self.status,
            ]
        )

    def describe(self) -> str:
        """Human-readable description."""
        return "\n".join(
            [
                f"Билет ID: {self.id}",
                f"Событие ID: {self.event_id}",
                f"Пользователь ID: {self.user_id}",
                f"Цена: {self.price:g} руб.",
                f"Время бронирования: {self.booking_time}",
                f"Статус: {'Активен' if self.is_active else 'Отменен'}",
            ]
        )

    def display(self) -> str:
        """Print the description and return the printed text."""
        text = self.describe()
        print(text)
        return text

    def save_to_file(self, directory: str | PathLike[str]) -> None:
        """Write or update this ticket in the tickets file in ``directory``."""
        key = str(self.id)
        upsert_record(
            Path(directory) / self.FILE_NAME,
            lambda text: text.split()[:1] == [key],
            self.to_line(),
        )