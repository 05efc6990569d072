"""Registered users."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ticketbooth.records import SoldOutError, Storable, upsert_record
from ticketbooth.ticket import Ticket

if TYPE_CHECKING:
    from ticketbooth.event import Event


@dataclass(eq=False)
class User(Storable):
    """A customer who books tickets."""

    FILE_NAME: ClassVar[str] = "users.txt"

    id: int
    name: str
    email: str
    phone: str
    tickets: list[Ticket] = field(default_factory=list, repr=False)

    def book_ticket(self, event: Event) -> Ticket:
        """Book a seat at ``event``; raises SoldOutError when none are left."""
        if event.available_seats <= 0:
            raise SoldOutError(f"нет доступных мест для события {event.name}")
        return event.create_ticket(self)

    def cancel_ticket(self, ticket_id: int) -> bool:
        """Cancel a ticket through the booking system."""
        from ticketbooth.booking import BookingSystem

        return BookingSystem.get_instance().cancel_ticket(ticket_id)

    def add_ticket(self, ticket: Ticket) -> None:
        self.tickets.append(ticket)

    def remove_ticket(self, ticket_id: int) -> None:
        self.tickets = [ticket for ticket in self.tickets if ticket.id != ticket_id]

    def to_line(self) -> str:
        """The tab-separated record for the users file."""
        return "\t".join([str(self.id), self.name, self.email, self.phone])

    def describe(self) -> str:
        """Human-readable description."""
        lines = [
            f"Пользователь ID: {self.id}",
            f"Имя: {self.name}",
            f"Email: {self.email}",
            f"Телефон: {self.phone}",
        ]
        if self.tickets:
            lines.append(f"Билеты: {len(self.tickets)} шт.")
        return "\n".join(lines)

    def display(self) -> str:
        """Print the description and return the printed text."""
        text = self.describe()
        print(text)
        return text

    def save_to_file(self, directory: str | PathLike[str]) -> None:
        """Write or update this user in the users file in ``directory``."""
        key = str(self.id)
        upsert_record(
            Path(directory) / self.FILE_NAME,
            lambda text: text.split()[:1] == [key],
            self.to_line(),
        )