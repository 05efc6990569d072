"""Events that can be booked: the general event, concerts and theatre plays."""

from __future__ import annotations

from datetime import date as _calendar_date
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ticketbooth.dates import DateTime
from ticketbooth.records import Storable, upsert_record

if TYPE_CHECKING:
    from ticketbooth.ticket import Ticket
    from ticketbooth.user import User

# Python weekday numbers for Friday, Saturday and Sunday.
_WEEKEND_DAYS = frozenset({4, 5, 6})


class Event(Storable):
    """A dated event at a venue with a fixed number of seats."""

    FILE_NAME: ClassVar[str] = "events.txt"

    def __init__(
        self,
        id: int,
        name: str,
        date: str,
        venue: str,
        total_seats: int,
        base_price: float,
        description: str = "",
        category: str = "Общее",
    ) -> None:
        self.id = id
        self.name = name
        self.event_date = DateTime.parse(date)
        self.venue = venue
        self.total_seats = total_seats
        self.available_seats = total_seats
        self.base_price = base_price
        self.description = description
        self.category = category

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, name={self.name!r}, "
            f"date={self.date!r}, venue={self.venue!r})"
        )

    @property
    def date(self) -> str:
        """The event date as ``YYYY-MM-DD``."""
        return self.event_date.to_date_string()

    @date.setter
    def date(self, text: str) -> None:
        self.event_date = DateTime.parse(text)

    def is_expired(self) -> bool:
        """Whether the event lies in the past."""
        return self.event_date < DateTime.now()

    def calculate_ticket_price(self) -> float:
        """The price charged for one ticket."""
        return self.base_price

    def create_ticket(self, user: User) -> Ticket:
        """Book a ticket for ``user`` through the booking system."""
        from ticketbooth.booking import BookingSystem

        return BookingSystem.get_instance().create_ticket(self, user)

    def decrease_available_seats(self) -> None:
        if self.available_seats > 0:
            self.available_seats -= 1

    def increase_available_seats(self) -> None:
        if self.available_seats < self.total_seats:
            self.available_seats += 1

    def _event_line(self) -> str:
        return "\t".join(
            [
                "Event",
                str(self.id),
                self.name,
                self.date,
                self.venue,
                str(self.total_seats),
                str(self.available_seats),
                f"{self.base_price:g}",
                self.description,
                self.category,
            ]
        )

    def to_line(self) -> str:
        """The tab-separated record for this event's file."""
        return self._event_line()

    def describe(self) -> str:
        """Human-readable description."""
        lines = [
            f"Событие ID: {self.id}",
            f"Название: {self.name}",
            f"Дата: {self.date}",
            f"Место проведения: {self.venue}",
            f"Доступно мест: {self.available_seats} из {self.total_seats}",
            f"Базовая цена: {self.base_price:g} руб.",
        ]
        if self.description:
            lines.append(f"Описание: {self.description}")
        lines.append(f"Категория: {self.category}")
        lines.append(f"Статус: {'Прошедшее' if self.is_expired() else 'Предстоящее'}")
        return "\n".join(lines)

    def display(self) -> str:
        """Print the description and return the printed text."""
        text = self.describe()
        print(text)
        return text

    def save_to_file(self, directory: str | PathLike[str]) -> None:
        """Write or update the general record in the events file in ``directory``."""
        key = str(self.id)
        upsert_record(
            Path(directory) / Event.FILE_NAME,
            lambda text: text.split()[:2] == ["Event", key],
            self._event_line(),
        )

    def _save_own_record(self, directory: str | PathLike[str]) -> None:
        key = str(self.id)
        upsert_record(
            Path(directory) / self.FILE_NAME,
            lambda text: text.split()[:1] == [key],
            self.to_line(),
        )


class Concert(Event):
    """A musical performance."""

    FILE_NAME: ClassVar[str] = "concerts.txt"

    def __init__(
        self,
        id: int,
        name: str,
        date: str,
        venue: str,
        total_seats: int,
        base_price: float,
        artist: str,
        genre: str,
        duration: int = 120,
        description: str = "",
        category: str = "Концерт",
    ) -> None:
        super().__init__(
            id, name, date, venue, total_seats, base_price, description, category
        )
        self.artist = artist
        self.genre = genre
        self.duration = duration

    def calculate_ticket_price(self) -> float:
        """Base price plus 10%, and 5% more when booked Friday to Sunday."""
        price = self.base_price * 1.1
        if _calendar_date.today().weekday() in _WEEKEND_DAYS:
            price *= 1.05
        return price

    def to_line(self) -> str:
        return "\t".join(
            [
                str(self.id),
                self.name,
                self.date,
                self.venue,
                str(self.total_seats),
                str(self.available_seats),
                f"{self.base_price:g}",
                self.artist,
                self.genre,
                str(self.duration),
                self.description,
                self.category,
            ]
        )

    def describe(self) -> str:
        return "\n".join(
            [
                super().describe(),
                f"Исполнитель: {self.artist}",
                f"Жанр: {self.genre}",
                f"Продолжительность: {self.duration} мин.",
            ]
        )

    def save_to_file(self, directory: str | PathLike[str]) -> None:
        """Write the concert record and the general event record."""
        self._save_own_record(directory)
        super().save_to_file(directory)


class TheatrePlay(Event):
    """A staged play."""

    FILE_NAME: ClassVar[str] = "theatreplays.txt"

    def __init__(
        self,
        id: int,
        name: str,
        date: str,
        venue: str,
        total_seats: int,
        base_price: float,
        director: str,
        genre: str,
        duration: int = 180,
        age_limit: int = 0,
        description: str = "",
        category: str = "Театр",
    ) -> None:
        super().__init__(
            id, name, date, venue, total_seats, base_price, description, category
        )
        self.director = director
        self.genre = genre
        self.duration = duration
        self.age_limit = age_limit

    def calculate_ticket_price(self) -> float:
        """Base price plus 5%, and 10% more for adult-only plays."""
        price = self.base_price * 1.05
        if self.age_limit >= 18:
            price *= 1.1
        return price

    def to_line(self) -> str:
        return "\t".join(
            [
                str(self.id),
                self.name,
                self.date,
                self.venue,
                str(self.total_seats),
                str(self.available_seats),
                f"{self.base_price:g}",
                self.director,
                self.genre,
                str(self.duration),
                str(self.age_limit),
                self.description,
                self.category,
            ]
        )

    def describe(self) -> str:
        limit = f"{self.age_limit}+" if self.age_limit > 0 else "Без ограничений"
        return "\n".join(
            [
                super().describe(),
                f"Режиссер: {self.director}",
                f"Жанр: {self.genre}",
                f"Продолжительность: {self.duration} мин.",
                f"Возрастное ограничение: {limit}",
            ]
        )

    def save_to_file(self, directory: str | PathLike[str]) -> None:
        """Write the play record and the general event record."""
        self._save_own_record(directory)
        super().save_to_file(directory)