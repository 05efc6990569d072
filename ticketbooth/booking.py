"""The booking system: events, users and tickets, kept in memory and on disk."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from os import PathLike
from pathlib import Path
from typing import ClassVar, TypeVar

from ticketbooth.dates import DateTime
from ticketbooth.event import Concert, Event, TheatrePlay
from ticketbooth.records import SoldOutError
from ticketbooth.ticket import Ticket
from ticketbooth.user import User

_T = TypeVar("_T")

_SEPARATOR = "----------------------------------------------------"


def _read_tokens(path: Path) -> Iterable[list[str]]:
    """Yield the whitespace-separated tokens of every line of ``path``, if it exists."""
    if not path.exists():
        return
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            yield line.split()


def _first(items: Iterable[_T], predicate: Callable[[_T], bool]) -> _T | None:
    return next((item for item in items if predicate(item)), None)


class BookingSystem:
    """Registry of events, users and tickets with a single shared instance."""

    _instance: ClassVar[BookingSystem | None] = None

    def __init__(self, data_directory: str | PathLike[str] = "./") -> None:
        self.events: list[Event] = []
        self.users: list[User] = []
        self.tickets: list[Ticket] = []
        self.next_event_id = 1
        self.next_user_id = 1
        self.next_ticket_id = 1
        self.data_directory = Path(data_directory)
        self.data_directory.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_instance(cls) -> BookingSystem:
        """The shared booking system, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def destroy(cls) -> None:
        """Drop the shared booking system."""
        cls._instance = None

    # Creation

    def create_concert(
        self,
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
    ) -> Concert:
        concert = Concert(
            self.next_event_id, name, date, venue, total_seats, base_price,
            artist, genre, duration, description, category,
        )
        self.next_event_id += 1
        self.events.append(concert)
        concert.save_to_file(self.data_directory)
        return concert

    def create_theatre_play(
        self,
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
    ) -> TheatrePlay:
        play = TheatrePlay(
            self.next_event_id, name, date, venue, total_seats, base_price,
            director, genre, duration, age_limit, description, category,
        )
        self.next_event_id += 1
        self.events.append(play)
        play.save_to_file(self.data_directory)
        return play

    def create_user(self, name: str, email: str, phone: str) -> User:
        user = User(self.next_user_id, name, email, phone)
        self.next_user_id += 1
        self.users.append(user)
        user.save_to_file(self.data_directory)
        return user

    def create_ticket(self, event: Event, user: User) -> Ticket:
        """Book one seat; raises SoldOutError when the event is full."""
        if event.available_seats <= 0:
            raise SoldOutError(f"нет доступных мест для события {event.name}")
        ticket = Ticket(
            self.next_ticket_id, event.id, user.id, event.calculate_ticket_price()
        )
        self.next_ticket_id += 1
        self.tickets.append(ticket)
        user.add_ticket(ticket)
        event.decrease_available_seats()
        ticket.save_to_file(self.data_directory)
        event.save_to_file(self.data_directory)
        return ticket

    def cancel_ticket(self, ticket_id: int) -> bool:
        """Cancel an active ticket; False when it is unknown or already canceled."""
        ticket = self.find_ticket_by_id(ticket_id)
        if ticket is None or not ticket.is_active:
            return False
        ticket.is_active = False

        event = self.find_event_by_id(ticket.event_id)
        if event is not None:
            event.increase_available_seats()
            event.save_to_file(self.data_directory)

        user = self.find_user_by_id(ticket.user_id)
        if user is not None:
            user.remove_ticket(ticket_id)

        ticket.save_to_file(self.data_directory)
        return True

    # Lookup

    def find_event_by_id(self, event_id: int) -> Event | None:
        return _first(self.events, lambda event: event.id == event_id)

    def find_user_by_id(self, user_id: int) -> User | None:
        return _first(self.users, lambda user: user.id == user_id)

    def find_ticket_by_id(self, ticket_id: int) -> Ticket | None:
        return _first(self.tickets, lambda ticket: ticket.id == ticket_id)

    def find_events_by_name(self, name_substr: str) -> list[Event]:
        return [event for event in self.events if name_substr in event.name]

    def find_events_by_category(self, category: str) -> list[Event]:
        return [event for event in self.events if event.category == category]

    def find_events_by_date(self, date: str) -> list[Event]:
        wanted = DateTime.parse(date).to_date_string()
        return [
            event for event in self.events
            if event.event_date.to_date_string() == wanted
        ]

    def get_upcoming_events(self) -> list[Event]:
        now = DateTime.now()
        return [event for event in self.events if event.event_date > now]

    def get_events_sorted_by_date(self, ascending: bool = True) -> list[Event]:
        return sorted(
            self.events, key=lambda event: event.event_date, reverse=not ascending
        )

    def get_events_sorted_by_price(self, ascending: bool = True) -> list[Event]:
        return sorted(
            self.events, key=lambda event: event.base_price, reverse=not ascending
        )

    def find_users_by_name(self, name_substr: str) -> list[User]:
        return [user for user in self.users if name_substr in user.name]

    def get_tickets_by_user(self, user_id: int) -> list[Ticket]:
        return [ticket for ticket in self.tickets if ticket.user_id == user_id]

    def get_tickets_by_event(self, event_id: int) -> list[Ticket]:
        return [ticket for ticket in self.tickets if ticket.event_id == event_id]

    def get_active_tickets(self) -> list[Ticket]:
        return [ticket for ticket in self.tickets if ticket.is_active]

    # Display

    @staticmethod
    def _display_all(title: str, items: Iterable[Event | User | Ticket]) -> None:
        print(f"=================== {title} ===================")
        for item in items:
            item.display()
            print(_SEPARATOR)

    def display_all_events(self) -> None:
        self._display_all("Список событий", self.events)

    def display_all_users(self) -> None:
        self._display_all("Список пользователей", self.users)

    def display_all_tickets(self) -> None:
        self._display_all("Список билетов", self.tickets)

    # Statistics

    def total_sales(self) -> float:
        """Sum of the prices of active tickets."""
        return sum((ticket.price for ticket in self.tickets if ticket.is_active), 0.0)

    def active_tickets_count(self) -> int:
        return sum(1 for ticket in self.tickets if ticket.is_active)

    def canceled_tickets_count(self) -> int:
        return sum(1 for ticket in self.tickets if not ticket.is_active)

    def average_ticket_price(self) -> float:
        """Mean price over all tickets, canceled ones included; 0.0 when none."""
        if not self.tickets:
            return 0.0
        return sum(ticket.price for ticket in self.tickets) / len(self.tickets)

    # Storage

    def set_data_directory(self, directory: str | PathLike[str]) -> None:
        self.data_directory = Path(directory)
        self.data_directory.mkdir(parents=True, exist_ok=True)

    def save_all_data(self) -> None:
        for record in (*self.events, *self.users, *self.tickets):
            record.save_to_file(self.data_directory)

    def load_data(self) -> None:
        """Read users, concerts, plays and tickets from the data directory."""
        self._load_users()
        self._load_concerts()
        self._load_plays()
        self._load_tickets()
        print("Данные успешно загружены из файлов.")
        print(
            f"Загружено: {len(self.users)} пользователей, "
            f"{len(self.events)} событий, {len(self.tickets)} билетов."
        )

    def _load_users(self) -> None:
        for tokens in _read_tokens(self.data_directory / User.FILE_NAME):
            if len(tokens) < 4:
                continue
            try:
                user_id = int(tokens[0])
            except ValueError:
                continue
            self.next_user_id = max(self.next_user_id, user_id + 1)
            self.users.append(User(user_id, tokens[1], tokens[2], tokens[3]))

    def _load_concerts(self) -> None:
        for tokens in _read_tokens(self.data_directory / Concert.FILE_NAME):
            if len(tokens) < 12:
                continue
            try:
                event_id = int(tokens[0])
                total_seats = int(tokens[4])
                int(tokens[5])
                base_price = float(tokens[6])
                duration = int(tokens[9])
            except ValueError:
                continue
            self.next_event_id = max(self.next_event_id, event_id + 1)
            self.events.append(
                Concert(
                    event_id, tokens[1], tokens[2], tokens[3], total_seats,
                    base_price, tokens[7], tokens[8], duration, tokens[10], tokens[11],
                )
            )

    def _load_plays(self) -> None:
        for tokens in _read_tokens(self.data_directory / TheatrePlay.FILE_NAME):
            if len(tokens) < 13:
                continue
            try:
                event_id = int(tokens[0])
                total_seats = int(tokens[4])
                int(tokens[5])
                base_price = float(tokens[6])
                duration = int(tokens[9])
                age_limit = int(tokens[10])
            except ValueError:
                continue
            self.next_event_id = max(self.next_event_id, event_id + 1)
            self.events.append(
                TheatrePlay(
                    event_id, tokens[1], tokens[2], tokens[3], total_seats,
                    base_price, tokens[7], tokens[8], duration, age_limit,
                    tokens[11], tokens[12],
                )
            )

    def _load_tickets(self) -> None:
        for tokens in _read_tokens(self.data_directory / Ticket.FILE_NAME):
            if len(tokens) < 6:
                continue
            try:
                ticket_id = int(tokens[0])
                event_id = int(tokens[1])
                user_id = int(tokens[2])
                price = float(tokens[3])
            except ValueError:
                continue
            self.next_ticket_id = max(self.next_ticket_id, ticket_id + 1)
            is_active = tokens[-1] == "active"
            ticket = Ticket(
                ticket_id, event_id, user_id, price,
                booking_time=" ".join(tokens[4:-1]), is_active=is_active,
            )
            self.tickets.append(ticket)
            user = self.find_user_by_id(user_id)
            if user is not None and is_active:
                user.add_ticket(ticket)