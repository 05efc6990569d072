import pytest

from ticketbooth.records import SoldOutError
from ticketbooth.ticket import Ticket
from ticketbooth.user import User


class _FakeEvent:
    def __init__(self, seats):
        self.name = "Гамлет"
        self.available_seats = seats
        self.bookers = []

    def create_ticket(self, user):
        self.bookers.append(user)
        self.available_seats -= 1
        ticket = Ticket(len(self.bookers), 1, user.id, 100.0)
        user.add_ticket(ticket)
        return ticket


def _user():
    return User(1, "Иван", "ivan@example.com", "000")


def test_book_ticket_returns_ticket():
    user = _user()
    event = _FakeEvent(2)
    ticket = user.book_ticket(event)
    assert ticket.user_id == user.id
    assert user.tickets == [ticket]
    assert event.available_seats == 1


def test_book_ticket_sold_out():
    user = _user()
    event = _FakeEvent(0)
    with pytest.raises(SoldOutError):
        user.book_ticket(event)
    assert event.bookers == []
    assert user.tickets == []


def test_add_and_remove_ticket():
    user = _user()
    first = Ticket(1, 1, 1, 10.0)
    second = Ticket(2, 1, 1, 10.0)
    user.add_ticket(first)
    user.add_ticket(second)
    user.remove_ticket(1)
    assert [t.id for t in user.tickets] == [2]
    user.remove_ticket(99)
    assert [t.id for t in user.tickets] == [2]


def test_to_line():
    assert _user().to_line() == "1\tИван\tivan@example.com\t000"


def test_describe_ticket_count(capsys):
    user = _user()
    assert "Билеты" not in user.describe()
    user.add_ticket(Ticket(1, 1, 1, 10.0))
    user.add_ticket(Ticket(2, 1, 1, 10.0))
    assert "Билеты: 2 шт." in user.describe()
    user.display()
    assert "Email: ivan@example.com" in capsys.readouterr().out


def test_save_appends_then_updates(tmp_path):
    user = _user()
    other = User(2, "Мария", "maria@example.com", "111")
    user.save_to_file(tmp_path)
    other.save_to_file(tmp_path)
    user.name = "Пётр"
    user.save_to_file(tmp_path)
    lines = (tmp_path / "users.txt").read_text(encoding="utf-8").splitlines()
    assert lines == [user.to_line(), other.to_line()]