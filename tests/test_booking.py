import pytest

from ticketbooth.booking import BookingSystem
from ticketbooth.event import Concert, TheatrePlay
from ticketbooth.records import SoldOutError


@pytest.fixture
def system(tmp_path):
    BookingSystem.destroy()
    booking = BookingSystem.get_instance()
    booking.set_data_directory(tmp_path)
    yield booking
    BookingSystem.destroy()


def _concert(system, name="Rock", date="2999-07-15", seats=10, price=100.0, category="Fest"):
    return system.create_concert(
        name, date, "Stadium", seats, price, "Artists", "Rock", 240, "Big", category
    )


def _play(system, name="Hamlet", date="2999-08-20", seats=10, price=200.0, age=0):
    return system.create_theatre_play(
        name, date, "Theatre", seats, price, "Director", "Drama", 210, age, "Classic", "Play"
    )


def test_singleton_is_shared_until_destroyed(system):
    assert BookingSystem.get_instance() is system
    BookingSystem.destroy()
    assert BookingSystem.get_instance() is not system


def test_create_user_assigns_sequential_ids_and_saves(system, tmp_path):
    first = system.create_user("Ivan", "ivan@example.com", "phone-a")
    second = system.create_user("Maria", "maria@example.com", "phone-b")
    assert (first.id, second.id) == (1, 2)
    lines = (tmp_path / "users.txt").read_text(encoding="utf-8").splitlines()
    assert lines == [first.to_line(), second.to_line()]


def test_events_share_id_sequence_and_files(system, tmp_path):
    concert = _concert(system)
    play = _play(system)
    assert (concert.id, play.id) == (1, 2)
    assert isinstance(concert, Concert) and isinstance(play, TheatrePlay)
    assert (tmp_path / "concerts.txt").read_text(encoding="utf-8").splitlines() == [concert.to_line()]
    assert (tmp_path / "theatreplays.txt").read_text(encoding="utf-8").splitlines() == [play.to_line()]
    events = (tmp_path / "events.txt").read_text(encoding="utf-8").splitlines()
    assert [line.split("\t")[:2] for line in events] == [["Event", "1"], ["Event", "2"]]


def test_default_categories(system):
    concert = system.create_concert("A", "2999-01-01", "V", 5, 10.0, "X", "Y")
    play = system.create_theatre_play("B", "2999-01-01", "V", 5, 10.0, "D", "G")
    assert concert.category == "Концерт"
    assert play.category == "Театр"
    assert (concert.duration, play.duration, play.age_limit) == (120, 180, 0)


def test_create_ticket_books_a_seat(system):
    play = _play(system, age=18)
    user = system.create_user("Ivan", "ivan@example.com", "phone-a")
    ticket = system.create_ticket(play, user)
    assert ticket.price == pytest.approx(play.calculate_ticket_price())
    assert (ticket.event_id, ticket.user_id) == (play.id, user.id)
    assert play.available_seats == play.total_seats - 1
    assert user.tickets == [ticket]
    assert system.find_ticket_by_id(ticket.id) is ticket


def test_user_booking_goes_through_system(system):
    concert = _concert(system, seats=1)
    user = system.create_user("Ivan", "ivan@example.com", "phone-a")
    ticket = user.book_ticket(concert)
    assert system.get_tickets_by_user(user.id) == [ticket]
    with pytest.raises(SoldOutError):
        system.create_ticket(concert, user)
    assert concert.available_seats == 0
    assert len(system.tickets) == 1


def test_cancel_ticket_restores_seat(system):
    concert = _concert(system)
    user = system.create_user("Ivan", "ivan@example.com", "phone-a")
    ticket = system.create_ticket(concert, user)
    assert system.cancel_ticket(ticket.id) is True
    assert ticket.is_active is False
    assert concert.available_seats == concert.total_seats
    assert user.tickets == []
    assert system.cancel_ticket(ticket.id) is False
    assert system.cancel_ticket(999) is False
    assert user.cancel_ticket(ticket.id) is False


def test_lookups_return_none_for_unknown_ids(system):
    assert system.find_event_by_id(42) is None
    assert system.find_user_by_id(42) is None
    assert system.find_ticket_by_id(42) is None


def test_search_by_name_category_and_date(system):
    rock = _concert(system, name="Rock-fest", date="2999-07-15", category="Fest")
    jazz = _concert(system, name="Jazz", date="2999-08-10", category="Concert")
    assert system.find_events_by_name("fest") == [rock]
    assert system.find_events_by_name("") == [rock, jazz]
    assert system.find_events_by_category("Concert") == [jazz]
    assert system.find_events_by_date("2999-08-10") == [jazz]
    assert system.find_events_by_date("2999-08-10 12:00:00") == [jazz]
    assert system.find_events_by_date("2999-01-01") == []


def test_upcoming_excludes_past(system):
    future = _concert(system, date="2999-07-15")
    _concert(system, date="2000-01-01")
    assert system.get_upcoming_events() == [future]


def test_sorting(system):
    late = _concert(system, date="2999-09-01", price=300.0)
    early = _concert(system, date="2999-01-01", price=100.0)
    middle = _play(system, date="2999-05-01", price=200.0)
    assert system.get_events_sorted_by_date() == [early, middle, late]
    assert system.get_events_sorted_by_date(False) == [late, middle, early]
    assert system.get_events_sorted_by_price(True) == [early, middle, late]
    assert system.get_events_sorted_by_price(ascending=False) == [late, middle, early]
    assert system.events == [late, early, middle]


def test_user_and_ticket_filters(system):
    concert = _concert(system)
    play = _play(system)
    ivan = system.create_user("Ivan Petrov", "ivan@example.com", "phone-a")
    maria = system.create_user("Maria", "maria@example.com", "phone-b")
    first = system.create_ticket(concert, ivan)
    second = system.create_ticket(play, maria)
    third = system.create_ticket(play, ivan)
    system.cancel_ticket(third.id)
    assert system.find_users_by_name("Petrov") == [ivan]
    assert system.get_tickets_by_user(ivan.id) == [first, third]
    assert system.get_tickets_by_event(play.id) == [second, third]
    assert system.get_active_tickets() == [first, second]


def test_statistics(system):
    assert system.average_ticket_price() == 0.0
    assert system.total_sales() == 0.0
    play = _play(system, price=100.0)
    user = system.create_user("Ivan", "ivan@example.com", "phone-a")
    kept = system.create_ticket(play, user)
    dropped = system.create_ticket(play, user)
    system.cancel_ticket(dropped.id)
    assert system.total_sales() == pytest.approx(kept.price)
    assert system.active_tickets_count() == 1
    assert system.canceled_tickets_count() == 1
    assert system.average_ticket_price() == pytest.approx((kept.price + dropped.price) / 2)


def test_display_all_events(system, capsys):
    concert = _concert(system)
    system.display_all_events()
    out = capsys.readouterr().out
    assert out.startswith("=================== Список событий ===================")
    assert concert.describe() in out


def test_save_and_load_round_trip(system, tmp_path):
    concert = _concert(system)
    play = _play(system, age=16)
    user = system.create_user("Ivan", "ivan@example.com", "phone-a")
    ticket = system.create_ticket(play, user)
    canceled = system.create_ticket(concert, user)
    system.cancel_ticket(canceled.id)
    system.save_all_data()

    BookingSystem.destroy()
    loaded = BookingSystem.get_instance()
    loaded.set_data_directory(tmp_path)
    loaded.load_data()

    assert [(e.id, e.name, type(e)) for e in loaded.events] == [
        (concert.id, concert.name, Concert),
        (play.id, play.name, TheatrePlay),
    ]
    loaded_play = loaded.find_event_by_id(play.id)
    assert loaded_play.age_limit == 16
    assert loaded_play.date == play.date
    loaded_user = loaded.find_user_by_id(user.id)
    assert loaded_user.email == user.email
    assert [t.id for t in loaded_user.tickets] == [ticket.id]
    loaded_ticket = loaded.find_ticket_by_id(ticket.id)
    assert loaded_ticket.booking_time == ticket.booking_time
    assert loaded_ticket.is_active is True
    assert loaded.find_ticket_by_id(canceled.id).is_active is False

    new_user = loaded.create_user("Maria", "maria@example.com", "phone-b")
    new_event = _concert(loaded)
    assert new_user.id == user.id + 1
    assert new_event.id == play.id + 1
    assert loaded.next_ticket_id == canceled.id + 1


def test_load_skips_lines_that_do_not_parse(system, tmp_path):
    (tmp_path / "users.txt").write_text(
        "x\tbad\tbad@example.com\tphone\n7\tIvan\tivan@example.com\tphone\n",
        encoding="utf-8",
    )
    system.load_data()
    assert [u.id for u in system.users] == [7]
    assert system.next_user_id == 8