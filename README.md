# ticketbooth

A console ticket booking system for concerts and theatre plays. Events,
users and tickets are kept in tab-separated text files in a data directory,
so bookings survive between runs.

## Installation

```
pip install .
```

## Running

```
ticketbooth
ticketbooth --data-dir bookings
```

`--data-dir` names the directory that holds the data files (default: the
current directory); it is created if it does not exist.

If `events.txt` is missing from the data directory, the program fills
itself with demonstration data: two concerts, two theatre plays, two users
and four booked tickets. Otherwise it loads the saved users, concerts,
plays and tickets. End of input (Ctrl-D) leaves the program.

The menu (in Russian) lets you:

- list all events, users and tickets;
- search events by name, category or date, show upcoming ones, or sort
  them by date or base price;
- create concerts, theatre plays and users;
- book a ticket for a user;
- view a user's tickets and cancel one;
- edit an event's name, date, venue, base price, description or category;
- show sales statistics: total sales of active tickets, active and
  canceled ticket counts, and the average price over all tickets.

## Pricing

- A concert ticket costs the base price plus 10%, and a further 5% when
  booked on a Friday, Saturday or Sunday.
- A theatre play ticket costs the base price plus 5%, and a further 10%
  when the play's age limit is 18 or more.

## Using it from Python

```python
from ticketbooth.booking import BookingSystem
from ticketbooth.records import SoldOutError

system = BookingSystem.get_instance()
system.set_data_directory("bookings")

concert = system.create_concert(
    "Jazz-Night", "2030-08-10", "Jazz-Club", 200, 1500.0, "The-Band", "Jazz",
    180, "Classic-jazz", "Concert",
)
user = system.create_user("Ivan", "ivan@example.com", "placeholder")

try:
    ticket = system.create_ticket(concert, user)
except SoldOutError:
    print("sold out")
else:
    print(system.total_sales())
    system.cancel_ticket(ticket.id)   # True; False for unknown or canceled tickets

BookingSystem.destroy()
```

Modules:

- `ticketbooth.dates` — `DateTime`, parsed from `YYYY-MM-DD` or
  `YYYY-MM-DD HH:MM:SS`; malformed text gives the all-zero value.
- `ticketbooth.records` — `BookingError`, `SoldOutError`, the `Storable`
  base class and `upsert_record`, which replaces a matching line in a file
  or appends a new one.
- `ticketbooth.ticket`, `ticketbooth.user`, `ticketbooth.event` — `Ticket`,
  `User`, `Event`, `Concert` and `TheatrePlay`, each with `to_line()`,
  `describe()`, `display()` and `save_to_file(directory)`.
- `ticketbooth.booking` — `BookingSystem`: creation, lookup, search,
  sorting, statistics, `save_all_data()` and `load_data()`.
- `ticketbooth.cli` — the console menu; `main(argv=None)` starts it.

## Data files

`events.txt` (a general record for every event), `concerts.txt`,
`theatreplays.txt`, `users.txt` and `tickets.txt`, one tab-separated record
per line. Saving an existing record replaces its line.

## Limitations

- Loading splits each line on any whitespace, so records whose text fields
  contain spaces (for instance the demonstration users' names) are skipped
  when the data is read back.
- `events.txt` is only checked for existence; events are loaded from
  `concerts.txt` and `theatreplays.txt`, and a loaded event starts with all
  its seats available.
- There is no locking: two programs writing the same data directory at
  once can lose updates.

## Tests

```
pip install .[test]
pytest
```