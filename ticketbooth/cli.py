"""Interactive console front end for the booking system."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from ticketbooth.booking import BookingSystem
from ticketbooth.dates import DateTime
from ticketbooth.event import Event
from ticketbooth.records import BookingError

_WIDE_RULE = "========================================================="
_EVENT_RULE = "========================================"
_EVENT_SEPARATOR = "----------------------------------------"
_TICKET_RULE = "============================================"
_TICKET_SEPARATOR = "--------------------------------------------"


def _read_line(prompt: str) -> str:
    return input(prompt)


def _read_token(prompt: str) -> str:
    """Read a line and keep only its first word."""
    words = input(prompt).split()
    return words[0] if words else ""


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _read_float(prompt: str) -> float | None:
    try:
        return float(input(prompt).strip())
    except ValueError:
        return None


def display_system_info() -> str:
    """Print the start-up banner with today's date and return it."""
    banner = "\n".join(
        [
            "",
            _WIDE_RULE,
            "           СИСТЕМА БРОНИРОВАНИЯ БИЛЕТОВ                 ",
            _WIDE_RULE,
            "Версия: 1.0",
            f"Дата: {DateTime.now().to_date_string()}",
            _WIDE_RULE,
            "",
        ]
    )
    print(banner)
    return banner


def display_statistics(system: BookingSystem) -> None:
    """Print sales figures."""
    print()
    print("===================== СТАТИСТИКА =====================")
    print(f"Общая сумма продаж: {system.total_sales():g} руб.")
    print(f"Активных билетов: {system.active_tickets_count()}")
    print(f"Отмененных билетов: {system.canceled_tickets_count()}")
    print(f"Средняя цена билета: {system.average_ticket_price():g} руб.")
    print("=======================================================")
    print()


def search_events(system: BookingSystem) -> None:
    """Ask for a search or sort option and print the matching events."""
    print()
    print("================== ПОИСК СОБЫТИЙ ==================")
    print("1. Поиск по названию")
    print("2. Поиск по категории")
    print("3. Поиск по дате")
    print("4. Показать предстоящие события")
    print("5. Сортировка по дате (от ранней к поздней)")
    print("6. Сортировка по дате (от поздней к ранней)")
    print("7. Сортировка по цене (от низкой к высокой)")
    print("8. Сортировка по цене (от высокой к низкой)")
    print("0. Вернуться в главное меню")
    choice = _read_int("Выберите опцию: ")

    if choice == 0:
        return

    query = ""
    if choice in (1, 2, 3):
        query = _read_line("Введите запрос для поиска: ")

    searches: dict[int, Callable[[], list[Event]]] = {
        1: lambda: system.find_events_by_name(query),
        2: lambda: system.find_events_by_category(query),
        3: lambda: system.find_events_by_date(query),
        4: system.get_upcoming_events,
        5: lambda: system.get_events_sorted_by_date(True),
        6: lambda: system.get_events_sorted_by_date(False),
        7: lambda: system.get_events_sorted_by_price(True),
        8: lambda: system.get_events_sorted_by_price(False),
    }
    search = searches.get(choice) if choice is not None else None
    if search is None:
        print("Неверный выбор!")
        return

    results = search()
    if not results:
        print("Не найдено событий по вашему запросу.")
        return

    print(f"Найдено {len(results)} событий:")
    print(_EVENT_RULE)
    for event in results:
        event.display()
        print(_EVENT_SEPARATOR)


def manage_user_tickets(system: BookingSystem) -> None:
    """List a user's tickets and offer to cancel one."""
    raw_id = _read_line("Введите ID пользователя: ").strip()
    try:
        user = system.find_user_by_id(int(raw_id))
    except ValueError:
        user = None
    if user is None:
        print(f"Пользователь с ID {raw_id} не найден.")
        return

    tickets = system.get_tickets_by_user(user.id)
    if not tickets:
        print(f"У пользователя {user.name} нет билетов.")
        return

    print(f"Билеты пользователя {user.name}:")
    print(_TICKET_RULE)
    for ticket in tickets:
        ticket.display()
        event = system.find_event_by_id(ticket.event_id)
        if event is not None:
            print(f"Событие: {event.name} ({event.date})")
        print(_TICKET_SEPARATOR)

    if _read_int("Хотите отменить бронирование? (1 - Да, 0 - Нет): ") != 1:
        return

    ticket_id = _read_int("Введите ID билета для отмены: ")
    if ticket_id is not None and system.cancel_ticket(ticket_id):
        print("Бронирование успешно отменено.")
    else:
        print("Не удалось отменить бронирование. Проверьте ID билета.")


def edit_event(system: BookingSystem) -> None:
    """Change one field of an event and save it."""
    raw_id = _read_line("Введите ID события для редактирования: ").strip()
    try:
        event = system.find_event_by_id(int(raw_id))
    except ValueError:
        event = None
    if event is None:
        print(f"Событие с ID {raw_id} не найдено.")
        return

    print("Текущая информация о событии:")
    event.display()

    print()
    print("Что вы хотите изменить?")
    print("1. Название")
    print("2. Дату")
    print("3. Место проведения")
    print("4. Базовую цену")
    print("5. Описание")
    print("6. Категорию")
    print("0. Отмена")
    choice = _read_int("Выберите опцию: ")

    if choice == 0:
        return
    if choice == 1:
        event.name = _read_line("Введите новое название: ")
    elif choice == 2:
        event.date = _read_token("Введите новую дату (ГГГГ-ММ-ДД): ")
    elif choice == 3:
        event.venue = _read_line("Введите новое место проведения: ")
    elif choice == 4:
        price = _read_float("Введите новую базовую цену: ")
        if price is None:
            print("Неверное значение цены!")
            return
        event.base_price = price
    elif choice == 5:
        event.description = _read_line("Введите новое описание: ")
    elif choice == 6:
        event.category = _read_line("Введите новую категорию: ")
    else:
        print("Неверный выбор!")
        return

    event.save_to_file(system.data_directory)
    print("Информация о событии успешно обновлена.")


def create_demo_data(system: BookingSystem) -> None:
    """Fill an empty system with sample events, users and bookings."""
    concert1 = system.create_concert(
        "Рок-фестиваль", "2023-07-15", "Стадион", 1000, 2500.0,
        "Разные артисты", "Рок", 240, "Большой рок-фестиваль с участием звезд", "Фестиваль",
    )
    concert2 = system.create_concert(
        "Джазовый вечер", "2023-08-10", "Джаз-клуб", 200, 1500.0,
        "Джаз-банд", "Джаз", 180, "Вечер классического джаза", "Концерт",
    )
    play1 = system.create_theatre_play(
        "Гамлет", "2023-08-20", "Театр драмы", 200, 1500.0,
        "Иванов И.И.", "Драма", 210, 12, "Классическая постановка Шекспира", "Спектакль",
    )
    play2 = system.create_theatre_play(
        "Чайка", "2023-09-05", "Малый театр", 150, 1800.0,
        "Петров П.П.", "Драма", 180, 16, "Пьеса А.П. Чехова", "Спектакль",
    )

    user1 = system.create_user("Иван Петров", "ivan@example.com", "[phone]")
    user2 = system.create_user("Мария Сидорова", "maria@example.com", "[phone]")

    for user, event in ((user1, concert1), (user1, play1), (user2, concert2), (user2, play2)):
        system.create_ticket(event, user)


def _create_event(system: BookingSystem) -> None:
    name = _read_line("Введите название события: ")
    date = _read_token("Введите дату (ГГГГ-ММ-ДД): ")
    venue = _read_line("Введите место проведения: ")
    total_seats = _read_int("Введите количество мест: ")
    base_price = _read_float("Введите базовую цену: ")
    if total_seats is None or base_price is None:
        print("Неверное значение!")
        return

    event_type = _read_int("Выберите тип события (1 - Концерт, 2 - Театральная постановка): ")
    if event_type == 1:
        artist = _read_line("Введите исполнителя: ")
        genre = _read_line("Введите жанр: ")
        duration = _read_int("Введите продолжительность (в минутах): ")
        if duration is None:
            print("Неверное значение!")
            return
        description = _read_line("Введите описание: ")
        category = _read_line("Введите категорию: ")
        system.create_concert(
            name, date, venue, total_seats, base_price,
            artist, genre, duration, description, category,
        )
        print("Концерт успешно создан!")
    elif event_type == 2:
        director = _read_line("Введите режиссера: ")
        genre = _read_line("Введите жанр: ")
        duration = _read_int("Введите продолжительность (в минутах): ")
        age_limit = _read_int("Введите возрастное ограничение: ")
        if duration is None or age_limit is None:
            print("Неверное значение!")
            return
        description = _read_line("Введите описание: ")
        category = _read_line("Введите категорию: ")
        system.create_theatre_play(
            name, date, venue, total_seats, base_price,
            director, genre, duration, age_limit, description, category,
        )
        print("Театральная постановка успешно создана!")
    else:
        print("Неверный тип события!")


def _create_user(system: BookingSystem) -> None:
    name = _read_line("Введите имя пользователя: ")
    email = _read_token("Введите email: ")
    phone = _read_token("Введите телефон: ")
    system.create_user(name, email, phone)
    print("Пользователь успешно создан!")


def _book_ticket(system: BookingSystem) -> None:
    user_id = _read_int("Введите ID пользователя: ")
    event_id = _read_int("Введите ID события: ")
    user = system.find_user_by_id(user_id) if user_id is not None else None
    event = system.find_event_by_id(event_id) if event_id is not None else None
    if user is None or event is None:
        print("Пользователь или событие не найдены!")
        return
    try:
        system.create_ticket(event, user)
    except BookingError:
        print("Не удалось забронировать билет!")
    else:
        print("Билет успешно забронирован!")


def show_menu(system: BookingSystem) -> None:
    """Run the main menu until the user chooses to leave."""
    actions: dict[int, Callable[[], object]] = {
        1: system.display_all_events,
        2: system.display_all_users,
        3: system.display_all_tickets,
        4: lambda: search_events(system),
        5: lambda: _create_event(system),
        6: lambda: _create_user(system),
        7: lambda: _book_ticket(system),
        8: lambda: manage_user_tickets(system),
        9: lambda: edit_event(system),
        10: lambda: display_statistics(system),
    }
    while True:
        print()
        print("====== СИСТЕМА БРОНИРОВАНИЯ БИЛЕТОВ ======")
        print("1. Показать все события")
        print("2. Показать всех пользователей")
        print("3. Показать все билеты")
        print("4. Поиск событий")
        print("5. Создать новое событие")
        print("6. Создать нового пользователя")
        print("7. Забронировать билет")
        print("8. Управление билетами пользователя")
        print("9. Редактировать событие")
        print("10. Показать статистику")
        print("0. Выход")
        choice = _read_int("Выберите опцию: ")

        if choice == 0:
            print("Выход из программы. До свидания!")
            return
        action = actions.get(choice) if choice is not None else None
        if action is None:
            print("Неверный выбор, попробуйте снова.")
        else:
            action()


def main(argv: list[str] | None = None) -> int:
    """Start the booking console."""
    parser = argparse.ArgumentParser(description="Ticket booking console.")
    parser.add_argument(
        "--data-dir", default=".", help="directory holding the data files"
    )
    args = parser.parse_args(argv)

    system = BookingSystem.get_instance()
    system.set_data_directory(args.data_dir)

    display_system_info()

    try:
        if (system.data_directory / Event.FILE_NAME).exists():
            print("Обнаружены существующие данные. Загружаем данные из файлов...")
            system.load_data()
        else:
            print("Файлы с данными не найдены. Создаем демонстрационные данные...")
            create_demo_data(system)
        show_menu(system)
    except EOFError:
        print()
    finally:
        BookingSystem.destroy()
    return 0