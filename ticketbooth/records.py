"""Errors and plain-text record storage shared by the booking entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from os import PathLike
from pathlib import Path


class BookingError(Exception):
    """A booking operation could not be carried out."""


class SoldOutError(BookingError):
    """The event has no seats left."""


class Storable(ABC):
    """Something that can write itself to a record file."""

    @abstractmethod
    def save_to_file(self, directory: str | PathLike[str]) -> None:
        """Write or update this record in ``directory``."""


def upsert_record(
    path: str | PathLike[str], matches: Callable[[str], bool], line: str
) -> None:
    """Replace the last line of ``path`` that ``matches`` accepts, or append ``line``."""
    path = Path(path)
    lines: list[str] = []
    target: int | None = None
    if path.exists():
        lines = path.read_text(encoding="utf-8").splitlines()
        for number, existing in enumerate(lines):
            if matches(existing):
                target = number

    if target is None:
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
        return

    lines[target] = line
    path.write_text("".join(text + "\n" for text in lines), encoding="utf-8")