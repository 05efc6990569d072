"""Calendar date and time of day with second precision."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return int(match.group(1))


@dataclass(frozen=True, order=True)
class DateTime:
    """A point in time; compares field by field from year down to second."""

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def parse(cls, text: str) -> DateTime:
        """Parse ``YYYY-MM-DD`` or ``YYYY-MM-DD HH:MM:SS``.

        Text that is too short or malformed gives the all-zero value.
        """
        if len(text) < 10:
            return cls()
        try:
            date = (
                _leading_int(text[0:4]),
                _leading_int(text[5:7]),
                _leading_int(text[8:10]),
            )
            clock = (0, 0, 0)
            if len(text) >= 19:
                clock = (
                    _leading_int(text[11:13]),
                    _leading_int(text[14:16]),
                    _leading_int(text[17:19]),
                )
        except ValueError:
            return cls()
        return cls(*date, *clock)

    @classmethod
    def now(cls) -> DateTime:
        """The current local time."""
        current = datetime.now()
        return cls(
            current.year,
            current.month,
            current.day,
            current.hour,
            current.minute,
            current.second,
        )

    def to_string(self) -> str:
        """Format as ``YYYY-MM-DD HH:MM:SS``."""
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

    def to_date_string(self) -> str:
        """Format the date part as ``YYYY-MM-DD``."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.to_string()