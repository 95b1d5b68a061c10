"""Borrow records and the ordered list that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator

from labdevices.devices import standardize_name

DATE_FORMAT = "%d/%m/%Y"

_TABLE_HEADER = (
    f"{'Name Borrower':<20}{'Name Device':<15}{'ID':<10}{'Date':<10}{'Expired Day':<13}\n"
    f"{'------------------':<20}{'-------------':<15}{'--------':<10}{'------':<10}{'------':<13}\n"
)

_SEARCH_HEADER = (
    f"{'Name Borrower':<20}{'Name Device':<15}{'ID':<10}{'Date':<10}{'Return Date':<10}\n"
    f"{'------------------':<20}{'-------------':<15}{'--------':<10}{'------':<10}{'------':<10}\n"
)


@dataclass
class Borrower:
    """One loan: who borrowed which device, when, and when it is due back."""

    name: str
    device_name: str
    device_id: str
    today: str
    expired_day: str = ""

    def format_row(self) -> str:
        """Fixed-width table row, without a trailing newline."""
        return (
            f"{self.name:<20}{self.device_name:<15}{self.device_id:<10}"
            f"{self.today:<10}{self.expired_day:<10}"
        )


def add_days(date_str: str, days: int) -> str:
    """Return the dd/mm/yyyy date ``days`` days after ``date_str``.

    Raises ValueError if ``date_str`` is not a dd/mm/yyyy date.
    """
    try:
        start = datetime.strptime(date_str.strip(), DATE_FORMAT)
    except ValueError:
        raise ValueError(f"Invalid date format: {date_str!r}") from None
    return (start + timedelta(days=days)).strftime(DATE_FORMAT)


def standardize_borrower_name(name: str) -> str:
    """Collapse whitespace and capitalise each word of a borrower's name."""
    return standardize_name(name)


class BorrowList:
    """Ordered collection of loans."""

    def __init__(self) -> None:
        self._items: list[Borrower] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Borrower]:
        return iter(self._items)

    def add_first(self, borrower: Borrower) -> None:
        """Put a loan at the front."""
        self._items.insert(0, borrower)

    def add_last(self, borrower: Borrower) -> None:
        """Put a loan at the back."""
        self._items.append(borrower)

    def insert_at(self, borrower: Borrower, position: int) -> bool:
        """Insert relative to the 1-based ``position``.

        Position 1 inserts at the front; any other valid position inserts just
        after the entry at that position. Returns False, changing nothing, if
        ``position`` is outside 1..len.
        """
        if position < 1 or position > len(self._items):
            return False
        index = 0 if position == 1 else position
        self._items.insert(index, borrower)
        return True

    def delete_first(self) -> None:
        """Drop the first loan, if any."""
        if self._items:
            del self._items[0]

    def delete_at(self, position: int) -> bool:
        """Drop the loan at 1-based ``position``; False if out of range."""
        if position < 1 or position > len(self._items):
            return False
        del self._items[position - 1]
        return True

    def delete_last(self) -> None:
        """Drop the last loan, if any."""
        if self._items:
            del self._items[-1]

    def find(self, query: str) -> list[Borrower]:
        """Loans whose borrower name or device ID equals ``query``."""
        return [b for b in self._items if b.name == query or b.device_id == query]

    def remove_by_name(self, name: str) -> int:
        """Remove every loan registered under ``name``; return how many went."""
        kept = [b for b in self._items if b.name != name]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def format_table(self) -> str:
        """All loans as a fixed-width table with a header."""
        rows = "".join(f"{b.format_row()}\n" for b in self._items)
        return _TABLE_HEADER + rows

    def format_search(self, query: str) -> str:
        """Table of the loans matching ``query``, with a note when none match."""
        matches = self.find(query)
        rows = "".join(f"{b.format_row()}\n\n" for b in matches)
        text = _SEARCH_HEADER + rows + f"{'------':<10}Back to menu !!\n"
        if not matches:
            text += "Your search return nothing!!\n"
        return text