"""A ranking of items by a caller-supplied ordering."""

from __future__ import annotations

import sys
from functools import cmp_to_key
from typing import Callable, Generic, TextIO, TypeVar

T = TypeVar("T")


class Report(Generic[T]):
    """Collects items and ranks them; ``comp(a, b)`` is true when ``a`` ranks below ``b``."""

    def __init__(self, comp: Callable[[T, T], bool]) -> None:
        self._items: list[T] = []

        def compare(a: T, b: T) -> int:
            if comp(a, b):
                return -1
            if comp(b, a):
                return 1
            return 0

        self._key = cmp_to_key(compare)

    def add(self, item: T) -> None:
        """Add ``item`` to the report."""
        self._items.append(item)

    def top(self) -> T:
        """The highest-ranked item; IndexError when the report is empty."""
        if not self._items:
            raise IndexError("report is empty")
        return max(self._items, key=self._key)

    def ordered(self) -> list[T]:
        """All items, highest-ranked first."""
        return sorted(self._items, key=self._key, reverse=True)

    def show_order(self, out: TextIO | None = None) -> None:
        """Write the numbered ranking to ``out`` (standard output by default)."""
        stream = sys.stdout if out is None else out
        for position, item in enumerate(self.ordered(), start=1):
            stream.write(f"{position}. {item}\n")
        stream.flush()