"""A list of strings walked with a cursor, appended to at its head."""

from __future__ import annotations

from typing import Iterator, List, Optional


class EmptyListError(LookupError):
    """Raised when an operation needs an element and the list has none."""


class LinkedList:
    """Ordered strings from tail (first) to head (last) with a movable cursor.

    The cursor marks the current element. ``play`` reads it, ``forward``
    and ``reverse`` move it one step toward the head or tail and stop at
    the ends.
    """

    def __init__(self) -> None:
        self._items: List[str] = []
        self._cursor: Optional[int] = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    @property
    def position(self) -> Optional[int]:
        """Index of the cursor counted from the tail, or ``None`` when empty."""
        return self._cursor

    def _require_cursor(self) -> int:
        if self._cursor is None:
            raise EmptyListError("linked list is empty")
        return self._cursor

    def _at_head(self) -> bool:
        return self._cursor == len(self._items) - 1

    def play(self) -> str:
        """Return the element under the cursor."""
        return self._items[self._require_cursor()]

    def forward(self) -> None:
        """Move the cursor one step toward the head, staying put at the head."""
        cursor = self._require_cursor()
        if not self._at_head():
            self._cursor = cursor + 1

    def reverse(self) -> None:
        """Move the cursor one step toward the tail, staying put at the tail."""
        cursor = self._require_cursor()
        if cursor > 0:
            self._cursor = cursor - 1

    def record(self, data: str) -> None:
        """Append ``data`` at the head; only allowed while the cursor is on the head.

        The cursor moves to the new element. Raises ValueError when the
        cursor is elsewhere.
        """
        if self._cursor is not None and not self._at_head():
            raise ValueError("record is only permitted at the end of the list")
        self._items.append(data)
        self._cursor = len(self._items) - 1

    def remove(self) -> None:
        """Remove the element under the cursor.

        Removing the tail leaves the cursor on the new tail; otherwise the
        cursor steps back toward the tail.
        """
        cursor = self._require_cursor()
        del self._items[cursor]
        if not self._items:
            self._cursor = None
        elif cursor > 0:
            self._cursor = cursor - 1

    def clear(self) -> None:
        """Remove every element."""
        while self._cursor is not None:
            self.remove()

    def insert(self, data: str) -> None:
        """Insert ``data`` right after the cursor and move the cursor onto it."""
        if self._cursor is None:
            self._items.append(data)
            self._cursor = 0
            return
        self._items.insert(self._cursor + 1, data)
        self._cursor += 1

    def replace(self, data: str) -> None:
        """Overwrite the element under the cursor."""
        self._items[self._require_cursor()] = data

    def push(self, data: str) -> None:
        """Append ``data`` at the head wherever the cursor is; the cursor follows."""
        self._items.append(data)
        self._cursor = len(self._items) - 1

    def pop(self) -> str:
        """Remove and return the head element; the cursor lands on the new head."""
        self._require_cursor()
        value = self._items.pop()
        self._cursor = len(self._items) - 1 if self._items else None
        return value