"""Two small character ring buffers."""

from __future__ import annotations

_NUL = "\0"


class CircularBuffer:
    """Overwriting ring of characters that keeps a NUL after the last write.

    The buffer never refuses data; writing past the reader silently
    overwrites unread characters. Reading an empty buffer returns the
    character at the write position, which is normally NUL.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._data = [_NUL] * (size + 1)
        self._head = 0
        self._tail = 0

    @property
    def head(self) -> int:
        """Write position."""
        return self._head

    @property
    def tail(self) -> int:
        """Read position."""
        return self._tail

    def get(self) -> str:
        """Return the next unread character, or the one at the write position if none."""
        value = self._data[self._head]
        if self._tail != self._head:
            value = self._data[self._tail]
            self._tail += 1
            if self._tail == self._size:
                self._tail = 0
        return value

    def put(self, data: str) -> None:
        """Store one character and mark the following slot with NUL."""
        if not isinstance(data, str):
            raise TypeError("data must be a one-character string")
        if len(data) != 1:
            raise ValueError("data must be exactly one character")
        if self._head == self._size:
            self._head = 0
        self._data[self._head] = data
        self._head += 1
        self._data[self._head] = _NUL

    def gets(self) -> str:
        """Read characters up to the next NUL and return them without it.

        Reading stops after one full pass over the storage if no NUL is met.
        """
        chars = []
        for _ in range(len(self._data)):
            ch = self.get()
            if ch == _NUL:
                break
            chars.append(ch)
        return "".join(chars)

    def puts(self, text: str) -> None:
        """Store ``text`` followed by a NUL terminator; text after an embedded NUL is ignored."""
        for ch in text.split(_NUL, 1)[0] + _NUL:
            self.put(ch)


class BoundedCircularBuffer:
    """Byte ring that refuses writes when full and reads 0 when empty.

    One slot is kept free, so it holds at most ``size - 1`` bytes.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._data = [0] * size
        self._head = 0
        self._tail = 0

    @property
    def head(self) -> int:
        """Write position."""
        return self._head

    @property
    def tail(self) -> int:
        """Read position."""
        return self._tail

    def get(self) -> int:
        """Return the oldest byte, or 0 if the buffer is empty."""
        if self._tail == self._head:
            return 0
        value = self._data[self._tail]
        self._tail = (self._tail + 1) % self._size
        return value

    def put(self, data: int) -> bool:
        """Store the low byte of ``data``; return False if the buffer was full."""
        following = (self._head + 1) % self._size
        if following == self._tail:
            return False
        self._data[self._head] = data & 0xFF
        self._head = following
        return True

    def put_string(self, text: str) -> None:
        """Store each character of ``text`` as a byte, dropping what does not fit."""
        for ch in text:
            self.put(ord(ch))