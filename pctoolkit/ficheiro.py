"""A thin file handle with byte-level put and read helpers."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional, Union

_FALLBACK_MODE = "a+"


def _binary_mode(mode: str) -> str:
    mode = mode.replace("t", "")
    return mode if "b" in mode else mode + "b"


class FileHandle:
    """Wraps one open file.

    Opening a file that cannot be opened in the requested mode first
    creates it with ``a+`` and then tries the requested mode once more.
    """

    def __init__(self, filename: Optional[str] = None, mode: str = "r") -> None:
        self.filename: Optional[str] = None
        self.mode: Optional[str] = None
        self._fp: Optional[BinaryIO] = None
        if filename is not None:
            self.open(filename, mode)

    @property
    def closed(self) -> bool:
        """True when no file is open."""
        return self._fp is None or self._fp.closed

    def _file(self) -> BinaryIO:
        if self._fp is None or self._fp.closed:
            raise ValueError("no file is open")
        return self._fp

    def open(self, filename: Union[str, os.PathLike], mode: str = "r") -> None:
        """Open ``filename`` in ``mode``, creating it first if that is what fails.

        Raises OSError when the file still cannot be opened.
        """
        if not self.closed:
            self.close()
        self.filename = os.fspath(filename)
        self.mode = mode
        binary = _binary_mode(mode)
        try:
            self._fp = open(self.filename, binary)
            return
        except OSError:
            pass
        with open(self.filename, _binary_mode(_FALLBACK_MODE)):
            pass
        self._fp = open(self.filename, binary)

    def close(self) -> None:
        """Close the file if one is open."""
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def putc(self, c: int) -> int:
        """Write one byte and return it."""
        value = c & 0xFF
        self._file().write(bytes([value]))
        return value

    def puts(self, s: Union[str, bytes]) -> int:
        """Write a string and return the number of bytes written."""
        data = s.encode() if isinstance(s, str) else bytes(s)
        return self._file().write(data)

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything left when ``size`` is negative."""
        return self._file().read(size)

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        return self._file().write(bytes(data))

    def rewind(self) -> None:
        """Go back to the start of the file."""
        self._file().seek(0)

    def fileno(self) -> int:
        """Return the operating-system descriptor of the open file."""
        return self._file().fileno()

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move to ``offset`` relative to ``whence`` and return the new position."""
        return self._file().seek(offset, whence)

    def __enter__(self) -> "FileHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()