"""Text and number helpers for line-oriented console input."""

from __future__ import annotations

import re
import string
import struct
import sys
from typing import List, Optional, TextIO

_MASK32 = 0xFFFFFFFF
_INT_RE = re.compile(r"\s*([+-]?\d+)")


def reverse(s: str) -> str:
    """Return ``s`` reversed."""
    return s[::-1]


def ftoa(n: float, afterpoint: int) -> str:
    """Format ``n`` as single precision with a sign column and truncated decimals.

    The first character is ``-`` for negative values and a space otherwise.
    """
    if afterpoint < 0:
        raise ValueError("afterpoint must not be negative")
    value = struct.unpack("f", struct.pack("f", n))[0]
    sign = "-" if value < 0 else " "
    value = abs(value)
    ipart = int(value)
    text = f"{sign}{ipart}"
    if afterpoint > 0:
        fraction = int((value - ipart) * 10**afterpoint)
        text += f".{fraction:0{afterpoint}d}"
    return text


def read_line(stream: TextIO) -> Optional[str]:
    """Read one line without its newline; ``None`` at end of input."""
    line = stream.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def read_all(stream: TextIO) -> Optional[str]:
    """Read the rest of ``stream``; ``None`` if nothing is left."""
    data = stream.read()
    return data or None


def tokenize(line: str, delimiters: str) -> List[str]:
    """Split ``line`` on any of the ``delimiters`` characters, dropping empty tokens."""
    if not delimiters:
        return [line] if line else []
    pattern = "[" + re.escape(delimiters) + "]+"
    return [token for token in re.split(pattern, line) if token]


def get_num(text: Optional[str]) -> int:
    """Parse a leading signed integer; 0 when there is none."""
    if text is None:
        return 0
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def get_num_v2(text: Optional[str]) -> int:
    """Like :func:`get_num`, but the result is taken as a 32-bit unsigned value."""
    return get_num(text) & _MASK32


def read_int(nmin: int, nmax: int, stream: Optional[TextIO] = None) -> int:
    """Read integers from ``stream`` until one lies in ``[nmin, nmax]``.

    Characters that cannot start a number are skipped one at a time.
    Raises EOFError when input runs out first.
    """
    source = sys.stdin if stream is None else stream
    pending = ""

    def getc() -> str:
        nonlocal pending
        if pending:
            ch, pending = pending, ""
            return ch
        return source.read(1)

    while True:
        ch = getc()
        while ch and ch.isspace():
            ch = getc()
        if not ch:
            raise EOFError("no integer in range before end of input")
        sign = ""
        if ch in "+-":
            sign = ch
            ch = getc()
        digits = ""
        while ch and ch in string.digits:
            digits += ch
            ch = getc()
        if not digits:
            if not ch:
                raise EOFError("no integer in range before end of input")
            continue
        pending = ch
        number = int(sign + digits)
        if nmin <= number <= nmax:
            return number