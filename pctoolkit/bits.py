"""Bit-level helpers for watching pin states change between two samples."""

from __future__ import annotations

from dataclasses import dataclass, replace

MASK32 = 0xFFFFFFFF


def lh(xi: int, xf: int) -> int:
    """Bits that went from low to high between ``xi`` and ``xf``."""
    return (xf ^ xi) & xf & MASK32


def hl(xi: int, xf: int) -> int:
    """Bits that went from high to low between ``xi`` and ``xf``."""
    return (xf ^ xi) & xi & MASK32


def diff(xi: int, xf: int) -> int:
    """Bits that changed between ``xi`` and ``xf``."""
    return (xi ^ xf) & MASK32


def pin_match(match: int, pin: int, hl: int) -> int:
    """Check ``pin`` against the bits in ``match``.

    With ``hl`` true, return ``match`` when every bit of it is set in ``pin``.
    With ``hl`` false, return ``match`` when none of its bits are set in ``pin``.
    Otherwise return 0.
    """
    result = match & pin & MASK32
    if hl:
        return result if result == (match & MASK32) else 0
    return 0 if result else match & MASK32


def print_binary(n_bits: int, number: int) -> str:
    """Render the lowest ``n_bits`` bits of ``number``, most significant first."""
    if n_bits < 1:
        raise ValueError("n_bits must be at least 1")
    return "".join("1" if (number >> bit) & 1 else "0" for bit in reversed(range(n_bits)))


def decimal_to_binary(n: int) -> int:
    """Return the number whose decimal digits spell ``n`` in binary (32-bit wrap)."""
    n &= MASK32
    if n == 0:
        return 0
    return int(format(n, "b")) & MASK32


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as binary digits and return the value."""
    n &= MASK32
    digits = reversed(str(n))
    return sum(int(digit) << position for position, digit in enumerate(digits)) & MASK32


@dataclass
class Explode:
    """Tracks two consecutive samples and the transitions between them."""

    xi: int = 0
    xf: int = 0
    hl: int = 0
    lh: int = 0
    hh: int = 0
    ll: int = 0

    def update(self, x: int) -> None:
        """Shift the last sample into ``xi``, store ``x`` and recompute transitions."""
        self.xi = self.xf
        self.xf = x & MASK32
        self.hl = hl(self.xi, self.xf)
        self.lh = lh(self.xi, self.xf)
        self.hh = self.xi & self.xf
        self.ll = ~(self.xi | self.xf) & MASK32

    def mayia(self, nbits: int) -> int:
        """Mask both samples to ``nbits`` and pack rising edges above the changed bits."""
        mask = ((1 << nbits) - 1) & MASK32
        self.xi &= mask
        self.xf &= mask
        changed = self.xf ^ self.xi
        rising = changed & self.xf
        return ((rising << nbits) | changed) & MASK32

    def read(self) -> "Explode":
        """Return an independent snapshot of the current state."""
        return replace(self)