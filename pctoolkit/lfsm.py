"""A learning finite-state machine driven by bit transitions on its input.

Each programmed entry says: when the input shows these falling and rising
bits, move the output by these falling and rising bits. Entries on page 1
are global and fire whatever the current output is. Entries on higher pages
are local and fire only when the output equals the entry's feedback value.
Page 0 marks a free slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from pctoolkit.bits import MASK32, hl, lh

_log = logging.getLogger(__name__)

EMPTY = 0
GLOBAL_PAGE = 1
_VALIDATE_WRAP = 7


def output_calc(feedback: int, hl: int, lh: int) -> int:
    """Apply rising bits ``lh`` and falling bits ``hl`` to ``feedback``."""
    return ((feedback | lh) & ~hl) & MASK32


@dataclass
class LfsmEntry:
    """One programmed transition; ``page == 0`` marks an unused slot."""

    page: int = EMPTY
    feedback: int = 0
    inhl: int = 0
    inlh: int = 0
    outhl: int = 0
    outlh: int = 0

    @property
    def empty(self) -> bool:
        """True when the slot holds no program."""
        return self.page == EMPTY

    def matches(self, falling: int, rising: int) -> bool:
        """True when the entry's input transition equals the given one."""
        return self.inhl == falling and self.inlh == rising


class Lfsm:
    """State machine over a fixed number of program slots.

    ``memory`` may be supplied to share or persist the slots; it is changed
    in place. Otherwise ``size`` empty slots are created.
    """

    def __init__(self, size: int = 0, memory: Optional[List[LfsmEntry]] = None) -> None:
        if memory is None:
            if size < 0:
                raise ValueError("size must not be negative")
            memory = [LfsmEntry() for _ in range(size)]
        self.memory: List[LfsmEntry] = memory
        self.page = 0
        self.input = 0
        self.output = 0
        self._validate_bit = 0

    def _transition(self, value: int) -> tuple[int, int]:
        value &= MASK32
        return hl(self.input, value), lh(self.input, value)

    def _find(self, falling: int, rising: int) -> Optional[int]:
        """Index of the first entry that fires for this transition."""
        for index, entry in enumerate(self.memory):
            if entry.empty or not entry.matches(falling, rising):
                continue
            if entry.page == GLOBAL_PAGE or entry.feedback == self.output:
                return index
        return None

    def read(self, value: int) -> int:
        """Feed a new input sample and return the resulting output.

        Without any change in the input nothing happens. A change that no
        entry recognises is still recorded as the current input.
        """
        falling, rising = self._transition(value)
        if not (falling or rising):
            _log.debug("read: no entry")
            return self.output
        index = self._find(falling, rising)
        self.input = value & MASK32
        if index is None:
            _log.debug("read: entry not recognized")
            return self.output
        entry = self.memory[index]
        _log.debug("read: %s logic", "global" if entry.page == GLOBAL_PAGE else "local")
        self.page = entry.page
        self.output = output_calc(entry.feedback, entry.outhl, entry.outlh)
        return self.output

    def learn(self, value: int, next_output: int, page: int) -> bool:
        """Program the move from the current output to ``next_output`` on input ``value``.

        Returns False when there is nothing to learn (``page`` is 0, the
        input does not change, or there are no slots). Raises ValueError
        when an existing entry already covers this transition and
        OverflowError when no free slot is left. The machine's state is not
        changed.
        """
        falling, rising = self._transition(value)
        if page <= 0 or not (falling or rising) or not self.memory:
            _log.debug("learn: no operation")
            return False
        for entry in self.memory:
            if entry.empty or not entry.matches(falling, rising):
                continue
            if entry.page == GLOBAL_PAGE or entry.feedback == self.output:
                raise ValueError("transition is already programmed")
        next_output &= MASK32
        new_entry = LfsmEntry(
            page=page,
            feedback=self.output,
            inhl=falling,
            inlh=rising,
            outhl=hl(self.output, next_output),
            outlh=lh(self.output, next_output),
        )
        for index, entry in enumerate(self.memory):
            if entry.empty:
                self.memory[index] = new_entry
                _log.debug("learn: added %s", new_entry)
                return True
        raise OverflowError("program memory is full")

    def quant(self) -> int:
        """Return the number of programmed entries."""
        programmed = [entry for entry in self.memory if not entry.empty]
        for entry in programmed:
            _log.debug("programmed: %s", entry)
        return len(programmed)

    def remove(self, value: int) -> bool:
        """Free the entry that would fire on input ``value``; True if one was removed."""
        falling, rising = self._transition(value)
        index = self._find(falling, rising)
        if index is None:
            _log.debug("remove: not existent")
            return False
        self.memory[index] = replace(self.memory[index], page=EMPTY)
        return True

    def delete_all(self) -> bool:
        """Free every slot and reset the output; True if anything was programmed."""
        deleted = False
        for index, entry in enumerate(self.memory):
            if not entry.empty:
                self.memory[index] = replace(entry, page=EMPTY)
                deleted = True
        self.output = 0
        return deleted

    def validate(self, n: int) -> int:
        """Combine the input with one bit of ``n``, stepping to the next bit each call."""
        result = (self.input | (n & (1 << self._validate_bit))) & MASK32
        if self._validate_bit > _VALIDATE_WRAP:
            self._validate_bit = 0
        self._validate_bit += 1
        return result