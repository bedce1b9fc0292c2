# pctoolkit

A collection of small, dependency-free building blocks.

- `pctoolkit.bits`: edge detection on 32-bit words (`lh` for rising bits,
  `hl` for falling bits, `diff` for changed bits), `pin_match`,
  `print_binary`, `decimal_to_binary`, `binary_to_decimal`, and the
  `Explode` dataclass, which keeps the previous (`xi`) and current (`xf`)
  sample and recomputes `lh`, `hl`, `hh` (held high) and `ll` (held low) on
  each `update`. `mayia(nbits)` masks both samples to `nbits` and packs the
  rising bits above the changed bits; `read()` returns an independent copy.
- `pctoolkit.textutil`: `reverse`, `ftoa` (single-precision formatting with a
  sign column and truncated decimals), `tokenize`, lenient integer parsing
  (`get_num`, and `get_num_v2` which wraps to 32-bit unsigned) and stream
  readers (`read_line`, `read_all`, `read_int`, which raises `EOFError` if
  input runs out before an in-range integer).
- `pctoolkit.circbuffer`: `CircularBuffer`, a ring of characters that
  overwrites unread data and keeps a NUL after the last write (`get`, `put`,
  `gets`, `puts`); and `BoundedCircularBuffer`, a byte ring holding at most
  `size - 1` bytes whose `put` returns `False` when full and whose `get`
  returns 0 when empty (`put_string` stores each character as a byte).
- `pctoolkit.linkedlist`: `LinkedList`, an ordered list of strings with a
  cursor. `play`, `forward`, `reverse`, `replace` and `remove` work at the
  cursor; `record` appends only while the cursor is on the head (otherwise
  `ValueError`); `insert` adds after the cursor; `push` and `pop` work at the
  head; `clear` empties it. Operations that need an element raise
  `EmptyListError` on an empty list.
- `pctoolkit.ficheiro`: `FileHandle`, a binary file wrapper with `putc`,
  `puts`, `read`, `write`, `rewind`, `seek` and `fileno`, usable as a context
  manager. If the requested mode fails, the file is first created with `a+`
  and the open is tried once more.
- `pctoolkit.lfsm`: `Lfsm`, a learning finite state machine that maps input
  bit transitions to output bit transitions, stored in a fixed number of
  `LfsmEntry` slots. Page 1 entries are global; higher pages fire only when
  the output equals the entry's feedback. `learn` raises `ValueError` when
  the transition is already programmed and `OverflowError` when no slot is
  free. `output_calc` applies rising and falling bits to a value.

## Installation

```
pip install .
```

## Examples

```python
from pctoolkit.bits import Explode, lh

e = Explode()
e.update(0b0101)
e.update(0b0110)
state = e.read()
print(state.lh, state.hl)   # 2 1

print(lh(0b01, 0b11))       # 2
```

```python
from pctoolkit.circbuffer import BoundedCircularBuffer

buf = BoundedCircularBuffer(4)
buf.put_string("ab")
print(buf.get(), buf.get())  # 97 98
```

```python
from pctoolkit.lfsm import Lfsm

machine = Lfsm(16)
machine.learn(1, 1, 1)      # rising bit 0 sets output bit 0
print(machine.read(1))      # 1
```

## What it does not do

The package is a library only: it installs no command-line program and
has no interactive console. Program slots of an `Lfsm` live in memory; to
keep them between runs, pass your own list as `memory` and store it
yourself.

## Running the tests

```
pip install .[test]
pytest
```