# ftkit

A small collection of everyday helpers with precisely defined edge cases.
It has no runtime dependencies beyond the standard library.

## Modules

- `ftkit.chars`: ASCII classification and case conversion. Each function takes
  a one-character string or an integer code point: `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower`. The case
  conversions return the value in the form they were given.
- `ftkit.memory`: operations on `bytearray` buffers. `memset`, `bzero`,
  `calloc`, `memcpy`, `memmove` (within one buffer, by offsets), `memchr`
  (returns an index or `None`) and `memcmp`. Negative lengths and spans past
  the end of a buffer raise `ValueError`.
- `ftkit.strings`: string helpers. `strlen`, `strlcpy` and `strlcat` (both
  return a `(text, length)` pair), `strchr`, `strrchr`, `strnstr` (all return an
  index or `None`), `strncmp`, `substr`, `strjoin`, `strtrim`, `split` (empty
  fields are dropped), `strmapi`, `striteri` (edits a mutable sequence in place)
  and `matrix_len` (counts entries before the first `None`).
- `ftkit.convert`: `atoi` parses a leading decimal integer and yields 0 when
  there is none. `itoa` formats an integer.
- `ftkit.output`: writes to a text stream with `put_char_fd`, `put_str_fd`,
  `put_endl_fd` and `put_nbr_fd`.
- `ftkit.printf`: `format` and `printf` handle the conversions
  `%c %s %d %i %u %p %x %X %%`, with 32-bit integer wrapping. `printf` writes to
  standard output, or to `stream=`, and returns the number of characters written.
  Flags, field widths and precision are not supported. An unknown conversion
  prints nothing.
- `ftkit.linkedlist`: `Node` and `LinkedList`. The list supports `push_front`,
  `push_back`, `last`, `remove`, `clear` and `link_prev`, which fills in the
  backward links. It also supports `len()` and iteration over contents.
- `ftkit.lines`: `LineReader` reads a text or binary stream in fixed-size
  chunks. Call `next_line()` for the next line, or iterate over the reader.

## Installation

```
pip install ftkit
```

Tests:

```
pip install "ftkit[test]"
pytest
```

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.printf import format

atoi("   -42abc")          # -42
itoa(-2147483648)          # "-2147483648"
split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")     # "hi"
format("%s is %d (%x)", "answer", 42, 42)   # "answer is 42 (2a)"
```

Reading lines:

```python
import io
from ftkit.lines import LineReader

reader = LineReader(io.StringIO("one\ntwo\nthree"), 4)
for line in reader:
    print(repr(line))      # 'one\n', 'two\n', 'three'
```

A line keeps its newline only when that newline is the last character
buffered so far. Otherwise the newline is dropped and the rest is held for
the next call.

Linked lists:

```python
from ftkit.linkedlist import LinkedList, Node

items = LinkedList(["a", "b"])
items.push_front(Node("z"))
items.push_back(Node("c"))
list(items)                        # ["z", "a", "b", "c"]
len(items)                         # 4
items.last().content               # "c"
```