# libft

A small library of everyday helpers with no third-party dependencies:

- `libft.chars`: ASCII character tests and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
  Each takes a character code (`int`) or a one-character `str`. The case
  converters give back the same kind of value they were given.
- `libft.memory`: operations on byte buffers such as `bytearray`: `bzero`,
  `memset`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`.
- `libft.conversions`: `atoi` and `itoa` for 32-bit signed integers.
- `libft.search`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strcmp`,
  `strlcpy`, `strlcat`, `strnstr`.
- `libft.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  write to any text stream; `putnbr` writes to standard output.
- `libft.transform`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`.
- `libft.lines`: `LineReader` and `read_lines` read lines from a text or
  binary stream a fixed number of units at a time (10 by default).
- `libft.linked`: `Node` and `LinkedList`, a singly linked list.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
import io

from libft.conversions import atoi, itoa
from libft.transform import split, strtrim
from libft.lines import read_lines
from libft.linked import LinkedList

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"

for line in read_lines(io.StringIO("one\ntwo\n"), 10):
    print(line, end="")

items = LinkedList([1, 2, 3])
items.add_front(0)
doubled = items.map(lambda value: value * 2)
list(doubled)                  # [0, 2, 4, 6]
```

## Behaviour worth knowing

- `is_digit` is inverted: it returns `False` for `"0"`–`"9"` and `True` for
  everything else. `is_alnum` is `is_digit(c) or is_alpha(c)` and inherits
  that.
- `atoi` skips leading whitespace, accepts one sign and stops at the first
  non-digit. A value outside the 32-bit signed range raises
  `OverflowError`; so does `itoa`, and therefore `putnbr_fd` and `putnbr`.
- The `libft.memory` functions raise `ValueError` when `n` is negative or
  larger than a buffer involved.
- Search functions return an index or `None`. Searching for the NUL
  character finds the terminator at index `len(s)`. `strnstr` returns 0 for
  an empty needle.
- `strcmp` returns 1, -1 or 0 and stops as soon as either string ends, so a
  prefix compares equal. `strncmp` returns the code difference of the first
  differing pair, with a string's end counting as code 0.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return a pair: the
  resulting text and the length they tried to create.
- `strtrim` never keeps a string whose last kept character would be its
  first one, so any one-character input gives `""`.
- `strjoin` treats `None` as empty, and returns `None` only when both
  operands are `None`.
- `striteri` calls `f(index, char)` for every character; a string returned
  by `f` replaces the character, `None` keeps it. The new string is returned.
- `LineReader.read_line` keeps each line's trailing newline and returns
  `None` once the stream is exhausted. A failing read discards buffered data
  and the error propagates. Iterating a `LineReader` yields its lines.
- `LinkedList.add_front` and `add_back` return the new `Node`; `last()`
  returns the last node or `None`; `clear(delete)` passes each content to
  `delete`, if given, before removing it.

## Scope

This is a library only; it installs no command-line program.