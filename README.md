# ftkit

Small helpers that follow the behaviour of the classic standard-library
routines for characters, byte buffers and strings, together with a singly
linked list and a tiny `printf` with its own set of conversions. Inputs that
are malformed get the classic quirks. For example, `atoi` returns 0 for a
doubled sign such as `"--5"`.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `ftkit.chars`

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` accept an int
  code or a one-character string and return a bool. They cover ASCII only.
- `to_upper` and `to_lower` change the case of ASCII letters. A string
  argument gives a string back. An int argument gives an int back.
- `atoi(text)` skips leading whitespace, accepts one optional sign and reads
  digits up to the first non-digit. It returns 0 when no number is present.
- `itoa(n)` returns the decimal text of `n`.

### `ftkit.memory`

These work on `bytearray` or `memoryview` buffers. A byte count that is
negative raises `ValueError`. A byte count longer than a buffer raises
`IndexError`.

- `bzero(buf, n)` and `memset(buf, value, n)` fill the first `n` bytes.
  `memset` uses the low byte of `value`.
- `calloc(count, size)` returns a zero-filled `bytearray`.
- `memcpy(dst, src, n)` copies bytes.
- `memccpy(dst, src, c, n)` copies bytes up to and including the first byte
  equal to `c`. It returns the offset just past that byte, or `None` when the
  byte was not found.
- `memmove(buf, dst, src, n)` copies between two offsets of one buffer. The
  two regions may overlap.
- `memchr(data, c, n)` returns the offset of the first matching byte, or
  `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal pair of
  bytes, or 0.

### `ftkit.strings`

Searches return an index, or `None` when nothing is found.

- `strlen`, `strchr`, `strrchr`, `strnstr`: searching for `"\0"` with
  `strchr` or `strrchr` gives the end of the string.
- `strncmp` compares at most `n` characters and returns the code difference.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` return a tuple of
  the resulting string and the length the untruncated result would have had.
- `strdup`, `substr`, `strjoin`, `strtrim` do the usual copying, slicing,
  joining and trimming.
- `split(s, sep)` splits on a single character and drops empty pieces.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(chars, f)` calls `f(index, char)` on a mutable sequence. Each
  non-`None` result replaces its element in place.

### `ftkit.lists`

`Node` holds `content` and `next`. `LinkedList(items)` keeps the first node
as `head` and provides the following:

- `push_front` and `push_back` add an element and return its node.
- `last()` returns the final node, or `None` when the list is empty.
- `len()` gives the number of elements, and iterating over the list yields
  each content in order.
- `clear(delete)` removes every element and passes each content to `delete`
  when one is given.
- `iterate(f)` calls `f` on each content in order.
- `map(f, delete)` returns a new list of the results of `f`. If `f` raises,
  the contents already produced are passed to `delete`, and the error
  propagates.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream.
Standard output is used when no stream is given.

### `ftkit.printf`

The supported conversions are `%c %s %p %d %i %u %x %X %%`.

- `%d`, `%i`, `%u`, `%x` and `%X` treat their argument as a 32-bit integer.
- `%s` prints `(null)` for `None`.
- `%p` prints `0x` followed by lowercase hex. It prints `(nil)` for `None`
  or 0.
- An unknown conversion prints nothing and uses no argument.
- A lone `%` at the end of the format string raises `ValueError`.
- Too few arguments raise `TypeError`.

There are two functions:

- `sprintf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args, stream=None)` writes the formatted text and returns the
  number of characters it wrote.

The single conversions are also available as functions: `format_char`,
`format_str`, `format_int`, `format_unsigned`, `format_hex` and
`format_pointer`.

## Example

```python
from ftkit.printf import sprintf
from ftkit.strings import split
from ftkit.chars import atoi

sprintf("%d items, %x hex, %s", 42, 255, None)   # '42 items, ff hex, (null)'
split("  hello  world ", " ")                     # ['hello', 'world']
atoi("  -123abc")                                 # -123
```

## What it does not do

- The formatter does not handle field widths, precision, flags or length
  modifiers. Such text is not parsed as part of a conversion.
- The package is a library only. It installs no command-line tool.