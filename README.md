# libft

A small library of low-level utilities with the behaviour of the classic C
string and memory routines, written for Python values:

- ASCII character classification and case conversion
- byte-level operations on buffers
- string functions that return indexes and new strings
- a singly linked list
- helpers that write to file descriptors
- a swap helper

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

### `libft.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`,
`to_upper`, `to_lower`.

Each takes a one-character string or an integer character code. The
classifiers return a `bool` and look only at ASCII ranges (`is_space` is
true for space, `\t`, `\n`, `\v`, `\f` and `\r`). `to_upper` and `to_lower`
change only ASCII letters and return the same kind of value they were given.
A string of any other length raises `ValueError`.

### `libft.memory`

`memset`, `bzero`, `memchr`, `memcpy`, `memmove`, `memcmp`, `calloc`.

Buffers are `bytes`, `bytearray` or `memoryview` objects; the writing
functions need a writable one, and a `memoryview` slice stands for a
position inside a buffer. A byte count that is negative or larger than a
buffer raises `ValueError`.

- `memset(buf, c, n)` fills the first `n` bytes with `c & 0xFF` and returns `buf`.
- `memchr(buf, c, n)` returns the index of the first matching byte, or `None`.
- `memcpy` and `memmove` copy `n` bytes and return `dest`; both handle
  overlapping regions, and both return `None` when `dest` and `src` are `None`.
- `memcmp` returns the difference of the first differing unsigned bytes, or 0.
- `calloc(nmemb, size)` returns a zeroed `bytearray`; a zero count or size
  gives a one-byte buffer, and a total over the platform's size limit raises
  `OverflowError`.

### `libft.strings`

`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
`substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, `atoi`, `itoa`.

- `strlcpy(src, size)` and `strlcat(dst, src, size)` return a tuple of the
  resulting string and the length the full result would have had.
- `strchr`, `strrchr` and `strnstr` return an index or `None`; searching for
  `"\0"` finds the end of the string, and an empty needle is found at 0.
- `strncmp` compares character codes, treating the end of a string as 0.
- `split(s, sep)` drops empty pieces.
- `strmapi(s, func)` builds a string from `func(index, char)`, calling `func`
  from the last character to the first.
- `striteri(seq, func)` calls `func(index, item)` on a mutable sequence in
  order; a result other than `None` replaces the item.
- `atoi` skips leading whitespace, takes one optional sign, stops at the first
  non-digit and wraps the result to a 32-bit signed integer.
- `itoa` formats a 32-bit signed integer and raises `OverflowError` outside
  that range.

### `libft.lists`

`Node` (a dataclass with `content` and `next`) and `LinkedList`.

`LinkedList(items=())` supports `add_front`, `add_back` (both return the new
node), `last()` (the last node or `None`), `len()`, iteration over contents,
`clear(delete=None)`, `for_each(func)` and `map(func, delete=None)`. If
`func` raises during `map`, the contents built so far are passed to `delete`
and the error propagates.

### `libft.output`

`put_char(c, fd)`, `put_str(s, fd)`, `put_endl(s, fd)`, `put_nbr(n, fd)`.

Text is written to the file descriptor as UTF-8. A negative descriptor writes
nothing. `put_nbr` accepts only 32-bit signed integers.

### `libft.swap`

`swap(a, b)` returns `(b, a)`.

## Examples

```python
from libft.strings import split, atoi, itoa, strtrim, strlcpy
from libft.lists import LinkedList
from libft.output import put_endl

split("  hello  world ", " ")      # ['hello', 'world']
atoi("   -42abc")                  # -42
itoa(-2147483648)                  # '-2147483648'
strtrim("xxhixx", "x")             # 'hi'
strlcpy("hello", 3)                # ('he', 5)

items = LinkedList([1, 2, 3])
items.add_front(0)
items.add_back(4)
len(items)                         # 5
list(items.map(lambda x: x * 10))  # [0, 10, 20, 30, 40]

put_endl("done", 1)                # writes "done\n" to standard output
```

## What it does not do

This is a library only: it installs no command-line program.

## Running the tests

```
pytest
```