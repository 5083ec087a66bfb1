# libkit

A small toolbox of C-library style helpers for Python (character tests,
string searching and building, byte buffers, a singly linked list, simple
output) together with a `printf`-style formatter that has its own rules
for flags, width, precision and length modifiers.

The package has no dependencies beyond the standard library.

## Modules

| Module              | What it offers |
|---------------------|----------------|
| `libkit.ctype`      | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`, `to_lower`, `to_upper`; each takes an int code or a one-character str |
| `libkit.numbers`    | `atoi`, `itoa`, `factorial` (0 outside 0..12), `exact_sqrt` (0 unless a perfect square), `swap` |
| `libkit.search`     | `strlen`, `strchr`, `strrchr`, `strstr`, `strnstr`, `strcmp`, `strncmp`, `strequ`, `strnequ`; searches return an index or `None`, text ends at the first NUL |
| `libkit.memory`     | `memalloc`, `bzero`, `memset`, `memcpy`, `memccpy`, `memmove`, `memchr`, `memcmp` on `bytearray` buffers; spans past the buffer raise `ValueError` |
| `libkit.buffers`    | `strcpy`, `strncpy`, `strcat`, `strncat`, `strlcat`, `strclr` on NUL-terminated strings held in a `bytearray` |
| `libkit.transform`  | `strsub`, `strjoin`, `strtrim`, `strsplit`, `strmap`, `strmapi`, `striter`, `striteri` |
| `libkit.linkedlist` | `Node` and `LinkedList` with `push_front`, `pop_front`, `clear`, `for_each`, `map`, iteration and `len()` |
| `libkit.output`     | `putchar`, `putstr`, `putendl`, `putnbr`, writing to a given text stream or to standard output |
| `libkit.printf`     | `render` returns the formatted bytes, `printf` writes them to standard output and returns the byte count |

The formatter is assembled from modules that can also be used on their own:

- `libkit.spec`: `ConversionSpec` and `parse_spec(fmt, pos)`, which reads
  flags, width, precision and length modifiers.
- `libkit.integers`: `signed_argument`, `unsigned_argument`,
  `format_signed`, `format_unsigned`.
- `libkit.octal`: `octal_argument`, `format_octal`.
- `libkit.hexadecimal`: `hex_argument`, `format_hex`, `format_pointer`.
- `libkit.radix`: `to_base`, `pad_left`, `pad_empty`.
- `libkit.text`: `utf8_length`, `encode_utf8`, `format_string`,
  `format_wide_string`, `format_char`, `format_wide_char`.

## Formatting

```python
from libkit.printf import render, printf

render("%5d|%-5s|", 42, "hi")      # b'   42|hi   |'
render("%#x", 255)                 # b'0xff'
render("%%")                       # b'%'

count = printf("%s\n", "hello")    # writes to standard output, returns 6
```

`render` always returns `bytes`. A str format or str argument is taken as
UTF-8; the format ends at its first NUL. Surplus arguments are ignored and
too few raise `TypeError`.

Supported conversions: `d i D u U o O x X s S c C p %`, with the flags
`# 0 - space +`, a field width, a precision, and the length modifiers
`hh h l ll j z` (`L` and `t` are accepted and ignored). Capital conversions
(`D O U S C`) act as their `l` counterparts. Integer arguments are wrapped
to the size the modifiers select (8, 16, 32 or 64 bits). With `l`, `%s`
and `%c` produce UTF-8 encoded wide text; `%p` takes an int address, with
`None` as the null pointer.

## Strings and numbers

```python
from libkit.numbers import atoi, itoa
from libkit.transform import strsplit, strtrim

atoi("  -42abc")                   # -42
itoa(-2147483648)                  # '-2147483648'
strsplit("*hello*world*", "*")     # ['hello', 'world']
strtrim("  \t spaced out \n")      # 'spaced out'
```

## Linked lists

```python
from libkit.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
len(items)                         # 4
list(items.map(lambda x: x * 10))  # [0, 10, 20, 30]
items.pop_front()                  # 0
```

## What it does not do

The formatter has no floating-point conversions: `%f`, `%e`, `%g` and any
other unrecognised conversion character are printed as that character,
padded like `%c`, and consume no argument. There is no positional-argument
(`%1$d`) or `*` width support. The package is a library only and installs
no command.