# miniprintf

A small printf-style formatter. It understands a fixed set of conversions and
nothing else: no flags, no field widths, no precision, no length modifiers.

| Spec      | Argument                                   | Output                                            |
|-----------|--------------------------------------------|---------------------------------------------------|
| `%c`      | a one-character string, or an integer      | the character (integers are reduced to one byte)  |
| `%s`      | a string or `None`                         | the string up to its first NUL, or `(null)`       |
| `%p`      | an integer address or `None`               | `0x` and lowercase hex, or `(nil)` for 0 / `None` |
| `%d` `%i` | an integer                                 | decimal, wrapped to a signed 32-bit value         |
| `%u`      | an integer                                 | decimal, wrapped to an unsigned 32-bit value      |
| `%x` `%X` | an integer                                 | lower- or uppercase hex of the unsigned 32-bit value |
| `%%`      | none                                       | a literal `%`                                     |

Other behaviour worth knowing:

- An unknown conversion such as `%q` produces nothing and consumes no argument.
- A lone `%` at the very end of the template is dropped.
- The template ends at its first NUL character.
- Too few arguments raise `TypeError`; so does an argument of the wrong type
  (for example a string for `%d`). A `%c` string that is not exactly one
  character long raises `ValueError`.
- Extra arguments are ignored.

## Installation

```
pip install miniprintf
```

## Usage

`render` builds the formatted text and returns it:

```python
from miniprintf.printf import render

render("%s has %d items (0x%X)\n", "box", 42, 42)
# 'box has 42 items (0x2A)\n'
render("%p %p", 0, 0xDEADBEEF)
# '(nil) 0xdeadbeef'
render("%d %u", -1, -1)
# '-1 4294967295'
```

`printf` writes the text to standard output, or to another text stream passed
as the keyword argument `file`, and returns the number of characters written:

```python
import io
from miniprintf.printf import printf

count = printf("Percentage sign: %%\n")   # writes to stdout, returns 18

buffer = io.StringIO()
printf("%c%c\n", "o", "k", file=buffer)    # buffer now holds 'ok\n'
```

Each conversion is also available on its own in `miniprintf.conversions`,
returning the text it produces: `convert_char`, `convert_decimal`,
`convert_string`, `convert_pointer`, `convert_unsigned` and
`convert_hex(x, upper=False)`.

## Running the tests

```
pip install -e ".[test]"
pytest
```