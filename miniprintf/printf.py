"""Formatting of a template with %-conversions, and printing it."""

import sys

from miniprintf.conversions import (
    convert_char,
    convert_decimal,
    convert_hex,
    convert_pointer,
    convert_string,
    convert_unsigned,
)

_HANDLERS = {
    "c": convert_char,
    "s": convert_string,
    "p": convert_pointer,
    "d": convert_decimal,
    "i": convert_decimal,
    "u": convert_unsigned,
    "x": lambda value: convert_hex(value, False),
    "X": lambda value: convert_hex(value, True),
}


def render(fmt, *args):
    """Return the text ``fmt`` produces with ``args`` substituted.

    Supported conversions are %c %s %p %d %i %u %x %X and %%. An unknown
    conversion produces nothing and consumes no argument; a lone ``%`` at
    the end of the template is dropped. The template ends at its first NUL.
    """
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
            continue
        handler = _HANDLERS.get(spec)
        if handler is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        out.append(handler(value))
    return "".join(out)


def printf(fmt, *args, file=None):
    """Write the rendered text to ``file`` (stdout by default) and return
    the number of characters written."""
    text = render(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)