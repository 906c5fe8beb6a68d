"""Rendering of single conversion values into text.

Each function returns the text a conversion produces; the number of
characters written is simply the length of that text.
"""

_INT_BITS = 32
_POINTER_BITS = 64
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _require_int(value, conversion):
    if not isinstance(value, int):
        raise TypeError(
            f"{conversion} conversion needs an int, not {type(value).__name__}"
        )
    return value


def _unsigned(value, bits):
    return value % (1 << bits)


def _signed(value, bits):
    value = _unsigned(value, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_base16(value, digits):
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def convert_char(c):
    """Render a single character.

    Accepts a one-character string or an integer; integers are reduced to
    a single byte value, as a C ``char`` would be.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("%c conversion needs exactly one character")
        return c
    return chr(_unsigned(_require_int(c, "%c"), 8))


def convert_decimal(n):
    """Render a signed 32-bit integer in decimal."""
    return str(_signed(_require_int(n, "%d"), _INT_BITS))


def convert_string(s):
    """Render a string; ``None`` renders as ``(null)``.

    Output stops at the first NUL character.
    """
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"%s conversion needs a str, not {type(s).__name__}")
    return s.split("\0", 1)[0]


def convert_pointer(ptr):
    """Render an address as ``0x`` plus lowercase hex; zero is ``(nil)``."""
    if ptr is None:
        return "(nil)"
    value = _unsigned(_require_int(ptr, "%p"), _POINTER_BITS)
    if value == 0:
        return "(nil)"
    return "0x" + _to_base16(value, _LOWER_DIGITS)


def convert_unsigned(n):
    """Render an unsigned 32-bit integer in decimal."""
    return str(_unsigned(_require_int(n, "%u"), _INT_BITS))


def convert_hex(x, upper=False):
    """Render an unsigned 32-bit integer in hex, upper or lower case."""
    value = _unsigned(_require_int(x, "%x"), _INT_BITS)
    if value == 0:
        return "0"
    return _to_base16(value, _UPPER_DIGITS if upper else _LOWER_DIGITS)