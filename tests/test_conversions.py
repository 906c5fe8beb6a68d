import pytest

from miniprintf.conversions import (
    convert_char,
    convert_decimal,
    convert_hex,
    convert_pointer,
    convert_string,
    convert_unsigned,
)


def test_char_from_str():
    assert convert_char("A") == "A"


def test_char_from_int():
    assert convert_char(ord("k")) == "k"


def test_char_from_int_wraps_to_byte():
    assert convert_char(ord("k") + 256) == "k"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        convert_char("ab")


@pytest.mark.parametrize("n", [0, 7, 123, -5, 2147483647, -1000])
def test_decimal_round_trip(n):
    assert int(convert_decimal(n)) == n


def test_decimal_int_min():
    assert convert_decimal(-2147483648) == "-2147483648"


def test_decimal_wraps_32_bits():
    assert convert_decimal(2147483648) == "-2147483648"


def test_decimal_rejects_str():
    with pytest.raises(TypeError):
        convert_decimal("12")


def test_string_plain():
    assert convert_string("String test") == "String test"


def test_string_none():
    assert convert_string(None) == "(null)"


def test_string_stops_at_nul():
    assert convert_string("ab\0cd") == "ab"


def test_string_rejects_int():
    with pytest.raises(TypeError):
        convert_string(5)


@pytest.mark.parametrize("ptr", [0, None])
def test_pointer_nil(ptr):
    assert convert_pointer(ptr) == "(nil)"


@pytest.mark.parametrize("ptr", [1, 0xABCD, 0x7FFDEADBEEF0, 2**64 - 1])
def test_pointer_round_trip(ptr):
    text = convert_pointer(ptr)
    assert text.startswith("0x")
    assert text == text.lower()
    assert int(text, 16) == ptr


@pytest.mark.parametrize("n", [0, 9, 10, 456, 4294967295])
def test_unsigned_round_trip(n):
    assert int(convert_unsigned(n)) == n


def test_unsigned_wraps_negative():
    assert int(convert_unsigned(-1)) == 2**32 - 1


def test_hex_zero():
    assert convert_hex(0) == "0"


def test_hex_case():
    assert convert_hex(0xABCD, upper=False) == convert_hex(0xABCD, upper=True).lower()
    assert convert_hex(0xABCD, upper=True) == convert_hex(0xABCD, upper=True).upper()


@pytest.mark.parametrize("x", [1, 15, 16, 0xABCD, 0xFFFFFFFF])
def test_hex_round_trip(x):
    assert int(convert_hex(x), 16) == x
    assert int(convert_hex(x, True), 16) == x


def test_hex_negative_wraps():
    assert int(convert_hex(-1), 16) == 0xFFFFFFFF
    assert convert_hex(-1) == "f" * 8