import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.printf import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_str,
    format_unsigned,
    printf,
    sprintf,
)

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
UINT32 = st.integers(min_value=0, max_value=2**32 - 1)
PLAIN_TEXT = st.text(alphabet=st.characters(blacklist_characters="%"), max_size=30)


def test_format_char_from_string_and_int():
    assert format_char("z") == "z"
    assert format_char(ord("Q")) == "Q"
    assert format_char(ord("Q") + 256) == "Q"


def test_format_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_format_str_null():
    assert format_str(None) == "(null)"
    assert format_str("hello") == "hello"


def test_format_str_rejects_non_string():
    with pytest.raises(TypeError):
        format_str(12)


@given(INT32)
def test_format_int_round_trip(n):
    assert int(format_int(n)) == n


def test_format_int_minimum():
    assert format_int(-2147483648) == "-2147483648"
    assert format_int(2**31) == "-2147483648"


def test_format_int_zero():
    assert format_int(0) == "0"


def test_format_int_rejects_non_int():
    with pytest.raises(TypeError):
        format_int("5")


@given(UINT32)
def test_format_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


def test_format_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 2**32 - 1


@given(UINT32)
def test_format_hex_round_trip(n):
    assert int(format_hex(n), 16) == n
    assert int(format_hex(n, True), 16) == n


@given(UINT32)
def test_format_hex_case(n):
    assert format_hex(n, True) == format_hex(n).upper()
    assert format_hex(n) == format_hex(n).lower()


def test_format_hex_minus_one():
    assert format_hex(-1) == "ffffffff"


def test_format_pointer_null():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_format_pointer_round_trip(addr):
    text = format_pointer(addr)
    assert text.startswith("0x")
    assert int(text[2:], 16) == addr
    assert text == text.lower()


def test_format_pointer_rejects_non_int():
    with pytest.raises(TypeError):
        format_pointer("0x10")


@given(PLAIN_TEXT)
def test_sprintf_plain_text_unchanged(text):
    assert sprintf(text) == text


def test_sprintf_hex_example():
    assert sprintf(" %x ", -1) == " ffffffff "


@given(INT32, UINT32)
def test_sprintf_matches_formatters(n, u):
    result = sprintf("%d|%i|%u|%x|%X", n, n, u, u, u)
    expected = "|".join(
        [format_int(n), format_int(n), format_unsigned(u), format_hex(u), format_hex(u, True)]
    )
    assert result == expected


@given(PLAIN_TEXT, PLAIN_TEXT)
def test_sprintf_strings(a, b):
    assert sprintf("%s%s", a, b) == a + b


def test_sprintf_null_string_and_pointer():
    assert sprintf("%s%p", None, None) == "(null)(nil)"


def test_sprintf_percent_takes_no_argument():
    assert sprintf("%%%c", "k") == "%k"


def test_sprintf_unknown_conversion_is_dropped():
    assert sprintf("a%yb%d", 7) == "ab7"


def test_sprintf_extra_arguments_ignored():
    assert sprintf("%c", "a", "b") == "a"


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_sprintf_trailing_percent():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf(" %x ", -1, stream=stream)
    assert stream.getvalue() == " ffffffff "
    assert count == 10


@given(PLAIN_TEXT, INT32)
def test_printf_count_matches_output(text, n):
    stream = io.StringIO()
    count = printf("%s%d", text, n, stream=stream)
    assert stream.getvalue() == sprintf("%s%d", text, n)
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", None)
    assert capsys.readouterr().out == "(null)"
    assert count == 6


def test_printf_null_pointer_count():
    stream = io.StringIO()
    assert printf("%p", 0, stream=stream) == 5
    assert stream.getvalue() == "(nil)"