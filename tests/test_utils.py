import pytest

from plaincsv.utils import (
    BufferOverflowError,
    InvalidInputError,
    UtilsError,
    is_whitespace,
    needs_escaping,
    trim,
    trim_whitespace,
    validate_csv_chars,
)


@pytest.mark.parametrize("char", [" ", "\t", "\r", "\n"])
def test_is_whitespace_true(char):
    assert is_whitespace(char) is True


@pytest.mark.parametrize("char", ["a", "1", ",", '"', "\0", ""])
def test_is_whitespace_false(char):
    assert is_whitespace(char) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  hello world  ", "hello world"),
        ("\t\r\ntest\t\r\n", "test"),
        ("no_whitespace", "no_whitespace"),
        ("   ", ""),
    ],
)
def test_trim_whitespace(text, expected):
    assert trim_whitespace(text, len(text) + 1) == expected


def test_trim_whitespace_none():
    with pytest.raises(TypeError):
        trim_whitespace(None, 100)


def test_trim_whitespace_zero_size():
    with pytest.raises(InvalidInputError):
        trim_whitespace("test", 0)


def test_trim_whitespace_buffer_overflow():
    with pytest.raises(BufferOverflowError):
        trim_whitespace("  very long string that should cause overflow  ", 5)


def test_error_messages():
    assert str(BufferOverflowError()) == "Buffer overflow"
    assert str(InvalidInputError()) == "Invalid input"
    assert issubclass(BufferOverflowError, UtilsError)
    assert issubclass(InvalidInputError, UtilsError)


@pytest.mark.parametrize(
    "delimiter, enclosure, escape",
    [(",", '"', "\\"), (";", "'", "\\"), ("\t", '"', "\\")],
)
def test_validate_csv_chars_ok(delimiter, enclosure, escape):
    assert validate_csv_chars(delimiter, enclosure, escape) is None


@pytest.mark.parametrize(
    "delimiter, enclosure, escape",
    [(",", ",", '"'), (",", '"', ","), ("\0", '"', "\\"), (",", "\0", "\\")],
)
def test_validate_csv_chars_invalid(delimiter, enclosure, escape):
    with pytest.raises(InvalidInputError):
        validate_csv_chars(delimiter, enclosure, escape)


@pytest.mark.parametrize(
    "field, expected",
    [
        ("hello,world", True),
        ('hello"world', True),
        ("hello\rworld", True),
        ("hello\nworld", True),
        ("hello world", False),
        ("simple", False),
        ("123", False),
        (None, False),
    ],
)
def test_needs_escaping(field, expected):
    assert needs_escaping(field, ",", '"') is expected


@pytest.mark.parametrize(
    "field, delimiter, enclosure, expected",
    [
        ("hello;world", ";", "'", True),
        ("hello'world", ";", "'", True),
        ("hello\tworld", "\t", '"', True),
        ("hello,world", ";", "'", False),
        ('hello"world', ";", "'", False),
    ],
)
def test_needs_escaping_different_chars(field, delimiter, enclosure, expected):
    assert needs_escaping(field, delimiter, enclosure) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  hello world  ", "hello world"),
        ("\t\r\ntest\t\r\n", "test"),
        ("no_whitespace", "no_whitespace"),
        ("   ", ""),
    ],
)
def test_trim(text, expected):
    assert trim(text) == expected