"""Small text helpers used when reading and writing CSV fields."""

from __future__ import annotations

_WHITESPACE = " \t\r\n"


class UtilsError(ValueError):
    """Base class for errors raised by the helpers in this module."""

    default_message = "Unknown error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class BufferOverflowError(UtilsError):
    """The result does not fit in the room allowed for it."""

    default_message = "Buffer overflow"


class InvalidInputError(UtilsError):
    """An argument has a value the helper cannot work with."""

    default_message = "Invalid input"


def is_whitespace(char: str) -> bool:
    """Return True for a single space, tab, carriage return or newline."""
    return len(char) == 1 and char in _WHITESPACE


def trim_whitespace(text: str, max_len: int | None = None) -> str:
    """Strip CSV whitespace from both ends of ``text``.

    ``max_len`` is the room available including a terminator, so the
    trimmed text must be shorter than it.
    """
    if text is None:
        raise TypeError("Null pointer error")
    if max_len is not None and max_len <= 0:
        raise InvalidInputError()
    trimmed = text.strip(_WHITESPACE)
    if trimmed and max_len is not None and len(trimmed) >= max_len:
        raise BufferOverflowError()
    return trimmed


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_WHITESPACE)


def _is_unset(char: str) -> bool:
    return char in ("", "\0")


def validate_csv_chars(delimiter: str, enclosure: str, escape: str) -> None:
    """Raise InvalidInputError unless the three dialect characters are usable."""
    if delimiter == enclosure or delimiter == escape or enclosure == escape:
        raise InvalidInputError("Delimiter, enclosure and escape must differ")
    if _is_unset(delimiter) or _is_unset(enclosure):
        raise InvalidInputError("Delimiter and enclosure must be set")


def needs_escaping(field: str | None, delimiter: str, enclosure: str) -> bool:
    """Return True if ``field`` holds a character that forces quoting."""
    if field is None:
        return False
    return any(ch in field for ch in (delimiter, enclosure, "\r", "\n") if ch)