"""Splitting CSV lines into fields and reading whole records from streams."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto
from typing import TextIO

from plaincsv.config import CSVConfig

_RECORD_QUOTE = '"'
_FIELD_END_WHITESPACE = " \t\r\n"
_TRAILING_BLANKS = " \t"


class CSVParseError(ValueError):
    """A line could not be split into fields."""

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"


class _State(Enum):
    FIELD_START = auto()
    UNQUOTED_FIELD = auto()
    QUOTED_FIELD = auto()
    FIELD_END = auto()


def _plain_field(text: str) -> str:
    return text.rstrip(_TRAILING_BLANKS)


def _quoted_field(text: str, enclosure: str) -> str:
    return text.replace(enclosure * 2, enclosure)


def parse_line(line: str, config: CSVConfig | None = None, line_number: int = 0) -> list[str]:
    """Split one record into its fields.

    Unquoted fields lose trailing spaces and tabs; quoted fields keep their
    content and have doubled enclosures collapsed. A quoted field that ends
    the line with no content is not reported as a field.
    """
    if line is None:
        raise TypeError("Invalid arguments")
    if config is None:
        config = CSVConfig()
    delimiter = config.delimiter
    enclosure = config.enclosure

    fields: list[str] = []
    state = _State.FIELD_START
    start = 0
    length = 0
    pos = 0
    size = len(line)

    while pos < size:
        c = line[pos]
        if state is _State.FIELD_START:
            if c == enclosure:
                state = _State.QUOTED_FIELD
                start, length = pos + 1, 0
            elif c == delimiter:
                fields.append("")
                start, length = pos + 1, 0
            else:
                state = _State.UNQUOTED_FIELD
                start, length = pos, 1
        elif state is _State.UNQUOTED_FIELD:
            if c == delimiter:
                fields.append(_plain_field(line[start:start + length]))
                state = _State.FIELD_START
                start, length = pos + 1, 0
            else:
                length += 1
        elif state is _State.QUOTED_FIELD:
            if c == enclosure:
                if pos + 1 < size and line[pos + 1] == enclosure:
                    length += 2
                    pos += 1
                else:
                    state = _State.FIELD_END
            else:
                length += 1
        else:
            if c == delimiter:
                fields.append(_quoted_field(line[start:start + length], enclosure))
                state = _State.FIELD_START
                start, length = pos + 1, 0
            elif c not in _FIELD_END_WHITESPACE:
                raise CSVParseError("Expected delimiter after quoted field", line_number, pos)
        pos += 1

    if state is _State.QUOTED_FIELD:
        raise CSVParseError("Unclosed quote", line_number, pos)

    if length > 0 or state is _State.FIELD_START:
        text = line[start:start + length]
        if state is _State.FIELD_END:
            fields.append(_quoted_field(text, enclosure))
        else:
            fields.append(_plain_field(text))

    return fields


def _peek_skip(stream: TextIO, wanted: str) -> str:
    """Read one character; put it back unless it equals ``wanted``."""
    mark = stream.tell()
    nxt = stream.read(1)
    if nxt and nxt != wanted:
        stream.seek(mark)
    return nxt


def read_record(stream: TextIO) -> str | None:
    """Read one record, which may span lines inside quotes.

    The line ending that closes the record is consumed but not returned.
    Returns None once the stream is exhausted.
    """
    chars: list[str] = []
    in_quotes = False
    at_eof = False

    while True:
        c = stream.read(1)
        if not c:
            at_eof = True
            break
        if c == _RECORD_QUOTE:
            if in_quotes:
                if _peek_skip(stream, _RECORD_QUOTE) == _RECORD_QUOTE:
                    chars.append(_RECORD_QUOTE * 2)
                else:
                    chars.append(_RECORD_QUOTE)
                    in_quotes = False
            else:
                in_quotes = True
                chars.append(_RECORD_QUOTE)
        elif c in "\r\n":
            if in_quotes:
                chars.append(c)
                continue
            if c == "\r":
                _peek_skip(stream, "\n")
            break
        else:
            chars.append(c)

    if not chars and at_eof:
        return None
    return "".join(chars)


def iter_records(stream: TextIO) -> Iterator[str]:
    """Yield every remaining record of ``stream``."""
    while (record := read_record(stream)) is not None:
        yield record