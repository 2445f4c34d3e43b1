"""Writing CSV records to files and binary streams."""

from __future__ import annotations

import io
from collections.abc import Iterable, Mapping
from typing import BinaryIO, TextIO

from plaincsv.config import MAX_FIELDS, CSVConfig, Encoding

_BOMS = {
    Encoding.UTF8: b"\xef\xbb\xbf",
    Encoding.UTF16LE: b"\xff\xfe",
    Encoding.UTF16BE: b"\xfe\xff",
    Encoding.UTF32LE: b"\xff\xfe\x00\x00",
    Encoding.UTF32BE: b"\x00\x00\xfe\xff",
}

_LINE_END = "\n"
_BLANKS = " \t"
_DIGITS = "0123456789"


class WriterError(Exception):
    """Writing CSV output failed."""

    default_message = "Unknown error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


def bom_for(encoding: Encoding) -> bytes:
    """Return the byte order mark for ``encoding``; empty when it has none."""
    return _BOMS.get(encoding, b"")


def is_numeric_field(field: str | None) -> bool:
    """Return True if ``field`` is an optionally signed decimal number.

    Surrounding spaces and tabs are allowed; at least one digit is required.
    """
    if not field:
        return False
    text = field.strip(_BLANKS)
    if text[:1] in ("+", "-"):
        text = text[1:]
    whole, dot, fraction = text.partition(".")
    if any(ch not in _DIGITS for ch in whole):
        return False
    if dot and any(ch not in _DIGITS for ch in fraction):
        return False
    return bool(whole or fraction)


def field_needs_quoting(
    field: str | None, delimiter: str, enclosure: str, strict_mode: bool = False
) -> bool:
    """Return True if ``field`` must be written inside enclosures.

    In strict mode a field holding a space is quoted as well.
    """
    if field is None:
        return False
    specials = [ch for ch in (delimiter, enclosure, "\n", "\r") if ch]
    if strict_mode:
        specials.append(" ")
    return any(ch in field for ch in specials)


def write_field(
    stream: TextIO,
    field: str | None,
    delimiter: str = ",",
    enclosure: str = '"',
    force_quoting: bool = False,
    strict_mode: bool = False,
) -> None:
    """Write one field to a text stream, quoting and escaping it as needed."""
    text = field if field is not None else ""
    if force_quoting or field_needs_quoting(text, delimiter, enclosure, strict_mode):
        escaped = text.replace(enclosure, enclosure * 2) if enclosure else text
        stream.write(f"{enclosure}{escaped}{enclosure}")
    else:
        stream.write(text)


class CSVWriter:
    """Writes CSV records to a binary stream.

    The byte order mark, if the configuration asks for one, and the header
    line, if headers are given, are written on creation.
    """

    def __init__(
        self,
        config: CSVConfig,
        headers: Iterable[str | None] | None = None,
        stream: BinaryIO | None = None,
    ) -> None:
        if config is None:
            raise TypeError("config must not be None")
        if stream is None:
            raise TypeError("stream must not be None")
        self.config = config
        self._stream: BinaryIO | None = stream
        self._owns_stream = False
        self.delimiter = config.delimiter
        self.enclosure = config.enclosure
        self.escape = config.escape

        if config.write_bom:
            bom = bom_for(config.encoding)
            if bom:
                self._write_bytes(bom)

        header_list = list(headers) if headers is not None else []
        self.headers: list[str] = ["" if h is None else h for h in header_list]
        if header_list:
            self.write_headers(header_list)

    @classmethod
    def open(
        cls, config: CSVConfig, headers: Iterable[str | None] | None = None
    ) -> CSVWriter:
        """Create the file named by ``config.path`` and return a writer that owns it."""
        if config is None:
            raise TypeError("config must not be None")
        if not config.path:
            raise ValueError("config.path is empty")
        try:
            handle = open(config.path, "wb")
        except OSError as exc:
            raise WriterError("Failed to open file") from exc
        try:
            writer = cls(config.copy(), headers, handle)
        except BaseException:
            handle.close()
            raise
        writer._owns_stream = True
        return writer

    def __enter__(self) -> CSVWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def owns_stream(self) -> bool:
        """True when closing the writer also closes its stream."""
        return self._owns_stream

    def _require_stream(self) -> BinaryIO:
        if self._stream is None:
            raise ValueError("I/O operation on closed writer")
        return self._stream

    def _write_bytes(self, data: bytes) -> None:
        stream = self._require_stream()
        try:
            stream.write(data)
        except OSError as exc:
            raise WriterError("Failed to write to file") from exc

    def _encode(self, text: str) -> bytes:
        try:
            return text.encode(self.config.encoding.value)
        except UnicodeEncodeError as exc:
            raise WriterError("Encoding error") from exc

    def _write_line(self, fields: list[str | None]) -> None:
        buffer = io.StringIO()
        for index, field in enumerate(fields):
            if index:
                buffer.write(self.delimiter)
            write_field(
                buffer,
                field,
                self.config.delimiter,
                self.config.enclosure,
                False,
                self.config.strict_mode,
            )
        buffer.write(_LINE_END)
        self._write_bytes(self._encode(buffer.getvalue()))
        if self.config.auto_flush:
            self.flush()

    def write_headers(self, headers: Iterable[str | None]) -> None:
        """Write a header line."""
        header_list = list(headers) if headers is not None else []
        if not header_list:
            raise ValueError("no headers to write")
        self._write_line(header_list)

    def write_record(self, fields: Iterable[str | None]) -> None:
        """Write one record; None fields are written empty."""
        field_list = list(fields) if fields is not None else []
        if not field_list:
            raise ValueError("no fields to write")
        self._write_line(field_list)

    def write_record_map(self, values: Mapping[str | None, str | None]) -> None:
        """Write one record given as a mapping from header name to value.

        Values are placed in header order; headers without a value are
        written empty and names that match no header are ignored.
        """
        self._require_stream()
        if values is None:
            raise TypeError("values must not be None")
        if not self.headers:
            raise WriterError("Invalid field count")
        if len(self.headers) > MAX_FIELDS:
            raise WriterError("Buffer overflow")
        ordered: list[str | None] = [None] * len(self.headers)
        for name, value in values.items():
            if name is None:
                continue
            if name in self.headers:
                ordered[self.headers.index(name)] = value
        self.write_record(ordered)

    def flush(self) -> None:
        """Push buffered output to the stream."""
        stream = self._require_stream()
        try:
            stream.flush()
        except OSError as exc:
            raise WriterError("Failed to write to file") from exc

    def close(self) -> None:
        """Finish writing; the stream is closed only if the writer opened it."""
        if self._stream is None:
            return
        if self._owns_stream:
            try:
                self._stream.flush()
            finally:
                self._stream.close()
        self._stream = None