"""Record-at-a-time reading of CSV files."""

from __future__ import annotations

from typing import TextIO

from plaincsv.config import CSVConfig
from plaincsv.parser import parse_line, read_record
from plaincsv.utils import trim


class CSVReader:
    """Reads records from the file named by ``config.path``.

    When the configuration says the file has a header, the first record is
    read on opening and kept as the headers.
    """

    def __init__(self, config: CSVConfig) -> None:
        self.config = config
        self._file: TextIO | None = open(
            config.path, "r", encoding=config.encoding.value, newline=""
        )
        self._headers: list[str] | None = None
        self._line_number = 0

        if config.has_header:
            line = read_record(self._file)
            if line is not None:
                self._line_number += 1
                try:
                    self._headers = parse_line(line, config, self._line_number)
                except ValueError:
                    self._headers = None

    def __enter__(self) -> CSVReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __iter__(self) -> CSVReader:
        return self

    def __next__(self) -> list[str]:
        record = self.next_record()
        if record is None:
            raise StopIteration
        return record

    def _stream(self) -> TextIO:
        if self._file is None:
            raise ValueError("I/O operation on closed reader")
        return self._file

    def close(self) -> None:
        """Close the underlying file; further reads raise ValueError."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def next_record(self) -> list[str] | None:
        """Return the fields of the next record, or None at end of file.

        Raises CSVParseError if the record is malformed.
        """
        stream = self._stream()
        line = read_record(stream)
        if line is None:
            return None
        self._line_number += 1
        return parse_line(line, self.config, self._line_number)

    def headers(self) -> list[str]:
        """Return the header fields, or an empty list if none were loaded."""
        return list(self._headers) if self._headers is not None else []

    def rewind(self) -> None:
        """Go back to the first data record."""
        stream = self._stream()
        stream.seek(0)
        self._line_number = 0
        if self.config.has_header and self._headers is not None:
            if read_record(stream) is not None:
                self._line_number = 1

    def set_config(self, config: CSVConfig) -> None:
        """Use ``config`` for records read from now on."""
        if config is None:
            raise TypeError("config must not be None")
        self.config = config

    def record_count(self) -> int:
        """Count the data records in the file without moving the read position."""
        stream = self._stream()
        mark = stream.tell()
        try:
            stream.seek(0)
            if self.config.has_header and read_record(stream) is None:
                return 0
            count = 0
            while (line := read_record(stream)) is not None:
                if self.config.skip_empty_lines and not trim(line):
                    continue
                count += 1
            return count
        finally:
            stream.seek(mark)

    def position(self) -> int:
        """Return the number of records consumed so far, header included."""
        self._stream()
        return self._line_number

    def seek(self, position: int) -> None:
        """Skip ``position`` records past the start of the data.

        Raises ValueError for a negative position and EOFError if the file
        holds fewer records.
        """
        stream = self._stream()
        if position < 0:
            raise ValueError("position must not be negative")
        self.rewind()
        for _ in range(position):
            if read_record(stream) is None:
                raise EOFError(f"fewer than {position} records to skip")
            self._line_number += 1

    def has_next(self) -> bool:
        """Return True if any input remains to be read."""
        stream = self._stream()
        mark = stream.tell()
        c = stream.read(1)
        stream.seek(mark)
        return c != ""