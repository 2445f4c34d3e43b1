"""Settings that control how CSV data is read and written."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from enum import Enum

MAX_LINE_LENGTH = 4096
MAX_FIELDS = 32
MAX_PATH_LENGTH = 1024
MAX_ENCODING_LENGTH = 32


class Encoding(Enum):
    """Text encodings the writer knows a byte order mark for."""

    UTF8 = "utf-8"
    UTF16LE = "utf-16-le"
    UTF16BE = "utf-16-be"
    UTF32LE = "utf-32-le"
    UTF32BE = "utf-32-be"
    ASCII = "ascii"
    LATIN1 = "latin-1"


@dataclass
class CSVConfig:
    """Dialect and I/O options shared by the reader and the writer.

    ``path`` is cut to at most ``MAX_PATH_LENGTH - 1`` characters.
    """

    delimiter: str = ","
    enclosure: str = '"'
    escape: str = '"'
    path: str = ""
    offset: int = 0
    has_header: bool = True
    limit: int = 0
    encoding: Encoding = Encoding.UTF8
    write_bom: bool = False
    strict_mode: bool = False
    skip_empty_lines: bool = False
    trim_fields: bool = False
    preserve_quotes: bool = False
    auto_flush: bool = True

    def __setattr__(self, name: str, value: object) -> None:
        if name == "path":
            if value is None:
                return
            value = str(value)[: MAX_PATH_LENGTH - 1]
        super().__setattr__(name, value)

    def copy(self) -> CSVConfig:
        """Return an independent copy of this configuration."""
        return _copy.copy(self)