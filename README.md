# plaincsv

plaincsv is a small CSV library with no third-party dependencies. It reads
and writes delimited text, and the delimiter and enclosure character can be
set. The writer can put a byte-order mark at the start of its output. The
reader handles quoted fields that run over several lines.

## Installation

```
pip install plaincsv
```

## Configuration

A `CSVConfig` dataclass in `plaincsv.config` controls reading and writing:

```python
from plaincsv.config import CSVConfig, Encoding

config = CSVConfig(path="people.csv", delimiter=";")
config.has_header = True
config.encoding = Encoding.UTF8
config.write_bom = False
```

| Field | Default | Used by |
|---|---|---|
| `delimiter` | `,` | parser, writer |
| `enclosure` | `"` | parser, writer |
| `escape` | `"` | stored only |
| `path` | `""` | reader, `CSVWriter.open` |
| `has_header` | `True` | reader |
| `encoding` | `Encoding.UTF8` | reader (file encoding), writer (output encoding and BOM) |
| `write_bom` | `False` | writer |
| `strict_mode` | `False` | writer |
| `skip_empty_lines` | `False` | `CSVReader.record_count` |
| `auto_flush` | `True` | writer |
| `offset`, `limit`, `trim_fields`, `preserve_quotes` | `0`, `0`, `False`, `False` | stored only |

If `path` is longer than 1023 characters, it is cut to 1023. If you assign
`None` to `path`, the value is left as it was. `CSVConfig.copy()` returns an
independent copy.

`Encoding` has these members: `UTF8`, `UTF16LE`, `UTF16BE`, `UTF32LE`,
`UTF32BE`, `ASCII` and `LATIN1`.

## Reading

```python
from plaincsv.config import CSVConfig
from plaincsv.reader import CSVReader

with CSVReader(CSVConfig(path="people.csv")) as reader:
    print(reader.headers())
    for record in reader:
        print(record)
```

When `has_header` is set, the reader reads the first record on opening and
keeps it as the headers. `headers()` returns those headers, or an empty list
if there are none. `CSVReader` has these other methods:

- `next_record()` returns the next record as a list of strings, or `None` at
  the end of the file. It raises `CSVParseError` if the record is malformed.
- `has_next()` returns whether any input remains.
- `rewind()` goes back to the first data record.
- `seek(n)` rewinds and then skips `n` records. It raises `ValueError` if `n`
  is negative and `EOFError` if the file has too few records.
- `position()` returns the number of records consumed so far. The header
  counts as one of them.
- `record_count()` counts the data records and leaves the read position where
  it was. When `skip_empty_lines` is set, blank records are not counted.
- `set_config(config)` uses a new configuration for the records read after it.
- `close()` closes the file. After that, reads raise `ValueError`.

## Parsing text directly

`plaincsv.parser` has these lower-level functions:

```python
import io
from plaincsv.config import CSVConfig
from plaincsv.parser import parse_line, iter_records, read_record

parse_line('"Say ""Hello""",normal', CSVConfig(), 1)
# ['Say "Hello"', 'normal']

list(iter_records(io.StringIO('a,"b\nc"\nd,e\n')))
# ['a,"b\nc"', 'd,e']
```

Parsing follows these rules:

- Unquoted fields lose trailing spaces and tabs. Leading spaces are kept.
- Quoted fields keep their content exactly. A doubled enclosure inside a
  quoted field becomes a single one.
- A quoted field that is empty and comes last on the line is not returned as
  a field.

`read_record(stream)` reads one record from a text stream. It keeps reading
across line breaks that are inside double quotes. It consumes the line ending
but does not return it, and it returns `None` once the stream is exhausted.
This record splitting always uses `"`, whatever `enclosure` is set to.

A malformed line raises `CSVParseError`. Examples are an unclosed quote, or
text after a closing quote that is not the delimiter. The error's `message`,
`line` and `column` attributes say what went wrong and where.

## Writing

```python
from plaincsv.config import CSVConfig
from plaincsv.writer import CSVWriter

config = CSVConfig(path="people.csv")
with CSVWriter.open(config, ["Name", "Age", "City"]) as writer:
    writer.write_record(["Alice", "28", "Boston"])
    writer.write_record_map({"City": "Paris", "Name": "Bob", "Age": "30"})
```

`CSVWriter.open(config, headers)` creates the file named by `config.path`,
and the writer closes that file when it closes. You can instead pass an open
binary stream to `CSVWriter(config, headers, stream)`. A stream passed this
way stays open after the writer closes.

The writer writes the byte-order mark (if `write_bom` is set) and the header
line when it is created. The mark comes from `bom_for(encoding)`, which
returns empty bytes for ASCII and Latin-1.

The writer quotes a field when it contains the delimiter, the enclosure, a
carriage return or a newline. In strict mode it also quotes a field that
contains a space. Inside quotes, the enclosure is doubled. A `None` field is
written as an empty field, and each record ends with `\n`.

The writer has these methods:

- `write_record(fields)` writes one record. It raises `ValueError` if there
  are no fields.
- `write_record_map(values)` writes the values in header order. A header with
  no value is written empty. A name that matches no header is ignored. It
  raises `WriterError` if the writer has no headers or more than 32 of them.
- `write_headers(headers)` writes another header line.
- `flush()` flushes the stream.
- `close()` finishes writing.

`WriterError` is raised when the file cannot be opened, a write fails, or the
text cannot be encoded.

`write_field(stream, field, ...)`, `field_needs_quoting(...)` and
`is_numeric_field(field)` are available on their own. `is_numeric_field`
accepts an optionally signed decimal number, which may have surrounding
spaces and tabs.

## Helpers

`plaincsv.utils` provides these functions:

- `trim(text)` strips spaces, tabs, carriage returns and newlines from both
  ends.
- `trim_whitespace(text, max_len)` does the same as `trim`. It raises
  `InvalidInputError` if `max_len` is not positive. It raises
  `BufferOverflowError` if the trimmed text is not shorter than `max_len`.
- `is_whitespace(char)` returns whether a character is one of those four
  characters.
- `needs_escaping(field, delimiter, enclosure)` returns whether the field
  holds the delimiter, the enclosure, a carriage return or a newline.
- `validate_csv_chars(delimiter, enclosure, escape)` raises
  `InvalidInputError` if the three characters are not all different, or if
  the delimiter or enclosure is unset.

All of these errors derive from `UtilsError`.

## What it does not do

- There is no command-line tool. plaincsv is a library only.
- `offset`, `limit`, `trim_fields`, `preserve_quotes` and `escape` are kept in
  the configuration, but nothing applies them.
- `skip_empty_lines` affects only `record_count()`.
- The reader does not strip a byte-order mark. A mark at the start of a file
  becomes part of the first field.

## Running the tests

```
pip install -e ".[test]"
pytest
```