import io

import pytest

from plaincsv.config import CSVConfig
from plaincsv.parser import CSVParseError, iter_records, parse_line, read_record


def test_simple_line():
    config = CSVConfig(delimiter=",", enclosure='"', escape="\\")
    assert parse_line("a,b,c", config, 1) == ["a", "b", "c"]


def test_quoted_fields():
    config = CSVConfig(delimiter=",", enclosure='"', escape="\\")
    assert parse_line('"a,b","c"', config, 2) == ["a,b", "c"]


def test_unclosed_quote_raises():
    config = CSVConfig(delimiter=",", enclosure='"', escape="\\")
    with pytest.raises(CSVParseError) as info:
        parse_line('"a,b,c', config, 3)
    assert info.value.message == "Unclosed quote"
    assert info.value.line == 3
    assert info.value.column == 6


def test_text_after_quoted_field_raises():
    with pytest.raises(CSVParseError) as info:
        parse_line('"a"x,b', CSVConfig(), 7)
    assert info.value.message == "Expected delimiter after quoted field"
    assert info.value.column == 3
    assert info.value.line == 7


def test_whitespace_after_quoted_field_is_ignored():
    assert parse_line('"a"  ,b') == ["a", "b"]


def test_escaped_quotes():
    config = CSVConfig()
    assert parse_line('"Say ""Hello"" World",normal', config, 1) == ['Say "Hello" World', "normal"]
    assert parse_line('"""quoted""","test"', config, 2) == ['"quoted"', "test"]


def test_trailing_whitespace_trimmed_leading_kept():
    config = CSVConfig()
    assert parse_line("  field1  ,  field2  ,  field3  ", config, 1) == ["  field1", "  field2", "  field3"]
    assert parse_line('"  field1  ",  field2  ', config, 2) == ["  field1  ", "  field2"]
    assert parse_line("field1   ,field2\t\t,field3 ", config, 3) == ["field1", "field2", "field3"]


def test_empty_fields():
    config = CSVConfig()
    assert parse_line("a,,c", config, 1) == ["a", "", "c"]
    assert parse_line(",,", config, 2) == ["", "", ""]
    assert parse_line('a,"",c', config, 3) == ["a", "", "c"]


def test_empty_line_is_one_empty_field():
    assert parse_line("") == [""]


def test_trailing_delimiter_adds_empty_field():
    assert parse_line("a,") == ["a", ""]


def test_trailing_empty_quoted_field_is_dropped():
    assert parse_line('a,""') == ["a"]


def test_custom_delimiters():
    assert parse_line("a;b;c", CSVConfig(delimiter=";"), 1) == ["a", "b", "c"]
    assert parse_line("a|b|c", CSVConfig(delimiter="|"), 2) == ["a", "b", "c"]


def test_custom_enclosure():
    config = CSVConfig(enclosure="'")
    assert parse_line("'x,y','it''s'", config) == ["x,y", "it's"]


def test_long_line():
    line = ("very_long_field_that_might_cause_allocation_failure,another_field,"
            "and_another_field,yet_another_field")
    assert parse_line(line, CSVConfig(), 1) == [
        "very_long_field_that_might_cause_allocation_failure",
        "another_field",
        "and_another_field",
        "yet_another_field",
    ]


def test_none_line_raises():
    with pytest.raises(TypeError):
        parse_line(None)


def test_read_full_record_multiline():
    content = ('field1,"field2\nwith newline",field3\nsimple,line,here\n'
               '"another","multi\nline\nfield",end\n')
    stream = io.StringIO(content)
    record1 = read_record(stream)
    assert "field2\nwith newline" in record1
    assert read_record(stream) == "simple,line,here"
    record3 = read_record(stream)
    assert "multi\nline\nfield" in record3
    assert read_record(stream) is None


def test_read_record_keeps_doubled_quotes():
    stream = io.StringIO('"a""b",c\n')
    assert read_record(stream) == '"a""b",c'
    assert read_record(stream) is None


def test_read_record_crlf_and_cr():
    stream = io.StringIO("a,b\r\nc,d\re,f")
    assert read_record(stream) == "a,b"
    assert read_record(stream) == "c,d"
    assert read_record(stream) == "e,f"
    assert read_record(stream) is None


def test_read_record_blank_line():
    stream = io.StringIO("a\n\nb\n")
    assert list(iter_records(stream)) == ["a", "", "b"]


def test_iter_records_roundtrip_with_parse():
    stream = io.StringIO('x,"y\nz"\n1,2\n')
    assert [parse_line(r) for r in iter_records(stream)] == [["x", "y\nz"], ["1", "2"]]