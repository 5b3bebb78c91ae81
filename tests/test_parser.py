"""Unit tests for the INI scanner.

Tests cover:
- Main section and section headers
- Comments and whitespace trimming
- Malformed input
- Byte input and byte order marks
- The char stream cursor
"""

import pytest

from pyini import IniDocument, ParseError, parse
from pyini.parser import CharStream


@pytest.mark.unit
class TestParseBasics:
    """Tests for well-formed input."""

    def test_empty(self) -> None:
        doc = parse('')
        assert isinstance(doc, IniDocument)
        assert doc.size() == 0

    def test_blank_lines_only(self) -> None:
        assert parse('   \n\t\r\n  \t').size() == 0

    def test_main_section(self) -> None:
        doc = parse('a=b')
        assert doc.size() == 1
        assert doc.has_section('')
        assert doc[''].size() == 1
        assert doc['']['a'] == 'b'

    def test_section(self) -> None:
        doc = parse('[s]\na=b')
        assert doc.size() == 1
        assert doc.has_section('s')
        assert doc['s'].size() == 1
        assert doc['s']['a'] == 'b'

    def test_unicode(self) -> None:
        doc = parse('[š]\nā=ē')
        assert doc == {'š': {'ā': 'ē'}}

    def test_trims_spaces_and_tabs(self) -> None:
        doc = parse('[ \ts\t ]\n  key \t=\t value with spaces  \n')
        assert doc == {'s': {'key': 'value with spaces'}}

    def test_empty_value(self) -> None:
        assert parse('a=\nb =  ') == {'': {'a': '', 'b': ''}}

    def test_key_without_delimiter(self) -> None:
        assert parse('a') == {'': {'a': ''}}

    def test_last_write_wins(self) -> None:
        assert parse('a=1\na=2') == {'': {'a': '2'}}

    def test_redeclared_section_is_cleared(self) -> None:
        doc = parse('[s]\na=1\n[t]\nb=2\n[s]\nc=3\n')
        assert doc == {'s': {'c': '3'}, 't': {'b': '2'}}

    def test_section_without_entries(self) -> None:
        doc = parse('[s]')
        assert doc.has_section('s')
        assert doc['s'].size() == 0

    def test_main_section_before_headers(self) -> None:
        doc = parse('a=1\n[s]\nb=2\n')
        assert list(doc) == ['', 's']
        assert doc.main['a'] == '1'

    def test_line_endings(self) -> None:
        doc = parse('[s]\r\na=1\rb=2\n\r\nc=3')
        assert doc == {'s': {'a': '1', 'b': '2', 'c': '3'}}

    def test_brackets_inside_section_name(self) -> None:
        assert parse('[a[b]') == {'a[b': {}}

    def test_values_are_strings(self) -> None:
        assert parse('n=1\nf=true')[''].to_dict() == {'f': 'true', 'n': '1'}


@pytest.mark.unit
class TestParseComments:
    """Tests for comment stripping."""

    def test_comments(self) -> None:
        doc = parse('[s];aa\na=b; bb')
        assert doc == {'s': {'a': 'b'}}

    def test_comment_line(self) -> None:
        doc = parse('; first\n  ; indented\na=b\n;last')
        assert doc == {'': {'a': 'b'}}

    def test_comment_after_spaces_in_header(self) -> None:
        assert parse('[s] \t ; note\na=b') == {'s': {'a': 'b'}}

    def test_comment_before_delimiter(self) -> None:
        assert parse('a;=b') == {'': {'a': ''}}

    def test_comment_is_never_stored(self) -> None:
        doc = parse('k = v ; trailing = comment\n')
        assert doc['']['k'] == 'v'


@pytest.mark.unit
class TestParseErrors:
    """Tests for malformed input."""

    @pytest.mark.parametrize('text, message', [
        ('[s', 'Unexpected end of section'),
        ('[s\na=b', 'Unexpected end of section'),
        ('[s;]', 'Unexpected comment'),
        ('[s] x', 'Unexpected character after section'),
        ('[]', 'Invalid section name'),
        ('[ \t ]', 'Invalid section name'),
        ('a=b=c', 'Unexpected character'),
        ('=b', 'Invalid key name'),
        ('  \t = b', 'Invalid key name'),
    ])
    def test_malformed(self, text: str, message: str) -> None:
        with pytest.raises(ParseError) as info:
            parse(text)
        assert info.value.message == message

    def test_error_line(self) -> None:
        with pytest.raises(ParseError) as info:
            parse('a=b\r\n; note\n\n=c')
        assert info.value.line == 4
        assert str(info.value) == 'Invalid key name (line 4)'

    def test_error_line_with_bare_cr(self) -> None:
        with pytest.raises(ParseError) as info:
            parse('a\rb\r[s')
        assert info.value.line == 3

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse('[s')


@pytest.mark.unit
class TestParseBytes:
    """Tests for raw byte input."""

    def test_bytes(self) -> None:
        assert parse(b'a=b') == parse('a=b')

    def test_bytearray_and_int_sequence(self) -> None:
        assert parse(bytearray(b'[s]\na=b')) == {'s': {'a': 'b'}}
        assert parse([ord(i) for i in 'a=b']) == {'': {'a': 'b'}}

    def test_utf8_bytes(self) -> None:
        doc = parse('[š]\nā = ē ; ō'.encode('utf-8'))
        assert doc == {'š': {'ā': 'ē'}}

    def test_other_encoding(self) -> None:
        doc = parse('[节]\n键=值'.encode('gb18030'), encoding='gb18030')
        assert doc == {'节': {'键': '值'}}

    def test_invalid_byte_sequence(self) -> None:
        with pytest.raises(ParseError) as info:
            parse(b'a=b\nc=\xff')
        assert info.value.message == 'Invalid byte sequence for utf-8'
        assert info.value.line == 2

    def test_byte_order_mark(self) -> None:
        assert parse(b'\xef\xbb\xbfa=b') == {'': {'a': 'b'}}
        assert parse(b'\xef\xbb\xbf') == {}
        assert parse([0xEF, 0xBB, 0xBF, 0x61, 0x3D, 0x62]) == {'': {'a': 'b'}}

    def test_decoded_byte_order_mark(self) -> None:
        assert parse('\ufeff[s]\na=b') == {'s': {'a': 'b'}}

    def test_partial_byte_order_mark(self) -> None:
        doc = parse(b'\xef\xbbx=y', encoding='latin-1')
        assert doc == {'': {'\xef\xbbx': 'y'}}

    def test_mixed_elements(self) -> None:
        with pytest.raises(TypeError):
            parse(['a', 0x3D, 'b'])


@pytest.mark.unit
class TestCharStream:
    """Tests for the forward cursor."""

    def test_walk(self) -> None:
        stream = CharStream('ab')
        assert stream.current == 'a'
        stream.next()
        assert stream.current == 'b'
        stream.next()
        assert stream.exhausted
        stream.next()
        assert stream.current == ''

    def test_line_count(self) -> None:
        stream = CharStream('a\r\nb\rc\nd')
        lines = []
        while not stream.exhausted:
            if stream.current not in '\r\n':
                lines.append((stream.current, stream.line))
            stream.next()
        assert lines == [('a', 1), ('b', 2), ('c', 3), ('d', 4)]

    def test_skip_line(self) -> None:
        stream = CharStream(b'skip me\r\nb')
        stream.skip_line()
        assert stream.current == '\n'
        stream.skip_line()
        assert stream.current == 'b'
        assert stream.line == 2
        assert not stream.at_line_end()
        stream.next()
        assert stream.at_line_end()
        stream.skip_line()
        assert stream.exhausted

    def test_binary_flag(self) -> None:
        assert CharStream(b'a').binary
        assert not CharStream('a').binary
        assert CharStream([0x61]).binary
        assert CharStream([]).binary is None
