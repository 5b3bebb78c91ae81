# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 01:04:45
# @Author : Kariko Lin

"""Single pass INI scanner.

Supported lines (leading spaces and tabs are skipped):

    ```ini
    key = value        ; goes to the main section, named ''.
    ; a comment line.
    [section]          ; a comment after header is fine.
    key2 = value2
    ```

The parser walks the input char by char with *one* cursor,
and end of input is taken as end of line at every point.
It accepts decoded `str`, raw `bytes` (each byte taken as a char,
so that UTF-8 sequences pass through untouched until decoded back),
or any iterable of one-char strings or byte ints.
"""

import logging
from collections.abc import Iterable, Iterator
from itertools import chain, islice
from typing import TypeAlias

from .abstract import SerializedStream
from .consts import (
    BOM_CHAR, NEWLINES, RAW_BOM_CHARS, WHITESPACES, IniMark
)
from .model import IniDocument

__all__ = ['ParseError', 'CharStream', 'IniScanner', 'parse']

logger = logging.getLogger(__name__)

RawIni: TypeAlias = str | bytes | bytearray | memoryview | Iterable[str | int]


class ParseError(ValueError):
    """To record errors when parsing INI text."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f'{self.message} (line {self.line})'


class CharStream(SerializedStream[str]):
    """Forward cursor over INI input, yielding one char at a time.

    `current` is `''` once the input is exhausted.
    """

    def __init__(self, data: RawIni) -> None:
        # None means "not yet known", for iterables still empty.
        self.binary: bool | None
        if isinstance(data, str):
            self._iter: Iterator[str] = iter(data)
            self.binary = False
        elif isinstance(data, (bytes, bytearray, memoryview)):
            self._iter = iter(bytes(data).decode('latin-1'))
            self.binary = True
        else:
            self._iter = map(self._to_char, data)
            self.binary = None
        self._line = 1
        self._prime()

    def _to_char(self, elem: str | int) -> str:
        if isinstance(elem, int):
            if self.binary is False:
                raise TypeError('cannot mix chars with byte ints')
            if not 0 <= elem <= 0xFF:
                raise ValueError(f'byte out of range: {elem}')
            self.binary = True
            return chr(elem)
        if isinstance(elem, str) and len(elem) == 1:
            if self.binary is True:
                raise TypeError('cannot mix byte ints with chars')
            self.binary = False
            return elem
        raise TypeError(f'expect a char or a byte, got {elem!r}')

    def _prime(self) -> None:
        self._current = next(self._iter, '')

    @property
    def current(self) -> str:
        return self._current

    @property
    def exhausted(self) -> bool:
        return self._current == ''

    @property
    def line(self) -> int:
        return self._line

    def next(self) -> None:
        if self.exhausted:
            return
        prev = self._current
        self._current = next(self._iter, '')
        # `\r\n` counts once.
        if prev == '\n' or (prev == '\r' and self._current != '\n'):
            self._line += 1

    def at_line_end(self) -> bool:
        return self.exhausted or self._current in NEWLINES

    def skip_byte_order_mark(self) -> bool:
        """Skip the UTF-8 BOM if the cursor stands on it.

        Should be called right after init.
        """
        if self.exhausted:
            return False
        if not self.binary:
            if self._current != BOM_CHAR:
                return False
            self.next()
            return True
        ahead = [self._current, *islice(self._iter, len(RAW_BOM_CHARS) - 1)]
        if ''.join(ahead) == RAW_BOM_CHARS:
            self._prime()
            return True
        # not a BOM, put them back.
        self._iter = chain(ahead[1:], self._iter)
        return False

    def __str__(self) -> str:
        return '<%s stream, line %d>' % (
            'byte' if self.binary else 'char', self.line)


class IniScanner:
    """State of one `parse()` call.

    Use `parse()` directly unless you have your own `CharStream`.
    """

    def __init__(self, stream: CharStream, encoding: str = 'utf-8') -> None:
        self._stream = stream
        self._codec = encoding
        self._doc = IniDocument()
        self._section = ''

    def scan(self) -> IniDocument:
        stream = self._stream
        stream.skip_byte_order_mark()
        while not stream.exhausted:
            match stream.current:
                case ' ' | '\t' | '\r' | '\n':
                    stream.next()
                case IniMark.SECTION_OPEN:
                    self._read_section()
                case IniMark.COMMENT:
                    stream.skip_line()
                case _:
                    self._read_entry()
        logger.debug(
            'Parsed %d section(s), %d pair(s) from %s.',
            len(self._doc),
            sum(len(i) for i in self._doc.values()),
            stream)
        return self._doc

    def _decode(self, chars: list[str], line: int) -> str:
        ret = ''.join(chars).strip(WHITESPACES)
        if not self._stream.binary:
            return ret
        try:
            return ret.encode('latin-1').decode(self._codec)
        except UnicodeDecodeError as e:
            raise ParseError(
                f'Invalid byte sequence for {self._codec}', line) from e

    def _read_section(self) -> None:
        stream, line = self._stream, self._stream.line
        stream.next()  # skip '['
        name: list[str] = []
        closed = False
        while True:
            if stream.at_line_end():
                if not closed:
                    raise ParseError('Unexpected end of section', line)
                stream.next()
                break
            elif stream.current == IniMark.COMMENT:
                if not closed:
                    raise ParseError('Unexpected comment', line)
                stream.skip_line()
                break
            elif stream.current == IniMark.SECTION_CLOSE:
                closed = True
            elif stream.current not in WHITESPACES and closed:
                raise ParseError('Unexpected character after section', line)

            if not closed:
                name.append(stream.current)
            stream.next()

        section = self._decode(name, line)
        if not section:
            raise ParseError('Invalid section name', line)
        # re-declaring a section drops what it had.
        self._section = section
        self._doc.reset_section(section)

    def _read_entry(self) -> None:
        stream, line = self._stream, self._stream.line
        key: list[str] = []
        value: list[str] = []
        parsed_key = False
        while not stream.exhausted:
            if stream.current in NEWLINES:
                stream.next()
                break
            elif stream.current == IniMark.DELIMITER:
                if parsed_key:
                    raise ParseError('Unexpected character', line)
                parsed_key = True
            elif stream.current == IniMark.COMMENT:
                stream.skip_line()
                break
            else:
                (value if parsed_key else key).append(stream.current)
            stream.next()

        k = self._decode(key, line)
        if not k:
            raise ParseError('Invalid key name', line)
        self._doc.get_or_create_section(self._section)[k] = \
            self._decode(value, line)


def parse(data: RawIni, encoding: str = 'utf-8') -> IniDocument:
    """Parse INI text (or raw bytes) into an `IniDocument`.

    `encoding` only matters for byte input, to decode names and values.

    Raises:
        ParseError: on malformed input. No partial document is kept.
    """
    return IniScanner(CharStream(data), encoding).scan()
