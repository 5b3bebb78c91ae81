# -*- encoding: utf-8 -*-
# @File   : handler.py
# @Time   : 2026/10/12 02:40:03
# @Author : Kariko Lin

"""Note: `parse()` and `encode()` never touch files.
This module is what to use when INIs are on the disk.
"""

import logging
from os import PathLike

import chardet

from .abstract import FileHandler
from .consts import UTF8_BOM
from .encoder import encode_bytes
from .model import IniDocument
from .parser import ParseError, parse

__all__ = ['IniFile']

logger = logging.getLogger(__name__)


class IniFile(FileHandler[IniDocument]):
    def __init__(
        self,
        filename: str | PathLike[str],
        encoding: str | None = None, *,
        fallback: str = 'gbk'
    ) -> None:
        """`encoding=None` means detecting it with `chardet` on reading,
        and writing in UTF-8."""
        super().__init__(filename)
        self._codec = encoding
        self._fallback = fallback

    def _decode(self, raw: bytes) -> str:
        if raw.startswith(UTF8_BOM):
            try:
                # BOM left in the text is skipped by `parse()`.
                return raw.decode('utf-8')
            except UnicodeDecodeError as e:
                logger.warning(
                    f'`{self._fn}` starts with UTF-8 BOM but is not UTF-8, '
                    f'ignoring the BOM.\n  {e}')
                raw = raw[len(UTF8_BOM):]

        if self._codec is not None:
            try:
                return raw.decode(self._codec)
            except UnicodeDecodeError as e:
                logger.warning(
                    f'Failed to decode `{self._fn}` as {self._codec}, '
                    f'guessing with chardet instead.\n  {e}')

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            logger.warning(
                f'Failed to decode `{self._fn}` as {codec["encoding"]}, '
                f'falling back to {self._fallback}.')
        try:
            return raw.decode(self._fallback)
        except UnicodeDecodeError as e:
            raise ParseError(
                f'Invalid byte sequence for {self._fallback}') from e

    def read(self) -> IniDocument:
        """读取`IniFile`实例指定的文件。

        Raises:
            OSError: when the file is not readable.
            ParseError: when the file is not a valid INI,
                or not decodable even with the fallback codec.
        """
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        return parse(self._decode(raw))

    def write(
        self, instance: IniDocument, *,
        byte_order_mark: bool = False
    ) -> None:
        """保存到*一个* INI 文件。注释和空行不会保留。

        Raises:
            ValueError: when `byte_order_mark=True` with a non UTF-8 codec.
                The file is left untouched then.
        """
        buf = encode_bytes(instance, byte_order_mark, self._codec or 'utf-8')
        with open(self._fn, 'wb') as fp:
            fp.write(buf)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
