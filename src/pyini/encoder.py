# -*- encoding: utf-8 -*-
# @File   : encoder.py
# @Time   : 2026/10/12 02:13:21
# @Author : Kariko Lin

import codecs
import logging
from io import StringIO

from .consts import BOM_CHAR, UTF8_BOM
from .model import IniDocument

__all__ = ['encode', 'encode_bytes']

logger = logging.getLogger(__name__)


def _write_document(buf: StringIO, doc: IniDocument) -> None:
    for name, section in doc.items():
        # main section goes without header, and it always comes first.
        if name:
            buf.write(f'[{name}]\n')
        for k, v in section.items():
            buf.write(f'{k}={v}\n')


def encode(doc: IniDocument, byte_order_mark: bool = False) -> str:
    """Dump the document as INI text, sections and keys sorted.

    Comments and blank lines are never reproduced,
    neither keys nor values would be escaped, trimmed or quoted.
    """
    buf = StringIO()
    if byte_order_mark:
        buf.write(BOM_CHAR)
    _write_document(buf, doc)
    logger.debug('Encoded %d section(s).', len(doc))
    return buf.getvalue()


def encode_bytes(
    doc: IniDocument,
    byte_order_mark: bool = False,
    encoding: str = 'utf-8'
) -> bytes:
    """Same as `encode()`, but encoded, mainly for file writers.

    Raises:
        ValueError: when a BOM is asked for, but `encoding` isn't UTF-8.
    """
    if byte_order_mark and codecs.lookup(encoding).name != 'utf-8':
        raise ValueError(f'UTF-8 BOM does not fit {encoding} content')
    ret = encode(doc).encode(encoding)
    return UTF8_BOM + ret if byte_order_mark else ret
