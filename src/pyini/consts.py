# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/11 20:40:12
# @Author : Kariko Lin

from enum import Enum

UTF8_BOM = b'\xef\xbb\xbf'
# how the BOM looks like once decoded ...
BOM_CHAR = UTF8_BOM.decode('utf-8')
# ... and how it looks like when bytes are taken as chars one by one.
RAW_BOM_CHARS = UTF8_BOM.decode('latin-1')

WHITESPACES = ' \t'
NEWLINES = '\r\n'


class IniMark(str, Enum):
    SECTION_OPEN = '['
    SECTION_CLOSE = ']'
    COMMENT = ';'
    DELIMITER = '='
