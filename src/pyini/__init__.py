# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 03:01:52
# @Author : Kariko Lin

import logging

from .model import IniDocument, IniSection, RangeError
from .parser import ParseError, parse
from .encoder import encode, encode_bytes
from .handler import IniFile

__all__ = [
    'IniDocument', 'IniSection', 'RangeError',
    'ParseError', 'parse',
    'encode', 'encode_bytes',
    'IniFile'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
