# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:38:26
# @Author : Kariko Lin

import logging

from .ini import (
    IniSection, IniConfig, IniParser,
    Skip, SectionChange, Entry, parse_line, parse, dumps,
    EmptyInputError, InvalidArgument, IniWriteError
)
from .manager import IniManager

__all__ = [
    'IniManager', 'IniConfig', 'IniSection', 'IniParser',
    'Skip', 'SectionChange', 'Entry', 'parse_line', 'parse', 'dumps',
    'EmptyInputError', 'InvalidArgument', 'IniWriteError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
