# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:50:02
# @Author : Kariko Lin

from .model import IniSection, IniConfig, InvalidArgument
from .parser import (
    IniParser,
    EmptyInputError,
    IniWriteError,
    Skip,
    SectionChange,
    Entry,
    LineOutcome,
    parse_line,
    readstream,
    parse,
    dumps
)
