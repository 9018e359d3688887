# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 22:31:05
# @Author : Kariko Lin

"""Plain INI reading & writing.

Rules are lenient on purpose; a line that makes no sense is *skipped*,
never reported as an error:

    ```ini
    ; comment, and so is `# comment`
    orphan = dropped     ; no section yet
    [ section ]          ; ALL whitespaces are removed, so `section`
    key = val ; comment  ; `val`
    esc = a\\;b          ; `a\\;b`, backslash kept
    esc2 = a\\\\;b       ; `a\\\\;b`, only one char looked back
    gone = ;c            ; marker first, value empty, key dropped
    quoted = "val"       ; `val`
    no equal sign        ; skipped
    ```
"""

import logging
from dataclasses import dataclass
from io import StringIO, TextIOBase

import chardet

from .model import IniConfig
from ..abstract import FileHandler


class EmptyInputError(ValueError):
    """`parse()` got a zero-length string."""
    pass


class IniWriteError(OSError):
    """Target file unable to open for writing."""
    pass


@dataclass(frozen=True)
class Skip:
    pass


@dataclass(frozen=True)
class SectionChange:
    name: str


@dataclass(frozen=True)
class Entry:
    key: str
    value: str


type LineOutcome = Skip | SectionChange | Entry


def _cut_comment(value: str, marker: str) -> str:
    # only the one char ahead counts as escape, `\\;` is still escaped.
    pos = value.find(marker)
    while pos != -1:
        if pos == 0 or value[pos - 1] != '\\':
            return value[:pos]
        pos = value.find(marker, pos + 1)
    return value


def parse_line(line: str) -> LineOutcome:
    """Classify one raw line. Knows nothing about the current section."""
    line = ''.join(line.split())
    if not line or line[0] in ';#':
        return Skip()

    if line[0] == '[' and line[-1] == ']':
        return SectionChange(line[1:-1])

    key, eq, value = line.partition('=')
    if not eq or not key:
        return Skip()

    value = _cut_comment(_cut_comment(value, ';'), '#')
    if len(value) > 1 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    return Entry(key, value)


def readstream(buf: TextIOBase | StringIO) -> IniConfig:
    """读取解码好的字符串流。Never raises on bad lines."""
    ret = IniConfig()
    this_sect = ''
    lineno = 0
    while i := buf.readline():
        lineno += 1
        outcome = parse_line(i)
        if isinstance(outcome, SectionChange):
            this_sect = outcome.name
        elif isinstance(outcome, Entry):
            if not this_sect:
                logging.debug(
                    f'line {lineno}: "{outcome.key}" belongs to no section, '
                    'dropped.')
            elif this_sect in ret:
                ret[this_sect][outcome.key] = outcome.value
            elif outcome.value:
                # sections only appear once they get a pair.
                ret[this_sect] = {outcome.key: outcome.value}
        elif i.strip() and i.lstrip()[0] not in ';#':
            logging.debug(f'line {lineno}: skipped {i.strip()!r}')
    return ret


def parse(text: str) -> IniConfig:
    """Parse INI text in one shot.

    Raises:
        EmptyInputError: `text` is `''`. Whitespace-only text is fine
        and just yields an empty `IniConfig`.
    """
    if not text:
        raise EmptyInputError('data is empty')
    return readstream(StringIO(text))


def dumps(instance: IniConfig) -> str:
    """Serialize to INI text.

    Sections without pairs are left out, and each section ends with
    a blank line.
    """
    buffers: list[str] = []
    for decl, data in instance.items():
        if not decl or not data:
            continue
        buffers.append(f'[{decl}]\n')
        buffers.extend(f'{k}={v}\n' for k, v in data.items())
        buffers.append('\n')
    return ''.join(buffers)


class IniParser(FileHandler[IniConfig]):
    def __init__(self, rootfile, encoding: str | None = None):
        super().__init__(rootfile)
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        return self._codec

    @staticmethod
    def _decode_file(filename: str) -> str:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            logging.warning(
                f'`{filename}` is not {codec["encoding"]}, '
                'decoding as latin-1.')
            return raw.decode('latin-1')

    def read_text(self) -> str:
        """Whole file content. `''` if the file is missing or unreadable.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self.filename, 'r', encoding=self._codec) as fp:
                return fp.read()
        except UnicodeDecodeError:
            return self._decode_file(self.filename)
        except OSError as e:
            logging.warning(f'INI file unreadable, treated as empty:\n  {e}')
            return ''

    def read(self) -> IniConfig:
        """读取`IniParser`实例指定的文件。

        Unlike `parse()`, empty (or missing) files simply give
        an empty `IniConfig`.
        """
        text = self.read_text()
        if not text:
            return IniConfig()
        return parse(text)

    def write(self, instance: IniConfig) -> None:
        """保存到 INI 文件。

        Raises:
            IniWriteError: if the file could not be opened for writing.
        """
        buffer = dumps(instance)
        try:
            with open(self.filename, 'w', encoding=self._codec) as fp:
                fp.write(buffer)
        except OSError as e:
            logging.error(f'failed to write `{self.filename}`: {e}')
            raise IniWriteError(
                f'could not open {self.filename} for writing') from e

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
