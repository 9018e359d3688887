# -*- encoding: utf-8 -*-
# @File   : manager.py
# @Time   : 2024/10/13 00:12:48
# @Author : Kariko Lin

"""One INI configuration with load/get/set/save around it.

    ```python
    ini = IniManager('settings.ini', from_file=True)
    ini.set('window', 'width', '800')
    ini['window']['height'] = '600'   # live section handle
    ini.save('settings.ini')
    ```
"""

import logging
from collections.abc import Iterator
from os import PathLike

from .ini.model import IniConfig, IniSection, InvalidArgument
from .ini.parser import IniParser, dumps, parse


class IniManager:
    """Not thread safe; share an instance across threads at your own lock.
    """
    def __init__(
        self,
        source: str | PathLike[str] | None = None,
        from_file: bool = False, *,
        encoding: str | None = None
    ) -> None:
        self._codec = encoding
        self.__data = IniConfig()
        if source is not None:
            self.load(source, from_file)

    def load(
        self, source: str | PathLike[str], from_file: bool = False
    ) -> None:
        """Replace (never merge) the current configuration.

        `source` is INI text, or a path when `from_file` is set.
        A missing or empty file just leaves us empty, while `''` as text
        raises `EmptyInputError` (and leaves us empty as well).
        """
        if not from_file and not isinstance(source, str):
            raise TypeError(
                f"INI text expected, got {type(source).__name__}; "
                "pass from_file=True to read a path")
        self.__data = IniConfig()
        if from_file:
            parsed = IniParser(source, self._codec).read()
        else:
            parsed = parse(source)
        self.__data = parsed
        logging.debug(f'INI loaded, {len(parsed)} section(s).')

    def get(self, header: str, key: str) -> str:
        """Value of `key` in `header`, `''` if the key is not set.

        Raises:
            InvalidArgument: empty `header` / `key`, or no such header.
        """
        if not header:
            raise InvalidArgument('header is empty; call get_data instead')
        if not key:
            raise InvalidArgument('key is empty; call get_header instead')
        if header not in self.__data:
            raise InvalidArgument(f'header not found: {header}')
        return self.__data[header].get(key, '')

    def get_data(self) -> IniConfig:
        """Snapshot copy. Changes on it won't come back."""
        return self.__data.copy()

    def get_header(self, header: str) -> IniSection:
        """The live section (created if absent); writes go straight in."""
        if not header:
            raise InvalidArgument('header is empty')
        return self.__data.setdefault(header)

    def set(self, header: str, key: str, value: str) -> None:
        """Set `key` in `header`. An empty `value` removes the key."""
        if not header:
            raise InvalidArgument('header is empty')
        if not key:
            raise InvalidArgument('key is empty')
        if not value:
            if header in self.__data:
                self.__data[header].pop(key, None)
            return
        self.__data.setdefault(header)[key] = value

    def to_string(self) -> str:
        return dumps(self.__data)

    def save(self, file: str | PathLike[str]) -> None:
        """Raises `IniWriteError` when `file` is not writable."""
        IniParser(file, self._codec).write(self.__data)

    def __getitem__(self, header: str) -> IniSection:
        return self.get_header(header)

    def __contains__(self, header: object) -> bool:
        return header in self.__data

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __len__(self) -> int:
        return len(self.__data)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f'<IniManager {len(self.__data)} section(s)>'
