# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 21:52:40
# @Author : Kariko Lin

"""
Basically INI Structure: named sections of `str: str` pairs.

No inheritance, no `[#include]`, no `+=`.
Parsing and dumping live in `ini.parser`.
"""

from collections.abc import Iterator, Mapping, MutableMapping


class InvalidArgument(ValueError):
    """Empty section/key name, or lookup of a missing section."""
    pass


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    An empty value is never kept: `section[key] = ''` drops `key`
    (and does nothing if `key` is absent), so `''` reads the same
    as "not set" everywhere in the package.
    """

    def __init__(self, pairs_to_import: Mapping[str, str] | None = None):
        self.__raw: dict[str, str] = {}
        if pairs_to_import:
            self.update(pairs_to_import)

    def __getitem__(self, key: str) -> str:
        return self.__raw[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not key:
            raise InvalidArgument('key is empty')
        if not value:
            self.__raw.pop(key, None)
            return
        self.__raw[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return self.__raw.__repr__()

    def to_dict(self) -> dict[str, str]:
        return self.__raw.copy()


class IniConfig(MutableMapping[str, IniSection]):
    """INI 文件表示，a group of `IniSection` keyed by section name.

    ```ini
    [section]
    key = val
    ```

    Section names are never empty. Order of sections (and of keys
    within) is simply dict order and means nothing.
    """
    def __init__(
        self,
        sections: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        self.__raw: dict[str, IniSection] = {}
        if sections:
            for decl, pairs in sections.items():
                self[decl] = pairs

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        if not key:
            raise InvalidArgument('header is empty')
        # shouldn't keep ptr to external dict.
        self.__raw[key] = IniSection(value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return self.__raw.__repr__()

    def setdefault(
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        """Return the live section `key`, creating it (from `default`,
        copied) when absent."""
        if key not in self.__raw:
            self[key] = default or {}
        return self.__raw[key]

    def copy(self) -> 'IniConfig':
        """Deep copy; sections of the copy are independent of ours."""
        return IniConfig(self.__raw)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {decl: data.to_dict() for decl, data in self.__raw.items()}
