# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 00:57:10
# @Author : Kariko Lin

"""
Basically INI Structure, without inheritance nor `+=` stuffs.

```ini
key = val  ; pairs before any header go to the main section, named ''.

[section]
key233 = val666
```

Both `IniDocument` and `IniSection` serve two kinds of access:
- `get_or_create_*()`, which never fails and auto-creates missing items;
- `get_*()` and `self[key]`, which raise `RangeError` on missing items.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

__all__ = ['RangeError', 'IniSection', 'IniDocument']

_MISSING: Any = object()


class RangeError(KeyError):
    """Strict lookup of a section or value that does not exist."""

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message, key)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        return f'{self.message}: {self.key!r}'


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    键值对均*应该*是`str: str`类型（哪怕值为空串），
    但由于 Python 的动态类型性质，运行时并不会对此作出限制。

    Keys are iterated in lexicographic order, so as `encode()` does.
    """

    def __init__(
        self, name: str = '', /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    def __getitem__(self, key: str) -> str:
        if key not in self._data:
            raise RangeError('Value does not exist', key)
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def has_value(self, key: str) -> bool:
        return key in self._data

    def get_or_create_value(self, key: str) -> str:
        """Get the value of `key`, which is set to `''` if missing."""
        return self._data.setdefault(key, '')

    def get_value(self, key: str, default: str = _MISSING) -> str:
        """Get the value of `key`.

        Without `default` given, a missing `key` raises `RangeError`,
        otherwise `default` is returned.
        """
        if key in self._data:
            return self._data[key]
        if default is _MISSING:
            raise RangeError('Value does not exist', key)
        return default

    def set_value(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete_value(self, key: str) -> None:
        self._data.pop(key, None)

    def size(self) -> int:
        return len(self._data)

    def copy(self) -> 'IniSection':
        return IniSection(self._name, self._data)

    def to_dict(self) -> dict[str, str]:
        return {k: self._data[k] for k in self}


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示。小节按名称排序，主小节（名称为空串）总是最先出现。

    Note that `self[name] = ...` stores a *copy* renamed to `name`,
    in case sharing the same section between documents.
    """

    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {}

    def __getitem__(self, name: str) -> IniSection:
        if name not in self.__sections:
            raise RangeError('Section does not exist', name)
        return self.__sections[name]

    def __setitem__(
        self,
        name: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        self.__sections[name] = IniSection(name, value)

    def __delitem__(self, name: str) -> None:
        del self.__sections[name]

    def __contains__(self, name: object) -> bool:
        return name in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.__sections))

    def __repr__(self) -> str:
        return 'IniDocument { %s }' % ', '.join(
            repr(i) for i in self.values())

    @property
    def main(self) -> IniSection:
        """位于文件头部的，不属于任何小节的游离键值对。"""
        return self.get_section('')

    def has_section(self, name: str) -> bool:
        return name in self.__sections

    def get_or_create_section(self, name: str) -> IniSection:
        """Get the section called `name`, added empty if missing."""
        if name not in self.__sections:
            self.__sections[name] = IniSection(name)
        return self.__sections[name]

    def get_section(self, name: str) -> IniSection:
        """Get the section called `name`, or raise `RangeError`."""
        return self[name]

    def reset_section(self, name: str) -> IniSection:
        """Replace the section called `name` with an empty one."""
        self.__sections[name] = IniSection(name)
        return self.__sections[name]

    def erase_section(self, name: str) -> None:
        self.__sections.pop(name, None)

    def size(self) -> int:
        return len(self.__sections)
