# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/11 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

T = TypeVar('T')


class SerializedStream(Generic[T], metaclass=ABCMeta):
    """A single forward cursor over serialized components.

    There is no way back: once `next()` is called,
    the former `current` is gone.
    """

    @property
    @abstractmethod
    def current(self) -> T:
        raise NotImplementedError

    @property
    @abstractmethod
    def exhausted(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def line(self) -> int:
        """1-based line number of `current`, for error reports."""
        raise NotImplementedError

    @abstractmethod
    def next(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def at_line_end(self) -> bool:
        """Whether `current` ends a line (so does end of input)."""
        raise NotImplementedError

    def skip_line(self) -> None:
        """Consume the rest of current line, line terminator included."""
        while not self.at_line_end():
            self.next()
        self.next()

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = fspath(filename)

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
