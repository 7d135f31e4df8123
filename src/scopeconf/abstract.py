# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/19 11:20:03

from abc import ABCMeta, abstractmethod
from io import TextIOBase


class LineSource(metaclass=ABCMeta):
    """Anything able to hand over the raw lines of a config,
    newline characters stripped, in original order."""

    @abstractmethod
    def read(self) -> list[str]:
        """May raise `ConfigSourceError`."""
        raise NotImplementedError

    @staticmethod
    def readstream(buf: TextIOBase) -> list[str]:
        lines: list[str] = []
        while i := buf.readline():
            lines.append(i.rstrip('\r\n'))
        return lines

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError
