# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/19 10:58:40

"""Exceptions raised while reading config sources.

Only `ConfigSyntaxError` ever reaches the caller directly:
`ConfigFile.load()` turns source and per-line failures
into entries of `ConfigFile.errors()`.
"""

from .consts import PARSE_ERROR_FORMAT


class ConfigFileError(Exception):
    """Base of everything this package raises."""


class ConfigSourceError(ConfigFileError, OSError):
    """The source is missing, a directory, unreadable, or not given at all."""


class ConfigParseError(ConfigFileError):
    """A single line could not be parsed.

    `lineno` is 1-based, as shown to users.
    """
    def __init__(self, message: str, lineno: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return PARSE_ERROR_FORMAT.format(
            lineno=self.lineno, message=self.message)


class InvalidVariableName(ConfigParseError):
    pass


class ConfigSyntaxError(ConfigFileError, ValueError):
    """The lexical configuration itself is unusable."""
