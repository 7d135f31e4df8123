# -*- encoding: utf-8 -*-
# @File   : syntax.py
# @Time   : 2026/10/19 11:04:27

"""Lexical choices of a config file, and the line patterns built from them.

A `ConfigSyntax` never changes once created. To tweak one piece,
derive a new instance with `replace()`; its patterns compile lazily,
once per instance.

    ```yaml
    # syntax.yaml, for `ConfigSyntax.from_yaml()`
    comment_starts: [';', '#']
    delimiter: ':'
    scope_delimiter: '/'
    ```
"""

import dataclasses
import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from os import PathLike
from re import compile as regex
from typing import Any
from warnings import warn

import yaml

from .consts import (
    DEFAULT_COMMENT_STARTS,
    DEFAULT_DELIMITER,
    DEFAULT_ESCAPE,
    DEFAULT_NAME_CHARS,
    DEFAULT_QUOTE,
    DEFAULT_SCOPE_DELIMITER,
)
from .errors import ConfigSyntaxError


def _as_char_class(chars: str) -> str:
    if not isinstance(chars, str) or not chars:
        raise ConfigSyntaxError(
            f'Character classes must be non-empty strings, got {chars!r}.')
    # accept `a-zA-Z0-9_\-` as well as `[a-zA-Z0-9_\-]`.
    return chars if chars.startswith('[') else f'[{chars}]'


@dataclass(frozen=True, kw_only=True)
class ConfigSyntax:
    comment_starts: tuple[str, ...] = DEFAULT_COMMENT_STARTS
    delimiter: str = DEFAULT_DELIMITER
    scope_delimiter: str = DEFAULT_SCOPE_DELIMITER
    quote: str = DEFAULT_QUOTE
    escape: str = DEFAULT_ESCAPE
    scope_chars: str = DEFAULT_NAME_CHARS
    name_chars: str = DEFAULT_NAME_CHARS

    def __post_init__(self) -> None:
        # frozen, so normalize through object.__setattr__
        starts = self.comment_starts
        if isinstance(starts, str):
            starts = (starts,)
        object.__setattr__(self, 'comment_starts', tuple(starts))
        object.__setattr__(
            self, 'scope_chars', _as_char_class(self.scope_chars))
        object.__setattr__(
            self, 'name_chars', _as_char_class(self.name_chars))
        self.__validate()

    def __validate(self) -> None:
        for field in ('delimiter', 'scope_delimiter', 'quote', 'escape'):
            value = getattr(self, field)
            if not isinstance(value, str) or not value:
                raise ConfigSyntaxError(
                    f'`{field}` must be a non-empty string, got {value!r}.')
        for i in self.comment_starts:
            if not isinstance(i, str) or not i:
                raise ConfigSyntaxError(
                    f'Comment markers must be non-empty strings, got {i!r}.')
        for field in ('scope_chars', 'name_chars'):
            try:
                regex(getattr(self, field))
            except re.error as e:
                raise ConfigSyntaxError(
                    f'`{field}` is not a valid character class: {e}') from e

        # legal, but most likely to break parsing.
        for i in self.comment_starts:
            if self.delimiter in i or self.quote in i:
                warn(f'Comment marker {i!r} overlaps the assignment '
                     'delimiter or the quote character.')
        if self.delimiter == self.scope_delimiter:
            warn('Assignment and scope delimiters are identical '
                 f'({self.delimiter!r}).')
        if self.quote == self.escape:
            warn(f'Quote and escape characters are identical ({self.quote!r}).')

    def replace(self, **changes: Any) -> 'ConfigSyntax':
        return dataclasses.replace(self, **changes)

    @cached_property
    def comment_alternation(self) -> str:
        """Every comment marker, escaped and joined with `|`.
        Longer markers go first so `//` never loses to `/`."""
        return '|'.join(
            re.escape(i)
            for i in sorted(self.comment_starts, key=len, reverse=True))

    @cached_property
    def scope_header(self) -> re.Pattern[str]:
        """`[a.b]  # comment`; group 1 is the scope (maybe empty)."""
        seg = f'(?:{self.scope_chars})+'
        sep = re.escape(self.scope_delimiter)
        tail = (rf'(?:(?:{self.comment_alternation}).*)?'
                if self.comment_starts else '')
        return regex(rf'\s*\[\s*((?:{seg}(?:{sep}{seg})*)?)\s*\]\s*{tail}')

    @cached_property
    def variable_name(self) -> re.Pattern[str]:
        """Segments of name chars joined by the scope delimiter."""
        seg = f'(?:{self.name_chars})+'
        sep = re.escape(self.scope_delimiter)
        return regex(rf'{seg}(?:{sep}{seg})*')

    @cached_property
    def escaped_char(self) -> re.Pattern[str]:
        return regex(rf'{re.escape(self.escape)}(.)', re.S)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'ConfigSyntax':
        known = {i.name for i in dataclasses.fields(cls)}
        unknown = [k for k in data if k not in known]
        if unknown:
            raise ConfigSyntaxError(
                f'Unknown syntax option(s): {", ".join(map(str, unknown))}.')
        return cls(**data)

    @classmethod
    def from_yaml(
        cls, path: str | PathLike[str], encoding: str = 'utf-8'
    ) -> 'ConfigSyntax':
        """Read syntax options from a YAML mapping.
        Keys are the field names of this class; missing ones keep defaults."""
        with open(path, 'r', encoding=encoding) as fp:
            data = yaml.safe_load(fp)
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigSyntaxError(
                f'{path}: syntax file must hold a mapping, '
                f'got {type(data).__name__}.')
        return cls.from_mapping(data)
