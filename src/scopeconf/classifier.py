# -*- encoding: utf-8 -*-
# @File   : classifier.py
# @Time   : 2026/10/19 11:41:19

"""Decide what a single raw line is: a scope header,
a variable definition, or nothing at all (blank / comment only).

No value is extracted here; see `extractor.ValueExtractor`.
"""

from .consts import ERR_INVALID_NAME
from .errors import InvalidVariableName
from .syntax import ConfigSyntax


class LineClassifier:
    def __init__(self, syntax: ConfigSyntax) -> None:
        self._syntax = syntax

    @property
    def syntax(self) -> ConfigSyntax:
        return self._syntax

    def find_comment(self, line: str, offset: int = 0) -> int | None:
        """Leftmost position at or after `offset` where any comment marker
        begins, ignoring quotes and everything else."""
        start = None
        for i in self._syntax.comment_starts:
            pos = line.find(i, offset)
            if pos != -1 and (start is None or pos < start):
                start = pos
        return start

    def find_delimiter(self, line: str) -> int | None:
        """Position of the first assignment delimiter, ignoring all rules."""
        pos = line.find(self._syntax.delimiter)
        return None if pos == -1 else pos

    def real_delimiter(self, line: str) -> int | None:
        """Like `find_delimiter()`, but a delimiter behind a comment marker
        is commented out and does not count."""
        delim = self.find_delimiter(line)
        comment = self.find_comment(line)
        if delim is None or (comment is not None and comment < delim):
            return None
        return delim

    def is_scope_header(self, line: str) -> bool:
        return self._syntax.scope_header.fullmatch(line) is not None

    def header_scope(self, line: str) -> str | None:
        """The scope a header line switches to (`''` for `[]`),
        or `None` if the line is no header."""
        match = self._syntax.scope_header.fullmatch(line)
        return None if match is None else match.group(1)

    def pre_delimiter(self, line: str) -> str:
        """Trimmed text in front of the delimiter.

        Without a (real) delimiter, that is the whole line minus its comment.
        """
        delim = self.find_delimiter(line)
        comment = self.find_comment(line)
        if comment is not None and (delim is None or comment < delim):
            return line[:comment].strip()
        if delim is not None:
            return line[:delim].strip()
        return line.strip()

    def has_valid_name(self, line: str) -> bool:
        name = self.pre_delimiter(line)
        return self._syntax.variable_name.fullmatch(name) is not None

    def variable_name(self, line: str, lineno: int | None = None) -> str | None:
        """The bare (not yet scoped) variable name of `line`.

        Returns `None` for blank and comment-only lines. For an invalid name
        also returns `None`, unless `lineno` is given: then
        `InvalidVariableName` is raised for it.
        """
        name = self.pre_delimiter(line)
        if self._syntax.variable_name.fullmatch(name) is not None:
            return name
        # `= value` has no name, but still is not an empty line.
        if lineno is not None and (
                name or self.real_delimiter(line) is not None):
            raise InvalidVariableName(ERR_INVALID_NAME, lineno)
        return None
