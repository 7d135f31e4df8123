# -*- encoding: utf-8 -*-
# @File   : extractor.py
# @Time   : 2026/10/19 12:02:56

r"""Resolve the value of a line already known to define a variable.

    ```ini
    enable_keys            # no delimiter at all -> True
    novalue =              # -> ''
    words = "say \"hi\""   # quoted, comments after the closing quote dropped
    plain = a b  // c      # -> 'a b'
    oddquote = "a" b       # not a valid quote: -> '"a" b'
    ```

A value that opens a quote but never closes it properly is *not* an
error. It just falls back to plain, unquoted text.
"""

from .classifier import LineClassifier


class ValueExtractor:
    def __init__(self, classifier: LineClassifier) -> None:
        self._lines = classifier
        self._syntax = classifier.syntax

    def has_value_delimiter(self, line: str) -> bool:
        return (self._lines.has_valid_name(line)
                and self._lines.real_delimiter(line) is not None)

    def _quoted_span(self, line: str) -> tuple[int, int] | None:
        """Where the content of a properly quoted value starts and ends."""
        if not self.has_value_delimiter(line):
            return None
        quote, escape = self._syntax.quote, self._syntax.escape
        delim = self._lines.real_delimiter(line)
        begin = delim + len(self._syntax.delimiter)
        while begin < len(line) and line[begin].isspace():
            begin += 1
        if not line.startswith(quote, begin):
            return None

        begin += len(quote)
        i = begin
        while i < len(line):
            if line.startswith(escape, i):
                # the escaped char can never close the value
                i += len(escape) + 1
            elif line.startswith(quote, i):
                rest = line[i + len(quote):].lstrip()
                if not rest or self._lines.find_comment(rest) == 0:
                    return begin, i
                return None
            else:
                i += 1
        return None

    def has_quoted_value(self, line: str) -> bool:
        return self._quoted_span(line) is not None

    def quoted_value(self, line: str) -> str:
        """Raw content between the quotes, escapes still in place;
        `''` if there is no properly quoted value."""
        span = self._quoted_span(line)
        if span is None:
            return ''
        return line[span[0]:span[1]]

    def post_delimiter(self, line: str) -> str:
        """Trimmed text behind the delimiter, comments included.
        `''` if the delimiter is missing or commented out."""
        delim = self._lines.real_delimiter(line)
        if delim is None:
            return ''
        return line[delim + len(self._syntax.delimiter):].strip()

    def unescape(self, value: str) -> str:
        return self._syntax.escaped_char.sub(r'\1', value)

    def resolve(self, line: str) -> str | bool:
        if not self.has_value_delimiter(line):
            return True
        if self.has_quoted_value(line):
            # whatever follows the closing quote is gone already
            return self.unescape(self.quoted_value(line))

        value = self.post_delimiter(line)
        if (comment := self._lines.find_comment(value)) is not None:
            value = value[:comment]
        return self.unescape(value.strip())
