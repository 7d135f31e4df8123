# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 12:31:07

"""
The config store: parse a source once, then query it.

    ```ini
    var1 = 42               # -> '42', never coerced to int
    enable_keys             # no delimiter, -> True
    multi_valued = abc      # declared twice,
    multi_valued = xyz      # get_array() -> ['abc', 'xyz']

    marbles.green = 2       # dotted names carry a scope...
    [marbles]               # ...and so does a header.
    white = 6               # full name: marbles.white

    [sql.maria]             # headers may nest, and may hold comments
    auth.pw = secure        # full name: sql.maria.auth.pw
    []                      # back to root
    ```

Querying a scope rather than a variable (`cf.get('sql.maria')`) gives
a new, source-less `ConfigFile` preloaded with that scope's entries.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from os import PathLike
from typing import Any, TypeVar

from .abstract import LineSource
from .classifier import LineClassifier
from .consts import ERR_NO_SOURCE, ERR_UNKNOWN_IO, LoadState
from .errors import ConfigParseError, ConfigSourceError
from .extractor import ValueExtractor
from .sources import FileSource, TextSource
from .syntax import ConfigSyntax

logger = logging.getLogger(__name__)

ConfigValue = str | bool
T = TypeVar('T')


class ConfigFile(Mapping[str, list[ConfigValue]]):
    """A parsed config, keyed by fully-scoped names.

    As a `Mapping`, every name maps to its whole list of values;
    `get()` however answers the first value, or a scope.
    """

    def __init__(
        self,
        source: str | PathLike[str] | LineSource | None = None,
        *,
        syntax: ConfigSyntax | None = None,
        encoding: str | None = None
    ) -> None:
        if source is None or isinstance(source, LineSource):
            self._source = source
        else:
            self._source = FileSource(source, encoding)
        self._state = LoadState.NOT_LOADED
        self._scope = ''
        self._errors: list[str] = []
        self._preloaded: set[str] = set()
        self._values: dict[str, list[ConfigValue]] = {}
        self._set_syntax(syntax or ConfigSyntax())

    @classmethod
    def from_string(
        cls, text: str, *, syntax: ConfigSyntax | None = None
    ) -> 'ConfigFile':
        return cls(TextSource(text), syntax=syntax)

    # --- properties ---

    @property
    def source(self) -> LineSource | None:
        return self._source

    @property
    def syntax(self) -> ConfigSyntax:
        return self._syntax

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def loaded(self) -> bool:
        return self._state is LoadState.LOADED

    @property
    def preloaded(self) -> frozenset[str]:
        """Names still holding a default from `preload()`."""
        return frozenset(self._preloaded)

    # --- syntax overrides ---

    def _set_syntax(self, syntax: ConfigSyntax) -> None:
        self._syntax = syntax
        self._lines = LineClassifier(syntax)
        self._extractor = ValueExtractor(self._lines)

    def _override(self, **changes: Any) -> None:
        if self._state is LoadState.LOADING:
            raise RuntimeError('Cannot change syntax while loading.')
        self._set_syntax(self._syntax.replace(**changes))

    def override_comment_starts(self, *starts: str) -> None:
        self._override(comment_starts=starts)

    def override_variable_delimiter(self, delimiter: str) -> None:
        self._override(delimiter=delimiter)

    def override_scope_delimiter(self, delimiter: str) -> None:
        self._override(scope_delimiter=delimiter)

    def override_quote_character(self, quote: str) -> None:
        self._override(quote=quote)

    def override_escape_character(self, escape: str) -> None:
        self._override(escape=escape)

    def override_scope_characters(self, chars: str) -> None:
        self._override(scope_chars=chars)

    def override_variable_name_characters(self, chars: str) -> None:
        self._override(name_chars=chars)

    # --- building ---

    def preload(
        self, defaults: Mapping[str, ConfigValue | Sequence[ConfigValue]]
    ) -> None:
        """Load default values for names not present yet.

        A sequence (not a `str`) is taken as the whole list of values.
        The first real declaration of a preloaded name replaces
        the default instead of appending to it.
        """
        for name, value in defaults.items():
            if name in self._values:
                continue
            values = (list(value)
                      if isinstance(value, Sequence)
                      and not isinstance(value, str)
                      else [value])
            if not values:
                continue
            self._values[name] = values
            self._preloaded.add(name)

    def reset(self) -> None:
        """Forget everything parsed or preloaded, so `load()` may run again."""
        self._state = LoadState.NOT_LOADED
        self._scope = ''
        self._errors.clear()
        self._preloaded.clear()
        self._values.clear()

    def load(self) -> bool:
        """Read and parse the source.

        Returns `True` only if every line parsed; check `errors()`
        otherwise. Once loaded, further calls return `True` and do nothing.
        """
        if self._state is LoadState.LOADED:
            return True
        if self._state is LoadState.FAILED:
            return False
        if self._source is None:
            self._errors.append(ERR_NO_SOURCE)
            logger.warning(ERR_NO_SOURCE)
            return False

        self._state = LoadState.LOADING
        try:
            lines = self._source.read()
        except ConfigSourceError as e:
            self._errors.append(str(e))
            self._state = LoadState.FAILED
            return False
        except Exception as e:
            # e.g. a closed stream handed to a custom source.
            logger.warning('%s: %s\n  %r', self._source, ERR_UNKNOWN_IO, e)
            self._errors.append(ERR_UNKNOWN_IO)
            self._state = LoadState.FAILED
            return False

        self._scope = ''
        for lineno, line in enumerate(lines, start=1):
            try:
                self._process_line(line, lineno)
            except ConfigParseError as e:
                self._errors.append(str(e))

        if self._errors:
            logger.warning('%s: %d parse error(s)',
                           self._source, len(self._errors))
            self._state = LoadState.FAILED
            return False
        logger.debug('%s: loaded %d name(s) from %d line(s)',
                     self._source, len(self._values), len(lines))
        self._state = LoadState.LOADED
        return True

    def _process_line(self, line: str, lineno: int) -> None:
        if (scope := self._lines.header_scope(line)) is not None:
            logger.debug('line %d: scope [%s]', lineno, scope)
            self._scope = scope
            return
        name = self._lines.variable_name(line, lineno)
        if name is None:
            return

        if self._scope:
            name = f'{self._scope}{self._syntax.scope_delimiter}{name}'
        # a preloaded default is dropped, not appended to.
        if name not in self._values or name in self._preloaded:
            self._values[name] = []
            self._preloaded.discard(name)
        self._values[name].append(self._extractor.resolve(line))

    def errors(self) -> list[str]:
        return list(self._errors)

    # --- queries ---

    def get(
        self, query: str, default: T | None = None
    ) -> 'ConfigValue | ConfigFile | T | None':
        """First value of the variable `query`; or, if `query` names
        a scope instead, a `ConfigFile` of that scope; or `default`.

        Scopes match whole segments only: `my.scope` never matches
        `my.scopeless.var`.
        """
        if values := self._values.get(query):
            return values[0]

        prefix = query + self._syntax.scope_delimiter
        matches = {
            name[len(prefix):]: values
            for name, values in self._values.items()
            if name.startswith(prefix) and len(name) > len(prefix)
        }
        if not matches:
            return default
        sub = ConfigFile(syntax=self._syntax)
        sub.preload(matches)
        return sub

    def get_array(self, query: str) -> list[ConfigValue]:
        """All values of the exact name `query`, in declaration order."""
        return list(self._values.get(query, ()))

    def get_all(self) -> dict[str, list[ConfigValue]]:
        return {name: list(values) for name, values in self._values.items()}

    def enumerate_scope(self, prefix: str = '') -> list[str]:
        """Names (variables or sub-scopes) directly below `prefix`,
        first-seen order, no duplicates. `''` lists the root level."""
        sep = self._syntax.scope_delimiter
        if prefix.endswith(sep):
            prefix = prefix[:-len(sep)]
        if prefix:
            prefix += sep

        ret: dict[str, None] = {}
        for name in self._values:
            if not name.startswith(prefix):
                continue
            sub = name[len(prefix):]
            ret.setdefault(sub.split(sep, 1)[0], None)
        return list(ret.keys())

    # --- Mapping ---

    def __getitem__(self, key: str) -> list[ConfigValue]:
        return list(self._values[key])

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    # a store is a stateful object, not a value: compare by identity.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __str__(self) -> str:
        return f'ConfigFile({self._source or "<query result>"})'

    def __repr__(self) -> str:
        return '<ConfigFile %s { .state = %s, .cnt = %d }>' % (
            self._source or '<query result>', self._state.value, len(self))
