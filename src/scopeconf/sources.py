# -*- encoding: utf-8 -*-
# @File   : sources.py
# @Time   : 2026/10/19 11:26:48

"""Line sources for `ConfigFile`: files on disk and in-memory text."""

import logging
import os
from io import StringIO, TextIOBase
from os import PathLike
from os.path import exists, isdir

import chardet

from .abstract import LineSource
from .consts import ERR_UNKNOWN_IO, ERR_UNREADABLE
from .errors import ConfigSourceError

logger = logging.getLogger(__name__)


class FileSource(LineSource):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        self._fn = os.fspath(filename)
        self._codec = encoding

    @property
    def filename(self) -> str:
        return self._fn

    def _check_readable(self) -> None:
        if not (exists(self._fn)
                and not isdir(self._fn)
                and os.access(self._fn, os.R_OK)):
            logger.warning('%s: %s', self._fn, ERR_UNREADABLE)
            raise ConfigSourceError(ERR_UNREADABLE)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logger.debug('%s: decoding as %s', filename, codec['encoding'])

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            try:
                buf = raw.decode('gbk')
            except UnicodeDecodeError:
                buf = raw.decode('latin-1')  # never fails
        return StringIO(buf)

    def read(self) -> list[str]:
        self._check_readable()
        try:
            # when encoding is None, `open()` falls back to system default,
            # and a wrong guess falls back to `chardet`.
            try:
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    return self.readstream(fp)
            except UnicodeDecodeError:
                return self.readstream(self._decode_file(self._fn))
        except (OSError, LookupError) as e:
            # LookupError: unknown `encoding` name.
            logger.warning('%s: %s\n  %s', self._fn, ERR_UNKNOWN_IO, e)
            raise ConfigSourceError(ERR_UNKNOWN_IO) from e

    def __str__(self) -> str:
        return self._fn + (f' ({self._codec})' if self._codec else '')


class TextSource(LineSource):
    """Config text already in memory: a `str` or a text stream."""

    def __init__(self, text: str | TextIOBase) -> None:
        self._text = text

    def read(self) -> list[str]:
        if isinstance(self._text, str):
            return self.readstream(StringIO(self._text))
        return self.readstream(self._text)

    def __str__(self) -> str:
        return '<text>'
