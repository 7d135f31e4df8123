# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 10:55:12

from enum import Enum


class LoadState(str, Enum):
    NOT_LOADED = 'not-loaded'
    LOADING = 'loading'
    LOADED = 'loaded'
    FAILED = 'failed'  # only `reset()` leaves this one.


DEFAULT_COMMENT_STARTS = ('#', '//')
DEFAULT_DELIMITER = '='
DEFAULT_SCOPE_DELIMITER = '.'
DEFAULT_QUOTE = '"'
DEFAULT_ESCAPE = '\\'
DEFAULT_NAME_CHARS = '[A-Za-z0-9_-]'

PARSE_ERROR_FORMAT = 'ConfigFile parse error on line {lineno}: {message}'

ERR_NO_SOURCE = (
    'Cannot load file; no file was given. '
    '(Note: you cannot load() a query result.)')
ERR_UNREADABLE = 'Cannot load file; file does not exist or is not readable.'
ERR_UNKNOWN_IO = 'Cannot load file; unknown file error.'
ERR_INVALID_NAME = 'Invalid variable name.'
