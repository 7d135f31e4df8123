# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 10:52:30

from .abstract import LineSource
from .classifier import LineClassifier
from .consts import LoadState
from .errors import (
    ConfigFileError,
    ConfigParseError,
    ConfigSourceError,
    ConfigSyntaxError,
    InvalidVariableName,
)
from .extractor import ValueExtractor
from .model import ConfigFile, ConfigValue
from .sources import FileSource, TextSource
from .syntax import ConfigSyntax

__all__ = [
    'ConfigFile', 'ConfigValue', 'ConfigSyntax', 'LoadState',
    'LineSource', 'FileSource', 'TextSource',
    'LineClassifier', 'ValueExtractor',
    'ConfigFileError', 'ConfigParseError', 'ConfigSourceError',
    'ConfigSyntaxError', 'InvalidVariableName',
]
