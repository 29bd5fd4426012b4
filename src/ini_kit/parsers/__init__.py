# src/ini_kit/parsers/__init__.py

r"""Conf file parsing for ini-kit.

Example:
    >>> from ini_kit.parsers import ConfParser
    >>>
    >>> parser = ConfParser()
    >>> document = parser.parse_text("[server]\nport=8080\n")
    >>> document.read("server", "port")
    '8080'
"""

from .base import DocumentParser
from .conf_parser import ConfParser, State
from .config import DuplicatePolicy, ParserConfig
from .errors import (
    BrokenKeyNameError,
    BrokenSectionNameError,
    DuplicateKeyError,
    DuplicateSectionError,
    KeyNotInSectionError,
    NotFoundError,
    ParseError,
    UnterminatedValueError,
)
from .models import Document

__all__ = [
    # Parsers
    "DocumentParser",
    "ConfParser",
    "State",
    # Config
    "ParserConfig",
    "DuplicatePolicy",
    # Types
    "Document",
    # Errors
    "ParseError",
    "KeyNotInSectionError",
    "BrokenSectionNameError",
    "BrokenKeyNameError",
    "DuplicateSectionError",
    "DuplicateKeyError",
    "UnterminatedValueError",
    "NotFoundError",
]
