# Loader
from .loader import open_and_parse, read

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    BrokenKeyNameError,
    BrokenSectionNameError,
    ConfParser,
    Document,
    DocumentParser,
    DuplicateKeyError,
    DuplicateSectionError,
    KeyNotInSectionError,
    NotFoundError,
    ParseError,
    ParserConfig,
    UnterminatedValueError,
)

__all__ = [
    # Loader
    "open_and_parse",
    "read",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ConfParser",
    "Document",
    "DocumentParser",
    "ParserConfig",
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
