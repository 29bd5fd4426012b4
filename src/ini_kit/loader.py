# src/ini_kit/loader.py

import logging
from pathlib import Path

from ini_kit.observability import names
from ini_kit.observability.base import MetricsHook, NoOpMetricsHook
from ini_kit.parsers.conf_parser import ConfParser
from ini_kit.parsers.config import ParserConfig
from ini_kit.parsers.models import Document

logger = logging.getLogger(__name__)


def open_and_parse(
    path: str | Path,
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Document:
    """Open a conf file and parse it.

    Args:
        path: Location of the conf file.
        config: Parser configuration. Defaults to the strict policy.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The parsed, read-only Document. Its ``source`` is ``str(path)``.

    Raises:
        OSError: If the file cannot be opened or read (passed through as is).
        ParseError: If the file is not well formed.

    Example:
        >>> document = open_and_parse("app.conf")
        >>> document.read("server", "port")
    """
    logger.info("Loading conf file: %s", path)
    parser = ConfParser(config=config, metrics_hook=metrics_hook)
    with open(path, "rb") as f:
        metrics_hook.increment(names.CONF_FILES_OPENED_TOTAL)
        document = parser.parse(f, name=str(path))
    logger.info("Loaded %d sections from %s", len(document), path)
    return document


def read(document: Document, section: str, key: str) -> str:
    """Return the value for *section* / *key*, or raise NotFoundError."""
    return document.read(section, key)
