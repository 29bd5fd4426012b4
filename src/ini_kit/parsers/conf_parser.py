# src/ini_kit/parsers/conf_parser.py

import io
import logging
from collections.abc import Callable
from enum import Enum, auto
from time import monotonic
from typing import BinaryIO

from ini_kit.observability import names
from ini_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .config import ParserConfig
from .cursor import EOF, NEWLINE, CharCursor
from .errors import (
    BrokenKeyNameError,
    BrokenSectionNameError,
    DuplicateKeyError,
    DuplicateSectionError,
    KeyNotInSectionError,
    ParseError,
    UnterminatedValueError,
)
from .models import Document

logger = logging.getLogger(__name__)

WHITESPACE = (b" ", b"\t", NEWLINE)
COMMENT_MARKERS = (b"#", b";")
SECTION_OPEN = b"["
SECTION_CLOSE = b"]"
ASSIGN = b"="


class State(Enum):
    START = auto()  # nothing opened yet
    MID = auto()  # between tokens inside a section
    COMMENT = auto()
    SECTION = auto()
    KEY = auto()
    VALUE = auto()
    END = auto()


class _Lexer:
    """State for a single parse call. Never outlives it."""

    def __init__(self, cursor: CharCursor, config: ParserConfig) -> None:
        self.cursor = cursor
        self.config = config
        self.section: str | None = None
        self.key = ""
        self.data: dict[str, dict[str, str]] = {}
        self._handlers: dict[State, Callable[[], State]] = {
            State.START: self.do_start,
            State.MID: self.do_mid,
            State.COMMENT: self.do_comment,
            State.SECTION: self.do_section,
            State.KEY: self.do_key,
            State.VALUE: self.do_value,
        }

    def run(self) -> dict[str, dict[str, str]]:
        state = State.START
        while state is not State.END:
            state = self._handlers[state]()
        return self.data

    def do_start(self) -> State:
        char = self.cursor.peek()
        if char == EOF:
            return State.END
        if char in WHITESPACE:
            self.cursor.advance()
            return State.START
        if char == SECTION_OPEN:
            self.cursor.advance()
            self.cursor.flush()
            return State.SECTION
        if char in COMMENT_MARKERS:
            self.cursor.advance()
            return State.COMMENT

        at = self.cursor.position
        self.cursor.capture()
        raise KeyNotInSectionError(self.cursor.flush(), *at)

    def do_mid(self) -> State:
        char = self.cursor.peek()
        if char == EOF:
            return State.END
        if char in WHITESPACE:
            self.cursor.advance()
            return State.MID
        if char == SECTION_OPEN:
            self.cursor.advance()
            self.cursor.flush()
            return State.SECTION
        if char in COMMENT_MARKERS:
            self.cursor.advance()
            return State.COMMENT

        # first key character stays in the stream for KEY to capture
        self.cursor.flush()
        return State.KEY

    def do_comment(self) -> State:
        char = self.cursor.peek()
        if char == EOF:
            return State.END
        self.cursor.advance()
        if char == NEWLINE:
            return State.START if self.section is None else State.MID
        return State.COMMENT

    def do_section(self) -> State:
        char = self.cursor.peek()
        if char in (EOF, NEWLINE):
            at = self.cursor.position
            self.cursor.advance()
            raise BrokenSectionNameError(self.cursor.flush(), *at)
        if char == SECTION_CLOSE:
            at = self.cursor.position
            name = self.cursor.flush()
            if name in self.data and self.config.duplicates == "error":
                raise DuplicateSectionError(name, *at)
            self.data[name] = {}
            self.section = name
            self.cursor.advance()
            logger.debug("Opened section: %s", name)
            return State.MID

        self.cursor.capture()
        return State.SECTION

    def do_key(self) -> State:
        char = self.cursor.peek()
        if char in (EOF, NEWLINE):
            at = self.cursor.position
            self.cursor.advance()
            raise BrokenKeyNameError(self.cursor.flush(), *at)
        if char == ASSIGN:
            at = self.cursor.position
            key = self.cursor.flush()
            if key in self._entries() and self.config.duplicates == "error":
                raise DuplicateKeyError(key, *at)
            self.key = key
            self.cursor.advance()
            self.cursor.flush()
            return State.VALUE

        self.cursor.capture()
        return State.KEY

    def do_value(self) -> State:
        char = self.cursor.peek()
        if char == NEWLINE:
            self._store(self.cursor.flush())
            self.cursor.advance()
            return State.MID
        if char == EOF:
            if self.config.require_final_newline:
                raise UnterminatedValueError(
                    self.cursor.buffered(), *self.cursor.position
                )
            self._store(self.cursor.flush())
            return State.END

        self.cursor.capture()
        return State.VALUE

    def _entries(self) -> dict[str, str]:
        if self.section is None:
            raise KeyNotInSectionError(self.key, *self.cursor.position)
        return self.data[self.section]

    def _store(self, value: str) -> None:
        self._entries()[self.key] = value
        logger.debug("Stored key: section=%s, key=%s", self.section, self.key)


class ConfParser(DocumentParser):
    """
    Character-level state machine parser for conf files.
    - `#` and `;` start a whole-line comment
    - `[name]` opens a section
    - `key=value` belongs to the most recently opened section
    - Values run to the end of the line and are kept verbatim
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.metrics_hook = metrics_hook

    def parse(self, source: BinaryIO, name: str | None = None) -> Document:
        start = monotonic()
        label = name or "<stream>"
        logger.debug("Parsing conf stream: %s", label)
        self.metrics_hook.increment(names.CONF_PARSE_REQUESTS_TOTAL)

        cursor = CharCursor(source, self.config.encoding, self.config.errors)
        try:
            data = _Lexer(cursor, self.config).run()
        except ParseError as exc:
            logger.error(
                "Failed to parse %s at line %d, column %d: %s",
                label,
                exc.line,
                exc.column,
                exc,
            )
            self.metrics_hook.increment(
                names.CONF_PARSE_ERRORS_TOTAL, labels={"error": exc.kind}
            )
            raise
        except UnicodeDecodeError as exc:
            logger.error(
                "Failed to decode %s near line %d, column %d: %s",
                label,
                cursor.line,
                cursor.column,
                exc,
            )
            self.metrics_hook.increment(
                names.CONF_PARSE_ERRORS_TOTAL, labels={"error": "decode error"}
            )
            raise

        document = Document(data=data, source=name)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CONF_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.record_gauge(names.CONF_SECTIONS_PARSED, len(document))
        self.metrics_hook.record_gauge(
            names.CONF_KEYS_PARSED, sum(len(keys) for keys in data.values())
        )
        logger.info("Parsed %d sections from %s", len(document), label)
        return document

    def parse_bytes(self, data: bytes, name: str | None = None) -> Document:
        return self.parse(io.BytesIO(data), name)

    def parse_text(self, text: str, name: str | None = None) -> Document:
        return self.parse_bytes(text.encode(self.config.encoding), name)
