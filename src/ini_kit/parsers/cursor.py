# src/ini_kit/parsers/cursor.py

from typing import BinaryIO

EOF = b""
NEWLINE = b"\n"
CARRIAGE_RETURN = b"\r"


class CharCursor:
    """
    One-character cursor over a binary stream.

    - peek() inspects the next character without consuming it
    - advance() consumes it and drops it
    - capture() consumes it into the accumulation buffer
    - flush() hands the buffer back as text and empties it

    CR LF is delivered as a single newline. A lone CR is delivered as is.
    Characters are single bytes; tokens are decoded on flush, so multi-byte
    text survives as long as its bytes never collide with ASCII delimiters.
    """

    def __init__(
        self,
        source: BinaryIO,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        self._source = source
        self._encoding = encoding
        self._errors = errors
        self._lookahead: bytes | None = None
        self._pending = EOF
        self._buffer = bytearray()
        self.line = 1
        self.column = 1

    @property
    def position(self) -> tuple[int, int]:
        """Line and column (1-based) of the next character."""
        return self.line, self.column

    def peek(self) -> bytes:
        if self._lookahead is None:
            self._lookahead = self._next_char()
        return self._lookahead

    def advance(self) -> bytes:
        char = self.peek()
        self._lookahead = None
        if char == NEWLINE:
            self.line += 1
            self.column = 1
        elif char:
            self.column += 1
        return char

    def capture(self) -> bytes:
        char = self.advance()
        self._buffer += char
        return char

    def flush(self) -> str:
        token = self.buffered()
        self._buffer.clear()
        return token

    def buffered(self) -> str:
        return bytes(self._buffer).decode(self._encoding, self._errors)

    def _next_char(self) -> bytes:
        char = self._read_raw()
        if char != CARRIAGE_RETURN:
            return char
        following = self._read_raw()
        if following == NEWLINE:
            return NEWLINE
        self._pending = following
        return CARRIAGE_RETURN

    def _read_raw(self) -> bytes:
        if self._pending:
            char, self._pending = self._pending, EOF
            return char
        return self._source.read(1) or EOF
