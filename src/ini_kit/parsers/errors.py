# src/ini_kit/parsers/errors.py

"""Error types raised while parsing and reading conf documents.

Structural errors derive from ``ValueError``: the input was readable but
not well formed. Lookup misses derive from ``KeyError``. I/O errors are
never wrapped and reach the caller as the ``OSError`` the stream raised.
"""


class ParseError(ValueError):
    """Base class for structural errors found by the conf parser.

    Attributes:
        token: The buffered text that was being assembled when the rule broke.
        line: 1-based line of the offending character.
        column: 1-based column of the offending character.
    """

    kind = "parse error"

    def __init__(self, token: str, line: int = 0, column: int = 0) -> None:
        self.token = token
        self.line = line
        self.column = column
        super().__init__(f"{self.kind}: {token}")

    def __reduce__(self):
        return (self.__class__, (self.token, self.line, self.column))


class KeyNotInSectionError(ParseError):
    kind = "key not in section"


class BrokenSectionNameError(ParseError):
    kind = "broken section name"


class BrokenKeyNameError(ParseError):
    kind = "broken key name"


class DuplicateSectionError(ParseError):
    kind = "duplicate section"


class DuplicateKeyError(ParseError):
    kind = "duplicate key in section"


class UnterminatedValueError(ParseError):
    kind = "unterminated value"


class NotFoundError(KeyError):
    """Raised when a section, or a key within a section, does not exist."""

    def __init__(self, section: str, key: str | None = None) -> None:
        self.section = section
        self.key = key
        if key is None:
            message = f"not found: section '{section}'"
        else:
            message = f"not found: section '{section}' key '{key}'"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])

    def __reduce__(self):
        return (self.__class__, (self.section, self.key))
