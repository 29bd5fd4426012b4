# src/ini_kit/parsers/config.py

import codecs
from typing import Literal

from pydantic import BaseModel, field_validator

DuplicatePolicy = Literal["error", "overwrite"]

DELIMITERS = "[]=#;\n\r \t"


class ParserConfig(BaseModel):
    """Configuration for the conf parser.

    Immutable. Explicit. Nothing is read from the environment.

    duplicates:
        "error" rejects a repeated section header or a repeated key within a
        section. "overwrite" lets a repeated header start the section over
        with an empty key map and lets a repeated key replace the earlier
        value.
    require_final_newline:
        When False the end of the stream also terminates a value line.
        When True a value without a trailing newline is an error.
    encoding / errors:
        Codec used to decode section names, keys and values.
    """

    duplicates: DuplicatePolicy = "error"
    require_final_newline: bool = False
    encoding: str = "utf-8"
    errors: str = "strict"

    @field_validator("encoding")
    @classmethod
    def _ascii_compatible_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding: {value}") from None
        # the cursor scans single bytes for these delimiters
        try:
            encoded = DELIMITERS.encode(value)
        except (LookupError, UnicodeError):
            encoded = b""
        if encoded != DELIMITERS.encode("ascii"):
            raise ValueError(f"Encoding is not ASCII-compatible: {value}")
        return value

    class Config:
        extra = "forbid"
        frozen = True
