# src/ini_kit/parsers/base.py

from abc import ABC, abstractmethod
from typing import BinaryIO

from .models import Document


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: BinaryIO, name: str | None = None) -> Document:
        """
        Parse a conf stream and return an immutable Document.

        Requirements:
        - Single pass, one character at a time
        - All or nothing: a structural error leaves no partial Document
        - I/O errors from the stream propagate unchanged
        """
        raise NotImplementedError
