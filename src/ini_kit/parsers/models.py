# src/ini_kit/parsers/models.py

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from .errors import NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Document:
    """
    Parsed conf file: section name -> key -> value.

    - Read-only once built; mappings are exposed as proxies
    - Section and key order follow the source
    - Values are stored exactly as written, never trimmed or coerced
    """

    data: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    source: str | None = None

    def __post_init__(self) -> None:
        frozen = {
            name: MappingProxyType(dict(entries)) for name, entries in self.data.items()
        }
        object.__setattr__(self, "data", MappingProxyType(frozen))

    def read(self, section: str, key: str) -> str:
        """Return the value stored under *section* / *key*.

        Raises:
            NotFoundError: If the section, or the key within it, does not exist.
        """
        logger.debug("Reading: section=%s, key=%s", section, key)
        try:
            return self.data[section][key]
        except KeyError:
            logger.error("Not found: section=%s, key=%s", section, key)
            raise NotFoundError(section, key) from None

    def get(self, section: str, key: str, default: T | None = None) -> str | T | None:
        entries = self.data.get(section)
        if entries is None or key not in entries:
            logger.debug("Using default: section=%s, key=%s", section, key)
            return default
        return entries[key]

    def section(self, name: str) -> Mapping[str, str]:
        try:
            return self.data[name]
        except KeyError:
            logger.error("Section not found: %s", name)
            raise NotFoundError(name) from None

    def sections(self) -> list[str]:
        return list(self.data)

    def keys(self, section: str) -> list[str]:
        return list(self.section(section))

    def to_dict(self) -> dict[str, dict[str, str]]:
        # detached copy; mutating it leaves the document untouched
        return {name: dict(entries) for name, entries in self.data.items()}

    def __contains__(self, section: object) -> bool:
        return section in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __hash__(self) -> int:
        # order-insensitive, matching mapping equality
        return hash(
            (
                self.source,
                frozenset(
                    (name, frozenset(entries.items()))
                    for name, entries in self.data.items()
                ),
            )
        )
