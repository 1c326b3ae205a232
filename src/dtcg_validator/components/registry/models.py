"""
Registry component models.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class TokenRecord:
    """A token as seen by reference resolution."""

    path: str
    value: Any
    type: str | None = None


@dataclass(frozen=True)
class TokenRegistry:
    """
    Flat, read-only lookup from dotted path to token record.

    Built once per validation run and discarded afterwards.
    """

    _tokens: Mapping[str, TokenRecord] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_records(cls, records: dict[str, TokenRecord]) -> TokenRegistry:
        return cls(MappingProxyType(dict(records)))

    def get(self, path: str) -> TokenRecord | None:
        return self._tokens.get(path)

    def paths(self) -> list[str]:
        return list(self._tokens)

    def __contains__(self, path: object) -> bool:
        return path in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[TokenRecord]:
        return iter(self._tokens.values())


@dataclass(frozen=True)
class BuildRegistryInput:
    """Input for building a registry."""

    document: dict[str, Any]


@dataclass(frozen=True)
class BuildRegistryOutput:
    """Output from building a registry."""

    registry: TokenRegistry
