"""
Resolver component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dtcg_validator.components.registry import TokenRegistry


@dataclass(frozen=True)
class Resolved:
    """A reference chain that ended in a concrete value."""

    value: Any
    type: str | None
    chain: tuple[str, ...] = ()

    ok = True


@dataclass(frozen=True)
class Unresolved:
    """A reference chain that could not be followed to a value."""

    error: str
    chain: tuple[str, ...] = ()

    ok = False


Resolution = Resolved | Unresolved


@dataclass(frozen=True)
class ResolveReferenceInput:
    """Input for resolving one reference path."""

    path: str
    registry: TokenRegistry
