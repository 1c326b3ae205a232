"""
Resolver component - follows reference chains to a concrete value.

Key behaviors:
- Cycle check happens before lookup, so a self-reference is caught at once
- Chains of any length are followed; a chain can never visit a path twice,
  so it stops within len(registry) + 1 steps
- The visited set belongs to one top-level resolution only
"""

from __future__ import annotations

from collections.abc import Iterable

from dtcg_validator.components.registry import TokenRegistry
from dtcg_validator.domain.references import extract_reference_path, is_reference

from .models import Resolution, Resolved, ResolveReferenceInput, Unresolved

CHAIN_SEPARATOR = " → "


def resolve_reference(
    path: str,
    registry: TokenRegistry,
    visited: Iterable[str] = (),
) -> Resolution:
    """
    Resolve a reference path to its final value and effective type.

    Args:
        path: Dotted path the reference points at (braces stripped).
        registry: Token registry for the current document.
        visited: Paths already followed in this chain, in order.

    Returns:
        Resolved with the concrete value and type, or Unresolved with the
        error message for a missing target or a cycle.
    """
    # dict keeps insertion order, so it doubles as an ordered set
    seen: dict[str, None] = dict.fromkeys(visited)
    current = path

    while True:
        if current in seen:
            cycle = CHAIN_SEPARATOR.join([*seen, current])
            return Unresolved(
                error=f"Circular reference detected: {cycle}",
                chain=(*seen, current),
            )

        token = registry.get(current)
        if token is None:
            return Unresolved(
                error=f'Reference "{{{current}}}" points to non-existent token',
                chain=tuple(seen),
            )

        seen[current] = None

        if is_reference(token.value):
            current = extract_reference_path(token.value)
            continue

        return Resolved(value=token.value, type=token.type, chain=tuple(seen))


def run(inp: ResolveReferenceInput) -> Resolution:
    """Component entry point."""
    return resolve_reference(inp.path, inp.registry)
