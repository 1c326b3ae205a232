"""
Registry component - flat path lookup of every token in a document.

The builder is tolerant: it never reports problems, so references can still
be resolved against whatever part of a malformed document is usable. The
tree validator is responsible for reporting structural errors.
"""

from __future__ import annotations

from typing import Any

from dtcg_validator.domain.tree import NodeKind, walk

from .models import BuildRegistryInput, BuildRegistryOutput, TokenRecord, TokenRegistry


def build_registry(document: dict[str, Any]) -> TokenRegistry:
    """
    Walk the token tree once and record every token by its dotted path.

    A node with `$value` is a token; its type is its own `$type`, else the
    `$type` of the nearest enclosing group.
    """
    records: dict[str, TokenRecord] = {}

    for node in walk(document):
        if node.kind is not NodeKind.TOKEN:
            continue
        records[node.path] = TokenRecord(
            path=node.path,
            value=node.value["$value"],
            type=node.value.get("$type") or node.ambient_type,
        )

    return TokenRegistry.from_records(records)


def run(inp: BuildRegistryInput) -> BuildRegistryOutput:
    """Component entry point."""
    return BuildRegistryOutput(registry=build_registry(inp.document))
