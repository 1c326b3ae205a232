"""
Depth-first walk over a token document.

Children are visited in declaration order and a group is fully visited
before its next sibling. Metadata keys ("$type", "$description", ...) are
never yielded. The walk uses an explicit stack, so document depth is not
limited by the interpreter recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .grammar import is_metadata_key
from .references import join_path


class NodeKind(str, Enum):
    TOKEN = "token"
    GROUP = "group"
    MALFORMED = "malformed"  # has $type but neither $value nor children
    OTHER = "other"  # not a mapping


@dataclass(frozen=True)
class TreeNode:
    """One named child in the document."""

    key: str
    path: str
    value: Any
    kind: NodeKind
    ambient_type: Any = None


def classify(value: Any) -> NodeKind:
    if not isinstance(value, dict):
        return NodeKind.OTHER
    if "$value" in value:
        return NodeKind.TOKEN
    if "$type" in value and not any(not is_metadata_key(k) for k in value):
        return NodeKind.MALFORMED
    return NodeKind.GROUP


def walk(document: dict[str, Any]) -> Iterator[TreeNode]:
    """
    Yield every non-metadata child of the document, depth first.

    ambient_type is the `$type` inherited from the nearest enclosing group
    (a group's own `$type` replaces the one it inherited).
    """
    stack: list[tuple[Iterator[tuple[str, Any]], str, Any]] = [
        (iter(document.items()), "", None)
    ]

    while stack:
        items, parent_path, ambient_type = stack[-1]
        entry = next(items, None)
        if entry is None:
            stack.pop()
            continue

        key, value = entry
        if is_metadata_key(key):
            continue

        path = join_path(parent_path, key)
        kind = classify(value)
        yield TreeNode(key=key, path=path, value=value, kind=kind, ambient_type=ambient_type)

        if kind is NodeKind.GROUP:
            stack.append((iter(value.items()), path, value.get("$type") or ambient_type))
