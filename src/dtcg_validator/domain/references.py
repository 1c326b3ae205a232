"""
Reference syntax: a string value of the form "{group.token}".
"""

from __future__ import annotations

import re

# Both patterns are used with fullmatch; a newline is never part of a reference.

# Anything wrapped in braces counts as a reference, including "{}".
# "{}" then fails resolution because no token has the empty path.
REFERENCE_PATTERN = re.compile(r"\{(.*)\}")

# Stricter shape used by string-form value checks (non-empty body).
REFERENCE_LITERAL_PATTERN = re.compile(r"\{.+\}")


def is_reference(value: object) -> bool:
    return isinstance(value, str) and REFERENCE_PATTERN.fullmatch(value) is not None


def looks_like_reference(value: str) -> bool:
    return REFERENCE_LITERAL_PATTERN.fullmatch(value) is not None


def extract_reference_path(reference: str) -> str:
    """
    Return the dotted path inside a reference.

    "{color.primary}" -> "color.primary"
    """
    match = REFERENCE_PATTERN.fullmatch(reference)
    if match is None:
        raise ValueError(f"Not a reference: {reference!r}")
    return match.group(1)


def join_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key
