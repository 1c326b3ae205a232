"""
Resolver component - reference chain resolution with cycle detection.
"""

from .component import CHAIN_SEPARATOR, resolve_reference, run
from .models import Resolution, Resolved, ResolveReferenceInput, Unresolved

__all__ = [
    # Component entry points
    "run",
    "resolve_reference",
    # Models
    "Resolution",
    "Resolved",
    "Unresolved",
    "ResolveReferenceInput",
    # Constants
    "CHAIN_SEPARATOR",
]
