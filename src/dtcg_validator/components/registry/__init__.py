"""
Registry component - flat lookup of tokens by dotted path.
"""

from .component import build_registry, run
from .models import BuildRegistryInput, BuildRegistryOutput, TokenRecord, TokenRegistry

__all__ = [
    # Component entry points
    "run",
    "build_registry",
    # Models
    "BuildRegistryInput",
    "BuildRegistryOutput",
    "TokenRecord",
    "TokenRegistry",
]
