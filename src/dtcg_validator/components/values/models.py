"""
Value validator models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Findings:
    """Ordered errors and warnings collected for one token or one run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def merge(self, other: Findings) -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0


ValueValidator = Callable[[Any, str, Findings], None]
"""Checks one concrete value at a token path, appending to findings."""


@dataclass(frozen=True)
class ValidateValueInput:
    """Input for validating a single concrete token value."""

    type: str
    value: Any
    path: str
