"""
Validation component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidateTextInput:
    """Input for validating raw JSON text."""

    raw_text: str | None


@dataclass(frozen=True)
class ValidateDocumentInput:
    """Input for validating an already parsed document."""

    document: Any


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of one validation run.

    Errors and warnings are in document order (depth first, children in
    declaration order). Warnings never affect validity.
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    token_count: int = 0

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        """Result for input rejected before any token was looked at."""
        return cls(valid=False, errors=[message])

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "tokenCount": self.token_count,
        }
