"""
Analysis component models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dtcg_validator.components.validation import ValidationResult


class ErrorCategory(str, Enum):
    STRUCTURE = "structure"
    TYPE = "type"
    VALUE = "value"
    NAMING = "naming"
    REFERENCE = "reference"


@dataclass
class ErrorInsight:
    """One error message with its category and a suggested fix."""

    number: int
    message: str
    category: ErrorCategory = ErrorCategory.VALUE
    path: str = "root"
    suggestion: str | None = None
    details: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "message": self.message,
            "category": self.category.value,
            "path": self.path,
            "suggestion": self.suggestion,
            "details": self.details,
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Validation result annotated with per-error insights."""

    result: ValidationResult
    summary: str
    categories: dict[ErrorCategory, list[ErrorInsight]] = field(default_factory=dict)
    suggestions: list[str] = field(default_factory=list)

    @property
    def insights(self) -> list[ErrorInsight]:
        """All insights in the order the errors were reported."""
        merged = [i for group in self.categories.values() for i in group]
        return sorted(merged, key=lambda i: i.number)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.result.to_dict(),
            "analysis": {
                "summary": self.summary,
                "categories": {
                    category.value: [i.to_dict() for i in insights]
                    for category, insights in self.categories.items()
                },
                "suggestions": list(self.suggestions),
            },
        }


@dataclass(frozen=True)
class AnalyzeInput:
    """Input for analysing a validation result."""

    result: ValidationResult
