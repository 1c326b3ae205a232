"""
dtcg-validator: validate W3C design token documents.

Usage:
    from dtcg_validator import validate_tokens
    result = validate_tokens(json_text)
"""

from dtcg_validator.components.analysis import (
    AnalysisReport,
    ErrorCategory,
    ErrorInsight,
    analyze_errors,
)
from dtcg_validator.components.registry import TokenRecord, TokenRegistry, build_registry
from dtcg_validator.components.resolver import Resolved, Unresolved, resolve_reference
from dtcg_validator.components.validation import (
    ValidationResult,
    count_tokens,
    validate_tokens,
    validate_tokens_object,
)
from dtcg_validator.domain.grammar import TokenType

__all__ = [
    # Validation
    "validate_tokens",
    "validate_tokens_object",
    "count_tokens",
    "ValidationResult",
    # Registry / references
    "build_registry",
    "resolve_reference",
    "TokenRecord",
    "TokenRegistry",
    "Resolved",
    "Unresolved",
    "TokenType",
    # Analysis
    "analyze_errors",
    "AnalysisReport",
    "ErrorCategory",
    "ErrorInsight",
]
