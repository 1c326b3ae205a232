"""
Validation component - validate design token documents.
"""

from .component import (
    EMPTY_INPUT,
    ROOT_NOT_OBJECT,
    count_tokens,
    parse_document,
    run,
    run_validate_document,
    run_validate_text,
    validate_token,
    validate_tokens,
    validate_tokens_object,
    validate_tree,
)
from .models import ValidateDocumentInput, ValidateTextInput, ValidationResult

__all__ = [
    # Component entry points
    "run",
    "run_validate_text",
    "run_validate_document",
    "validate_tokens",
    "validate_tokens_object",
    # Building blocks
    "validate_tree",
    "validate_token",
    "count_tokens",
    "parse_document",
    # Models
    "ValidateTextInput",
    "ValidateDocumentInput",
    "ValidationResult",
    # Constants
    "EMPTY_INPUT",
    "ROOT_NOT_OBJECT",
]
