"""
Values component - type-specific value validation.
"""

from ._impl import (
    validate_border,
    validate_color,
    validate_cubic_bezier,
    validate_dimension,
    validate_duration,
    validate_font_family,
    validate_font_weight,
    validate_gradient,
    validate_number,
    validate_shadow,
    validate_stroke_style,
    validate_transition,
    validate_typography,
)
from .component import VALUE_VALIDATORS, run, validate_value
from .models import Findings, ValidateValueInput, ValueValidator

__all__ = [
    # Component entry points
    "run",
    "validate_value",
    # Models
    "Findings",
    "ValidateValueInput",
    "ValueValidator",
    # Dispatch table
    "VALUE_VALIDATORS",
    # Per-type validators
    "validate_border",
    "validate_color",
    "validate_cubic_bezier",
    "validate_dimension",
    "validate_duration",
    "validate_font_family",
    "validate_font_weight",
    "validate_gradient",
    "validate_number",
    "validate_shadow",
    "validate_stroke_style",
    "validate_transition",
    "validate_typography",
]
