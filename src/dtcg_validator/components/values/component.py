"""
Values component - dispatch from token type to its value validator.

The dispatch table is fixed at import time. Types outside the grammar take
the "unknown" path: a warning and no value checks.
"""

from __future__ import annotations

from typing import Any

from dtcg_validator.domain.grammar import TokenType

from . import _impl
from .models import Findings, ValidateValueInput, ValueValidator

VALUE_VALIDATORS: dict[TokenType, ValueValidator] = {
    TokenType.COLOR: _impl.validate_color,
    TokenType.DIMENSION: _impl.validate_dimension,
    TokenType.FONT_FAMILY: _impl.validate_font_family,
    TokenType.FONT_WEIGHT: _impl.validate_font_weight,
    TokenType.DURATION: _impl.validate_duration,
    TokenType.CUBIC_BEZIER: _impl.validate_cubic_bezier,
    TokenType.NUMBER: _impl.validate_number,
    TokenType.STROKE_STYLE: _impl.validate_stroke_style,
    TokenType.BORDER: _impl.validate_border,
    TokenType.TRANSITION: _impl.validate_transition,
    TokenType.SHADOW: _impl.validate_shadow,
    TokenType.GRADIENT: _impl.validate_gradient,
    TokenType.TYPOGRAPHY: _impl.validate_typography,
}


def validate_value(token_type: Any, value: Any, path: str, findings: Findings) -> None:
    """
    Check a concrete value against the validator for its type.

    Args:
        token_type: Effective `$type` of the token (raw, may be unrecognised).
        value: Concrete value, references already resolved.
        path: Dotted token path used in messages.
        findings: Accumulator for errors and warnings.
    """
    parsed = TokenType.parse(token_type)
    if parsed is None:
        findings.warn(f'Unknown $type "{token_type}" at {path}')
        return

    VALUE_VALIDATORS[parsed](value, path, findings)


def run(inp: ValidateValueInput) -> Findings:
    """Component entry point."""
    findings = Findings()
    validate_value(inp.type, inp.value, inp.path, findings)
    return findings
