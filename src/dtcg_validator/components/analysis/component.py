"""
Analysis component - explain validation errors.

Classifies each error message into a category by matching message patterns
and attaches a suggested fix. The analysed result is never modified: the
error list, warnings and validity are passed through as they are.
"""

from __future__ import annotations

import re

from dtcg_validator.components.validation import ValidationResult
from dtcg_validator.domain.color_spaces import supported_color_spaces
from dtcg_validator.domain.grammar import (
    FONT_WEIGHT_ALIASES,
    STROKE_STYLE_VALUES,
    VALID_TOKEN_TYPES,
)

from .models import AnalysisReport, AnalyzeInput, ErrorCategory, ErrorInsight

NO_ERRORS_SUMMARY = "No errors found"

_AT_PATH = re.compile(r"at ([\w.\[\]-]+)")
_QUOTED_PATH = re.compile(r'"([\w.]+)"')
_QUOTED = re.compile(r'"([^"]+)"')
_FIELD_NAME = re.compile(r"field: (\w+)")
_PROPERTY_NAME = re.compile(r"must have (\w+) property")
_RANGE = re.compile(r"between ([\d.]+) and ([\d.]+)")


def extract_path(message: str) -> str:
    """Token path mentioned in a message, or "root" when there is none."""
    at_match = _AT_PATH.search(message)
    if at_match:
        return at_match.group(1)

    quote_match = _QUOTED_PATH.search(message)
    if quote_match:
        return quote_match.group(1)

    return "root"


def _first(pattern: re.Pattern[str], message: str) -> str | None:
    match = pattern.search(message)
    return match.group(1) if match else None


def analyze_error(message: str, number: int) -> ErrorInsight:
    """
    Classify one error message.

    Args:
        message: Error string as produced by the validator.
        number: 1-based position of the error in the result.

    Returns:
        ErrorInsight; unrecognised messages default to the value category.
    """
    insight = ErrorInsight(number=number, message=message, path=extract_path(message))

    # Reference messages embed arbitrary token paths, so match them first.
    if "Circular reference" in message:
        insight.category = ErrorCategory.REFERENCE
        insight.suggestion = (
            "Break the cycle by giving one token in the chain a concrete $value "
            "instead of a reference."
        )
        insight.details = "References must eventually resolve to a concrete value."
    elif "points to non-existent token" in message:
        insight.category = ErrorCategory.REFERENCE
        target = _first(_QUOTED, message)
        if target:
            insight.suggestion = (
                f"Check the spelling of {target} or define a token at that path. "
                f"Reference paths use dots between group and token names."
            )
        insight.details = "A reference must point to a token defined in the same document."
    elif "Invalid JSON" in message:
        insight.category = ErrorCategory.STRUCTURE
        insight.suggestion = (
            "Check for missing commas, brackets, or quotes. "
            "Use a JSON validator to find syntax errors."
        )
        insight.details = (
            "The input is not valid JSON. Common issues include trailing commas, "
            "unquoted keys, or mismatched brackets."
        )
    elif "Root must be an object" in message:
        insight.category = ErrorCategory.STRUCTURE
        insight.suggestion = (
            'Wrap your tokens in a JSON object with curly braces: { "color": { ... } }'
        )
        insight.details = (
            "Design tokens must be defined within a root object, "
            "not as an array or primitive value."
        )
    elif "Input is empty" in message:
        insight.category = ErrorCategory.STRUCTURE
        insight.suggestion = "Provide a design tokens JSON document."
        insight.details = "No input was provided for validation."
    elif "missing $value" in message:
        insight.category = ErrorCategory.STRUCTURE
        insight.suggestion = (
            f'Add a "$value" property to the token at {insight.path}. '
            f'Example: "$value": "#ff0000"'
        )
        insight.details = (
            "All tokens must have a $value property that contains the actual token value."
        )
    elif "no determinable type" in message:
        insight.category = ErrorCategory.TYPE
        insight.suggestion = (
            'Add a "$type" to the token or to an enclosing group, '
            "or reference a token that has one."
        )
        insight.details = (
            "A token's type comes from its own $type, its group's $type, "
            "or the token its reference resolves to."
        )
    elif "Unknown $type" in message:
        insight.category = ErrorCategory.TYPE
        declared = _first(_QUOTED, message)
        if declared:
            insight.suggestion = (
                f'Change "$type": "{declared}" to one of: {", ".join(VALID_TOKEN_TYPES)}'
            )
        insight.details = (
            f"The $type must be one of the {len(VALID_TOKEN_TYPES)} supported token types."
        )
    elif "contains invalid characters" in message:
        insight.category = ErrorCategory.NAMING
        insight.suggestion = (
            'Token names cannot contain dots (.), curly braces ({ }), or quotes ("). '
            "Use hyphens or underscores instead."
        )
        insight.details = (
            "Dots separate path segments and braces delimit references, "
            "so neither may appear inside a name."
        )
    elif "Shadow" in message and "missing required field" in message:
        insight.category = ErrorCategory.STRUCTURE
        missing = _first(_FIELD_NAME, message)
        if missing:
            insight.suggestion = (
                f'Add the "{missing}" property to your shadow object. '
                f"Shadows require: offsetX, offsetY, blur, spread, and color."
            )
        insight.details = (
            "Shadow tokens must have all required fields: offsetX, offsetY, blur, "
            "spread, and color. Inset is optional."
        )
    elif "Typography" in message and "missing required field" in message:
        insight.category = ErrorCategory.STRUCTURE
        missing = _first(_FIELD_NAME, message)
        if missing:
            insight.suggestion = (
                f'Add the "{missing}" property. Typography requires: fontFamily, '
                f"fontSize, fontWeight, lineHeight, and letterSpacing."
            )
        insight.details = "Typography tokens must have all 5 required fields."
    elif "Border" in message and "must have" in message:
        insight.category = ErrorCategory.STRUCTURE
        prop = _first(_PROPERTY_NAME, message)
        if prop:
            insight.suggestion = (
                f'Add the "{prop}" property. Border requires: color, width, and style.'
            )
        insight.details = (
            "Border tokens are composite types requiring color, width, and style properties."
        )
    elif "Transition" in message and "must have" in message:
        insight.category = ErrorCategory.STRUCTURE
        prop = _first(_PROPERTY_NAME, message)
        if prop:
            insight.suggestion = (
                f'Add the "{prop}" property. Transition requires: duration, delay, '
                f"and timingFunction."
            )
        insight.details = (
            "Transition tokens define animation timing with duration, delay, and easing."
        )
    elif "colorSpace" in message:
        insight.category = ErrorCategory.VALUE
        if "must have colorSpace" in message:
            insight.suggestion = 'Add "colorSpace" property. Example: "colorSpace": "srgb"'
        elif "unsupported colorSpace" in message:
            spaces = supported_color_spaces()
            insight.suggestion = (
                f"Use one of the {len(spaces)} supported color spaces: {', '.join(spaces)}"
            )
        insight.details = "Color tokens using object format must specify a valid colorSpace."
    elif "components" in message:
        insight.category = ErrorCategory.VALUE
        if "must have components array" in message and "exactly" not in message:
            insight.suggestion = (
                'Add "components" array with color values. '
                'Example: "components": [1, 0, 0] for red in sRGB.'
            )
        elif "exactly" in message:
            insight.suggestion = (
                'Color components must be an array of exactly 3 numeric values or "none".'
            )
        elif 'must be a number or "none"' in message:
            insight.suggestion = 'Each component must be either a number or the string "none".'
        elif "must be between" in message:
            bounds = _RANGE.search(message)
            if bounds:
                insight.suggestion = (
                    f"Component value must be in range [{bounds.group(1)}, {bounds.group(2)}]. "
                    f"Check the color space requirements."
                )
        elif "must be >= 0 and < 360" in message:
            insight.suggestion = (
                "Hue values must be in the range [0, 360) - note that 360 is NOT valid, "
                "use 0 instead for a full rotation."
            )
        elif "must be >=" in message:
            insight.suggestion = "Chroma values cannot be negative."
        insight.details = (
            "Color components must conform to the range requirements of their color space."
        )
    elif "alpha" in message:
        insight.category = ErrorCategory.VALUE
        insight.suggestion = (
            "Alpha must be a number between 0 and 1, where 0 is fully transparent "
            "and 1 is fully opaque."
        )
        insight.details = (
            "The alpha channel controls opacity and must be a numeric value in the range [0, 1]."
        )
    elif "hex property" in message:
        insight.category = ErrorCategory.VALUE
        insight.suggestion = 'Use a 6-digit hex string such as "#ff0000".'
        insight.details = "The optional hex property is a fallback and has no alpha digits."
    elif "fontWeight" in message:
        insight.category = ErrorCategory.VALUE
        aliases = list(FONT_WEIGHT_ALIASES)
        if "valid weight alias" in message:
            insight.suggestion = f"Use one of these aliases: {', '.join(aliases)}"
        elif "between 1-1000" in message:
            insight.suggestion = (
                f"Use a numeric weight between 1-1000, or use an alias like: "
                f"{', '.join(aliases[:5])}, etc."
            )
        insight.details = "Font weight must be a number 1-1000 or a recognized weight alias."
    elif "Dimension" in message and "unit" in message:
        insight.category = ErrorCategory.VALUE
        insight.suggestion = 'Dimension units must be "px" or "rem".'
        insight.details = 'Only "px" and "rem" units are allowed for dimensions.'
    elif "Duration" in message and "unit" in message:
        insight.category = ErrorCategory.VALUE
        insight.suggestion = 'Duration units must be "ms" (milliseconds) or "s" (seconds).'
        insight.details = "Duration values must use milliseconds or seconds as the unit."
    elif "cubicBezier" in message:
        insight.category = ErrorCategory.VALUE
        if "exactly 4 numbers" in message:
            insight.suggestion = (
                "cubicBezier must be an array of 4 numbers: [P1x, P1y, P2x, P2y]. "
                "Example: [0.42, 0, 0.58, 1]"
            )
        elif "must be in range [0, 1]" in message:
            insight.suggestion = (
                "X coordinates (P1x and P2x) must be between 0 and 1. "
                "Y coordinates can be any value."
            )
        insight.details = "Cubic bezier values define easing curves with control points."
    elif "strokeStyle" in message:
        insight.category = ErrorCategory.VALUE
        insight.suggestion = (
            f"Use one of: {', '.join(STROKE_STYLE_VALUES)}, "
            f"or provide an object with dashArray and lineCap."
        )
        insight.details = (
            "Stroke style can be a predefined string or a custom object with dash patterns."
        )
    elif "Gradient" in message:
        insight.category = ErrorCategory.VALUE
        if "must be an array" in message:
            insight.suggestion = (
                'Gradients must be an array of stops. Example: [{"color": "#000000", '
                '"position": 0}, {"color": "#ffffff", "position": 1}]'
            )
        elif "must have color property" in message:
            insight.suggestion = 'Each gradient stop must have a "color" property.'
        elif "must have position property" in message:
            insight.suggestion = (
                'Each gradient stop must have a "position" property (typically 0 to 1).'
            )
        insight.details = "Gradients are arrays of color stops, each with a color and position."

    return insight


def _summarize(total: int, categories: dict[ErrorCategory, list[ErrorInsight]]) -> str:
    counts = ", ".join(
        f"{len(insights)} {category.value}"
        for category, insights in categories.items()
        if insights
    )
    return f"Found {total} error(s): {counts}"


def analyze_errors(result: ValidationResult) -> AnalysisReport:
    """
    Annotate every error of a validation result.

    Args:
        result: Result from the validation component.

    Returns:
        AnalysisReport with insights grouped by category (each group in
        error order), the suggestions and a one-line summary.
    """
    if not result.errors:
        return AnalysisReport(result=result, summary=NO_ERRORS_SUMMARY)

    categories: dict[ErrorCategory, list[ErrorInsight]] = {c: [] for c in ErrorCategory}
    suggestions: list[str] = []

    for number, message in enumerate(result.errors, start=1):
        insight = analyze_error(message, number)
        categories[insight.category].append(insight)
        if insight.suggestion:
            suggestions.append(insight.suggestion)

    return AnalysisReport(
        result=result,
        summary=_summarize(len(result.errors), categories),
        categories=categories,
        suggestions=suggestions,
    )


def run(inp: AnalyzeInput) -> AnalysisReport:
    """Component entry point."""
    return analyze_errors(inp.result)
