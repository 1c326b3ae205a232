"""
Value validators, one per token type.

Each validator receives a concrete (already reference-resolved) value, the
token path and a Findings accumulator. Validators never raise for malformed
values; a bad sub-field is reported and the rest of the value is still checked.

Message wording is relied on by the error analysis layer.
"""

from __future__ import annotations

import re
from typing import Any

from dtcg_validator.domain.color_spaces import (
    HUE_MAX,
    format_bound,
    get_color_space,
    supported_color_spaces,
)
from dtcg_validator.domain.grammar import (
    BORDER_FIELDS,
    DIMENSION_UNITS,
    DURATION_UNITS,
    FONT_WEIGHT_ALIASES,
    FONT_WEIGHT_MAX,
    FONT_WEIGHT_MIN,
    LINE_CAP_VALUES,
    SHADOW_FIELDS,
    STROKE_STYLE_VALUES,
    TRANSITION_FIELDS,
    TYPOGRAPHY_FIELDS,
    is_number,
)
from dtcg_validator.domain.references import looks_like_reference

from .models import Findings

HEX_COLOR_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")
DIMENSION_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?(px|rem)")


def _is_set(obj: dict[str, Any], key: str) -> bool:
    """A field counts as set when present and not empty, null, false or zero."""
    if key not in obj:
        return False
    value = obj[key]
    if value is None or value is False or value == "":
        return False
    return not (is_number(value) and value == 0)


# --- Color ---


def validate_color(value: Any, path: str, findings: Findings) -> None:
    """
    Validate a color value.

    Accepts a 6-digit hex string (anything else is only a warning) or an
    object with colorSpace, components and optional alpha/hex.
    """
    if isinstance(value, str):
        if not HEX_COLOR_PATTERN.fullmatch(value) and not looks_like_reference(value):
            findings.warn(
                f"Color at {path} should be in 6-digit hex format (#rrggbb) or a reference"
            )
        return

    if not isinstance(value, dict):
        findings.error(f"Color at {path} must be a string or object")
        return

    if not _is_set(value, "colorSpace"):
        findings.error(f"Color object at {path} must have colorSpace property")
        return

    space = get_color_space(value["colorSpace"])
    if space is None:
        findings.error(
            f'Color at {path} has unsupported colorSpace "{value["colorSpace"]}". '
            f"Supported: {', '.join(supported_color_spaces())}"
        )
        return

    components = value.get("components")
    if not isinstance(components, list):
        findings.error(f"Color object at {path} must have components array")
        return

    if len(components) != space.arity:
        findings.error(
            f"Color object at {path} must have components array "
            f"with exactly {space.arity} values"
        )
        return

    for idx, component in enumerate(components):
        component_path = f"{path}.components[{idx}]"
        if component == "none":
            continue
        if not is_number(component):
            findings.error(f'Color component at {component_path} must be a number or "none"')
            continue

        bounds = space.ranges[idx]
        if bounds.hue:
            if component < 0 or component >= HUE_MAX:
                findings.error(
                    f"Color hue component at {component_path} must be >= 0 and < {HUE_MAX}"
                )
        elif bounds.bounded:
            if component < bounds.min or component > bounds.max:
                findings.error(
                    f"Color component at {component_path} must be between "
                    f"{format_bound(bounds.min)} and {format_bound(bounds.max)}"
                )
        elif bounds.lower_bounded_only:
            if component < bounds.min:
                findings.error(
                    f"Color component at {component_path} must be >= {format_bound(bounds.min)}"
                )

    if "hex" in value:
        hex_value = value["hex"]
        if not isinstance(hex_value, str):
            findings.error(f"Color hex property at {path} must be a string")
        elif not HEX_COLOR_PATTERN.fullmatch(hex_value):
            findings.error(f"Color hex property at {path} must be 6-digit hex format (#rrggbb)")

    if "alpha" in value:
        alpha = value["alpha"]
        if not is_number(alpha):
            findings.error(f"Color alpha property at {path} must be a number")
        elif alpha < 0 or alpha > 1:
            findings.error(f"Color alpha property at {path} must be between 0 and 1")


# --- Dimension / duration ---


def validate_dimension(value: Any, path: str, findings: Findings) -> None:
    if isinstance(value, str):
        if not DIMENSION_PATTERN.fullmatch(value) and not looks_like_reference(value):
            findings.error(
                f'Dimension at {path} must be a number with unit "px" or "rem" '
                f'(e.g., "16px", "1rem") or a reference'
            )
    elif isinstance(value, dict):
        if not is_number(value.get("value")):
            findings.error(f"Dimension object at {path} must have numeric value property")
        if value.get("unit") not in DIMENSION_UNITS:
            findings.error(f'Dimension unit at {path} must be "px" or "rem"')
    elif not is_number(value):
        findings.error(
            f"Dimension at {path} must be a number, string with unit, "
            f"or object with value/unit properties"
        )


def validate_duration(value: Any, path: str, findings: Findings) -> None:
    if not isinstance(value, dict):
        findings.error(f"Duration at {path} must be an object with value and unit properties")
        return

    if not is_number(value.get("value")):
        findings.error(f"Duration object at {path} must have numeric value property")
    if value.get("unit") not in DURATION_UNITS:
        findings.error(f'Duration unit at {path} must be "ms" or "s"')


def validate_cubic_bezier(value: Any, path: str, findings: Findings) -> None:
    """[P1x, P1y, P2x, P2y]; only the x coordinates are range-checked."""
    if not isinstance(value, list) or len(value) != 4:
        findings.error(f"cubicBezier at {path} must be an array of exactly 4 numbers")
        return

    for idx, num in enumerate(value):
        if not is_number(num):
            findings.error(f"cubicBezier at {path}[{idx}] must be a number")

    for idx, label in ((0, "P1x"), (2, "P2x")):
        x = value[idx]
        if is_number(x) and (x < 0 or x > 1):
            findings.error(f"cubicBezier at {path}[{idx}] ({label}) must be in range [0, 1]")


# --- Font ---


def validate_font_family(value: Any, path: str, findings: Findings) -> None:
    if not isinstance(value, (str, list)):
        findings.error(f"fontFamily at {path} must be a string or array")


def validate_font_weight(value: Any, path: str, findings: Findings) -> None:
    if is_number(value):
        if value < FONT_WEIGHT_MIN or value > FONT_WEIGHT_MAX:
            findings.error(
                f"fontWeight at {path} must be a number between "
                f"{FONT_WEIGHT_MIN}-{FONT_WEIGHT_MAX}"
            )
    elif isinstance(value, str):
        if value not in FONT_WEIGHT_ALIASES:
            findings.error(
                f'fontWeight at {path} must be a valid weight alias (e.g., "bold", "normal") '
                f"or a number between {FONT_WEIGHT_MIN}-{FONT_WEIGHT_MAX}"
            )
    else:
        findings.error(f"fontWeight at {path} must be a number or string")


def validate_number(value: Any, path: str, findings: Findings) -> None:
    if not is_number(value):
        findings.error(f"number at {path} must be a number")


# --- Stroke style ---


def validate_stroke_style(value: Any, path: str, findings: Findings) -> None:
    if isinstance(value, str):
        if value not in STROKE_STYLE_VALUES:
            findings.error(
                f"strokeStyle at {path} must be one of: {', '.join(STROKE_STYLE_VALUES)}"
            )
        return

    if not isinstance(value, dict):
        findings.error(f"strokeStyle at {path} must be a string or object")
        return

    if not _is_set(value, "dashArray"):
        findings.error(f"strokeStyle object at {path} must have dashArray property")
    elif not isinstance(value["dashArray"], list):
        findings.error(f"strokeStyle dashArray at {path} must be an array")

    if not _is_set(value, "lineCap"):
        findings.error(f"strokeStyle object at {path} must have lineCap property")
    elif value["lineCap"] not in LINE_CAP_VALUES:
        findings.error(f'strokeStyle lineCap at {path} must be "round", "butt", or "square"')


# --- Composites ---


def validate_border(value: Any, path: str, findings: Findings) -> None:
    """Presence check only; nested values are not re-validated here."""
    if not isinstance(value, dict):
        findings.error(f"Border at {path} must be an object")
        return

    for field_name in BORDER_FIELDS:
        if not _is_set(value, field_name):
            findings.error(f"Border at {path} must have {field_name} property")


def validate_transition(value: Any, path: str, findings: Findings) -> None:
    if not isinstance(value, dict):
        findings.error(f"Transition at {path} must be an object")
        return

    for field_name in TRANSITION_FIELDS:
        if not _is_set(value, field_name):
            findings.error(f"Transition at {path} must have {field_name} property")


def _validate_single_shadow(shadow: Any, shadow_path: str, findings: Findings) -> None:
    if not isinstance(shadow, dict):
        findings.error(f"Shadow at {shadow_path} must be an object")
        return

    for field_name in SHADOW_FIELDS:
        if field_name not in shadow:
            findings.error(f"Shadow at {shadow_path} is missing required field: {field_name}")

    if "inset" in shadow and not isinstance(shadow["inset"], bool):
        findings.error(f"Shadow inset property at {shadow_path} must be a boolean")


def validate_shadow(value: Any, path: str, findings: Findings) -> None:
    """A single shadow object or a list of them."""
    if isinstance(value, list):
        for idx, shadow in enumerate(value):
            _validate_single_shadow(shadow, f"{path}[{idx}]", findings)
    else:
        _validate_single_shadow(value, path, findings)


def validate_gradient(value: Any, path: str, findings: Findings) -> None:
    if not isinstance(value, list):
        findings.error(f"Gradient at {path} must be an array of gradient stops")
        return

    for idx, stop in enumerate(value):
        stop_path = f"{path}[{idx}]"
        if not isinstance(stop, dict):
            findings.error(f"Gradient stop at {stop_path} must be an object")
            continue

        if "color" not in stop:
            findings.error(f"Gradient stop at {stop_path} must have color property")

        if "position" not in stop:
            findings.error(f"Gradient stop at {stop_path} must have position property")
        elif not is_number(stop["position"]):
            findings.error(f"Gradient stop position at {stop_path} must be a number")


def validate_typography(value: Any, path: str, findings: Findings) -> None:
    """Five required fields; anything extra is only a warning."""
    if not isinstance(value, dict):
        findings.error(f"Typography at {path} must be an object")
        return

    for field_name in TYPOGRAPHY_FIELDS:
        if field_name not in value:
            findings.error(f"Typography at {path} is missing required field: {field_name}")

    for field_name in value:
        if field_name not in TYPOGRAPHY_FIELDS:
            findings.warn(f"Typography at {path} has unknown field: {field_name}")
