"""
Type grammar for design tokens.

Static tables only: the thirteen recognised token types, font-weight aliases,
stroke-style names and the unit sets used by the value validators.
"""

from __future__ import annotations

from enum import Enum


class TokenType(str, Enum):
    """Recognised `$type` identifiers."""

    COLOR = "color"
    DIMENSION = "dimension"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    NUMBER = "number"
    STROKE_STYLE = "strokeStyle"
    BORDER = "border"
    TRANSITION = "transition"
    SHADOW = "shadow"
    GRADIENT = "gradient"
    TYPOGRAPHY = "typography"

    @classmethod
    def parse(cls, raw: object) -> TokenType | None:
        """Map a raw `$type` to a member, or None when it is not recognised."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


VALID_TOKEN_TYPES: tuple[str, ...] = tuple(t.value for t in TokenType)

# --- Font weight ---

FONT_WEIGHT_ALIASES: dict[str, int] = {
    "thin": 100,
    "hairline": 100,
    "extra-light": 200,
    "ultra-light": 200,
    "light": 300,
    "normal": 400,
    "regular": 400,
    "book": 400,
    "medium": 500,
    "semi-bold": 600,
    "demi-bold": 600,
    "bold": 700,
    "extra-bold": 800,
    "ultra-bold": 800,
    "black": 900,
    "heavy": 900,
    "extra-black": 950,
    "ultra-black": 950,
}

FONT_WEIGHT_MIN = 1
FONT_WEIGHT_MAX = 1000

# --- Stroke style ---

STROKE_STYLE_VALUES: tuple[str, ...] = (
    "solid",
    "dashed",
    "dotted",
    "double",
    "groove",
    "ridge",
    "outset",
    "inset",
)

LINE_CAP_VALUES: tuple[str, ...] = ("round", "butt", "square")

# --- Units ---

DIMENSION_UNITS: tuple[str, ...] = ("px", "rem")
DURATION_UNITS: tuple[str, ...] = ("ms", "s")

# --- Composite fields ---

BORDER_FIELDS: tuple[str, ...] = ("color", "width", "style")
TRANSITION_FIELDS: tuple[str, ...] = ("duration", "delay", "timingFunction")
SHADOW_FIELDS: tuple[str, ...] = ("offsetX", "offsetY", "blur", "spread", "color")
TYPOGRAPHY_FIELDS: tuple[str, ...] = (
    "fontFamily",
    "fontSize",
    "fontWeight",
    "letterSpacing",
    "lineHeight",
)

# Keys starting with this prefix are metadata, never child names.
METADATA_PREFIX = "$"

# Characters a token or group name may not contain.
FORBIDDEN_NAME_CHARACTERS = frozenset('{}."')


def is_metadata_key(key: str) -> bool:
    return key.startswith(METADATA_PREFIX)


def is_number(value: object) -> bool:
    """True for int/float values; booleans do not count as numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
