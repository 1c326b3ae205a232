"""
Color spaces accepted in object-form color tokens.

Each space has a fixed component count and a per-component range. Hue
components are half-open: 0 is allowed, 360 is not.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

INF = math.inf
HUE_MAX = 360


@dataclass(frozen=True)
class ComponentRange:
    """Inclusive numeric range for one color component."""

    min: float
    max: float
    hue: bool = False

    @property
    def bounded(self) -> bool:
        return self.min != -INF and self.max != INF

    @property
    def lower_bounded_only(self) -> bool:
        return self.min != -INF and self.max == INF


@dataclass(frozen=True)
class ColorSpace:
    """A named coordinate system for color components."""

    name: str
    ranges: tuple[ComponentRange, ...]

    @property
    def arity(self) -> int:
        return len(self.ranges)


_UNIT = ComponentRange(0, 1)
_PERCENT = ComponentRange(0, 100)
_HUE = ComponentRange(0, HUE_MAX, hue=True)
_CHROMA = ComponentRange(0, INF)
_UNBOUNDED = ComponentRange(-INF, INF)


def _space(name: str, *ranges: ComponentRange) -> tuple[str, ColorSpace]:
    return name, ColorSpace(name=name, ranges=ranges)


COLOR_SPACES: dict[str, ColorSpace] = dict(
    [
        _space("srgb", _UNIT, _UNIT, _UNIT),
        _space("srgb-linear", _UNIT, _UNIT, _UNIT),
        _space("hsl", _HUE, _PERCENT, _PERCENT),
        _space("hwb", _HUE, _PERCENT, _PERCENT),
        _space("lab", _PERCENT, _UNBOUNDED, _UNBOUNDED),
        _space("lch", _PERCENT, _CHROMA, _HUE),
        _space("oklab", _UNIT, _UNBOUNDED, _UNBOUNDED),
        _space("oklch", _UNIT, _CHROMA, _HUE),
        _space("display-p3", _UNIT, _UNIT, _UNIT),
        _space("a98-rgb", _UNIT, _UNIT, _UNIT),
        _space("prophoto-rgb", _UNIT, _UNIT, _UNIT),
        _space("rec2020", _UNIT, _UNIT, _UNIT),
        _space("xyz-d65", _UNBOUNDED, _UNBOUNDED, _UNBOUNDED),
        _space("xyz-d50", _UNBOUNDED, _UNBOUNDED, _UNBOUNDED),
    ]
)


def get_color_space(name: object) -> ColorSpace | None:
    if not isinstance(name, str):
        return None
    return COLOR_SPACES.get(name)


def supported_color_spaces() -> tuple[str, ...]:
    """Supported space names in table order."""
    return tuple(COLOR_SPACES)


def format_bound(bound: float) -> str:
    """Render a range bound the way messages show it (100, not 100.0)."""
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)
